"""Serverless entry point: resolve the league on ESPN and return the feed JSON."""

import json
import logging

import requests

from config import ConfigError, LeagueConfig, load_config
from espn_http import Failure, resolve
from team_utils import normalize_league

logger = logging.getLogger(__name__)

FETCH_FAILED = "ESPN fetch failed"


def json_response(body: dict, status_code: int) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"content-type": "application/json"},
        "body": json.dumps(body),
    }


def handle(config: LeagueConfig, http=requests) -> dict:
    result = resolve(config, http=http)
    if isinstance(result, Failure):
        logger.error("League %s unresolved after seasons %s: %s", config.league_id, result.tried_seasons, result.last_detail)
        return json_response(
            {"error": FETCH_FAILED, "detail": result.last_detail, "triedSeasons": result.tried_seasons},
            500,
        )
    return json_response(normalize_league(result.document, result.season_used), 200)


def handler(event=None, context=None, environ=None, http=requests) -> dict:
    try:
        try:
            config = load_config(environ)
        except ConfigError as exc:
            logger.error("Configuration error: %s", exc)
            return json_response({"error": str(exc)}, 500)
        return handle(config, http=http)
    except Exception as exc:
        logger.exception("Unexpected failure building league feed")
        return json_response({"error": str(exc) or exc.__class__.__name__}, 500)


if __name__ == "__main__":
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print(json.dumps(handler(), indent=2))
