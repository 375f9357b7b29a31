"""Find the (season, host) pair that returns usable league JSON from ESPN.

ESPN answers the same league endpoint very differently depending on host,
season and cookie state: a login redirect, an HTML page served with 200, a 401
for the wrong season. Candidates are tried in order and the first one whose
body parses as JSON wins. Only the latest failure is kept as the
diagnostic.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable

import requests

from config import LeagueConfig
from utils import clip

logger = logging.getLogger(__name__)

VIEWS = ["mTeam", "mMembers", "mSettings"]

# ESPN is picky about casing and headers; without these it serves HTML.
BROWSER_HEADERS = {
    "accept": "application/json, text/plain, */*",
    "referer": "https://fantasy.espn.com/",
    "origin": "https://fantasy.espn.com",
    "user-agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    "x-fantasy-source": "kona",
    "x-fantasy-platform": "kona-PROD-bundle-web",
}

LOCATION_LIMIT = 180
BODY_LIMIT = 200


@dataclass(frozen=True)
class Candidate:
    season: int
    host: str

    def url(self, league_id: str) -> str:
        return (
            f"{self.host.rstrip('/')}/apis/v3/games/ffl/seasons/{self.season}"
            f"/segments/0/leagues/{league_id}"
        )


@dataclass(frozen=True)
class Success:
    document: Any
    season_used: int


@dataclass(frozen=True)
class Failure:
    last_detail: str | None
    tried_seasons: list[int]


def season_order(requested: int | None, fallbacks: Iterable[int]) -> list[int]:
    """Requested season first, then fallbacks in order, without repeats."""
    seasons: list[int] = []
    for s in ([requested] if requested is not None else []) + list(fallbacks):
        if s not in seasons:
            seasons.append(s)
    return seasons


def candidates(seasons: Iterable[int], hosts: Iterable[str]) -> list[Candidate]:
    hosts = list(hosts)
    return [Candidate(season=s, host=h) for s in seasons for h in hosts]


def request_headers(config):
    return {"Cookie": config.cookie_header, **BROWSER_HEADERS}


def try_candidate(candidate, config, http=requests):
    """Returns (document, None) once the body parses as JSON, else (None, diagnostic)."""
    url = candidate.url(config.league_id)
    kwargs = {
        "headers": request_headers(config),
        "params": [("view", v) for v in VIEWS],
        "timeout": config.timeout,
    }

    try:
        resp = None
        if config.detect_redirects:
            resp = http.get(url, allow_redirects=False, **kwargs)
            if 300 <= resp.status_code < 400:
                loc = resp.headers.get("location") or ""
                return None, f"Redirected ({resp.status_code}) to: {clip(loc, LOCATION_LIMIT)}"

        # the pre-flight already is the final answer when it did not redirect
        if resp is None:
            resp = http.get(url, allow_redirects=True, **kwargs)
        text = resp.text
    except requests.RequestException as exc:
        return None, str(exc) or exc.__class__.__name__

    if not 200 <= resp.status_code < 300:
        return None, f"HTTP {resp.status_code}: {clip(text, BODY_LIMIT)}"

    try:
        document = json.loads(text)
    except ValueError:
        return None, f"Non-JSON body (likely login/HTML): {clip(text, BODY_LIMIT)}"

    return document, None


def resolve(config: LeagueConfig, http=requests, on_attempt=None) -> Success | Failure:
    """Try candidates in order; `on_attempt(candidate, detail)` sees each outcome, detail None on success."""
    seasons = season_order(config.season, config.fallback_seasons)
    last_detail = None

    for candidate in candidates(seasons, config.hosts):
        logger.info("Trying ESPN season %s via %s", candidate.season, candidate.host)
        document, detail = try_candidate(candidate, config, http=http)
        if on_attempt is not None:
            on_attempt(candidate, detail)

        if detail is None:
            logger.info("League %s resolved with season %s via %s", config.league_id, candidate.season, candidate.host)
            return Success(document=document, season_used=candidate.season)

        logger.warning("Season %s via %s failed: %s", candidate.season, candidate.host, detail)
        last_detail = detail

    return Failure(last_detail=last_detail, tried_seasons=seasons)
