import argparse
import json
import logging
import sys
from dataclasses import replace

from dotenv import load_dotenv

from config import ConfigError, load_config
from espn_http import Success, resolve
from team_utils import normalize_league


def report(candidate, detail):
    status = "JSON OK" if detail is None else detail
    print(f"GET season={candidate.season} host={candidate.host} -> {status}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Probe ESPN for a usable (season, host) pair.")
    parser.add_argument("--season", type=int, help="Season to try first (overrides SEASON_ID).")
    parser.add_argument("--no-redirect-check", action="store_true", help="Skip the non-following pre-flight request.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        config = load_config()
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 2

    overrides = {}
    if args.season is not None:
        overrides["season"] = args.season
    if args.no_redirect_check:
        overrides["detect_redirects"] = False
    if overrides:
        config = replace(config, **overrides)

    result = resolve(config, on_attempt=report)
    if not isinstance(result, Success):
        print(f"No JSON from any season/host. Tried seasons {result.tried_seasons}. Last: {result.last_detail}", file=sys.stderr)
        return 1

    print(json.dumps(normalize_league(result.document, result.season_used), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
