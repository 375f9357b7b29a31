"""Environment configuration for the ESPN league feed."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping

PRIMARY_HOST = "https://fantasy.espn.com"
READS_HOST = "https://lm-api-reads.fantasy.espn.com"

DEFAULT_HOSTS = (PRIMARY_HOST, READS_HOST)
DEFAULT_FALLBACK_SEASONS = (2025, 2024, 2023, 2022)
DEFAULT_TIMEOUT = 20

logger = logging.getLogger(__name__)

MISSING_ENV_MESSAGE = "Missing env vars. Set LEAGUE_ID, SEASON_ID (optional), ESPN_S2, SWID."


class ConfigError(ValueError):
    """Raised when required settings are missing or malformed."""


@dataclass(frozen=True)
class LeagueConfig:
    league_id: str
    espn_s2: str
    swid: str
    season: int | None = None
    fallback_seasons: tuple[int, ...] = DEFAULT_FALLBACK_SEASONS
    hosts: tuple[str, ...] = DEFAULT_HOSTS
    detect_redirects: bool = True
    timeout: float = DEFAULT_TIMEOUT

    @property
    def cookie_header(self) -> str:
        return f"SWID={self.swid}; espn_s2={self.espn_s2}"


def _int_or_none(raw, name):
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer.") from exc


def _csv(raw):
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def load_config(environ: Mapping[str, str] | None = None) -> LeagueConfig:
    env = os.environ if environ is None else environ

    league_id = env.get("LEAGUE_ID")
    espn_s2 = env.get("ESPN_S2")
    swid = env.get("SWID")
    if not league_id or not espn_s2 or not swid:
        raise ConfigError(MISSING_ENV_MESSAGE)

    try:
        season = _int_or_none(env.get("SEASON_ID"), "SEASON_ID")
    except ConfigError:
        # optional; an unreadable value just means no preferred season
        logger.warning("Ignoring SEASON_ID=%r, not an integer", env.get("SEASON_ID"))
        season = None

    fallbacks = tuple(
        _int_or_none(s, "ESPN_FALLBACK_SEASONS") for s in _csv(env.get("ESPN_FALLBACK_SEASONS"))
    )
    hosts = tuple(h.rstrip("/") for h in _csv(env.get("ESPN_HOSTS")))

    timeout_raw = env.get("ESPN_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ConfigError("ESPN_TIMEOUT must be a number.") from exc

    detect = env.get("ESPN_DETECT_REDIRECTS", "").strip().lower() not in ("0", "false", "no")

    return LeagueConfig(
        league_id=str(league_id),
        espn_s2=espn_s2,
        swid=swid,
        season=season,
        fallback_seasons=fallbacks or DEFAULT_FALLBACK_SEASONS,
        hosts=hosts or DEFAULT_HOSTS,
        detect_redirects=detect,
        timeout=timeout,
    )
