from typing import Mapping

from utils import first_present, present

DEFAULT_MANAGER = "Manager"
DEFAULT_LEAGUE_NAME = "Fantasy League"


def member_display(m: Mapping) -> str:
    """displayName → firstName → 'Manager'."""
    return first_present(m.get("displayName"), m.get("firstName"), default=DEFAULT_MANAGER)


def team_display(t: Mapping) -> str:
    """
    Return a human-friendly team name using whatever fields ESPN provides.
    Tries (location + nickname) → name → 'Team {id}'.
    """
    loc = t.get("location")
    nick = t.get("nickname")
    if present(loc) and present(nick):
        return f"{loc} {nick}"

    if present(t.get("name")):
        return t["name"]

    return f"Team {t.get('id')}"


def team_owner(t: Mapping, members: Mapping) -> str:
    primary = members.get(t.get("primaryOwner"))
    if present(primary):
        return primary

    owners = t.get("owners") or []
    if owners:
        first = members.get(owners[0])
        if present(first):
            return first

    return ""


def normalize_league(league: Mapping, season: int) -> dict:
    """Flatten a raw mTeam/mMembers/mSettings document into the feed payload."""
    members = {m.get("id"): member_display(m) for m in (league.get("members") or [])}

    teams = [
        {
            "id": t.get("id"),
            "name": team_display(t),
            "logo": first_present(t.get("logo")),
            "owner": team_owner(t, members),
        }
        for t in (league.get("teams") or [])
    ]

    settings = league.get("settings") or {}
    return {
        "meta": {
            "leagueName": first_present(settings.get("name"), default=DEFAULT_LEAGUE_NAME),
            "season": season,
        },
        "teams": teams,
    }
