import pytest

from config import PRIMARY_HOST, LeagueConfig


@pytest.fixture
def league_config() -> LeagueConfig:
    return LeagueConfig(
        league_id="123456",
        espn_s2="s2-token",
        swid="{SWID-TOKEN}",
        hosts=(PRIMARY_HOST,),
        detect_redirects=False,
    )


@pytest.fixture
def league_env():
    return {"LEAGUE_ID": "123456", "ESPN_S2": "s2-token", "SWID": "{SWID-TOKEN}"}


@pytest.fixture
def raw_league():
    return {
        "id": 123456,
        "settings": {"name": "Justice League"},
        "members": [
            {"id": "{A}", "displayName": "bruce", "firstName": "Bruce"},
            {"id": "{B}", "firstName": "Diana"},
            {"id": "{C}"},
        ],
        "teams": [
            {"id": 1, "location": "Gotham", "nickname": "Knights", "logo": "https://x/1.png", "primaryOwner": "{A}", "owners": ["{A}"]},
            {"id": 2, "name": "Themyscira", "owners": ["{B}"]},
            {"id": 3, "location": "Metropolis", "primaryOwner": "{C}"},
        ],
    }
