import pytest

from config import DEFAULT_FALLBACK_SEASONS, DEFAULT_HOSTS, ConfigError, load_config


def test_load_config_defaults(league_env):
    config = load_config(league_env)

    assert config.league_id == "123456"
    assert config.season is None
    assert config.fallback_seasons == DEFAULT_FALLBACK_SEASONS
    assert config.hosts == DEFAULT_HOSTS
    assert config.detect_redirects is True
    assert config.timeout == 20
    assert config.cookie_header == "SWID={SWID-TOKEN}; espn_s2=s2-token"


def test_load_config_overrides(league_env):
    config = load_config(
        {
            **league_env,
            "SEASON_ID": "2023",
            "ESPN_FALLBACK_SEASONS": "2024, 2023",
            "ESPN_HOSTS": "https://lm-api-reads.fantasy.espn.com/",
            "ESPN_DETECT_REDIRECTS": "false",
            "ESPN_TIMEOUT": "5.5",
        }
    )

    assert config.season == 2023
    assert config.fallback_seasons == (2024, 2023)
    assert config.hosts == ("https://lm-api-reads.fantasy.espn.com",)
    assert config.detect_redirects is False
    assert config.timeout == 5.5


def test_blank_season_is_treated_as_unset(league_env):
    assert load_config({**league_env, "SEASON_ID": " "}).season is None


def test_unreadable_season_is_ignored_with_warning(league_env, caplog):
    with caplog.at_level("WARNING", logger="config"):
        config = load_config({**league_env, "SEASON_ID": "abc"})

    assert config.season is None
    assert "SEASON_ID" in caplog.text


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("ESPN_FALLBACK_SEASONS", "2025,x", "ESPN_FALLBACK_SEASONS must be an integer."),
        ("ESPN_TIMEOUT", "soon", "ESPN_TIMEOUT must be a number."),
    ],
)
def test_malformed_values_raise(league_env, key, value, message):
    with pytest.raises(ConfigError, match=message):
        load_config({**league_env, key: value})


def test_missing_credentials_raise():
    with pytest.raises(ConfigError, match="Missing env vars"):
        load_config({"LEAGUE_ID": "1", "ESPN_S2": "s2"})
