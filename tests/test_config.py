import pytest

from core.config import AppConfig, DEFAULT_REDIRECT_URI
from core.exceptions import ConfigError

ENV_VARS = [
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_REDIRECT_URI",
    "SYNCLYRICS_LRCLIB_URL",
    "SYNCLYRICS_USER_AGENT",
    "SYNCLYRICS_POLL_INTERVAL_MS",
    "SYNCLYRICS_TICK_INTERVAL_MS",
    "SYNCLYRICS_LEAD_OFFSET",
    "SYNCLYRICS_HTTP_TIMEOUT",
    "SYNCLYRICS_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = AppConfig.from_env()
    assert cfg.poll_interval_ms == 5000
    assert cfg.tick_interval_ms == 100
    assert cfg.lead_offset_s == 0.5
    assert cfg.spotify_redirect_uri == DEFAULT_REDIRECT_URI
    assert cfg.log_level == "INFO"
    assert not cfg.has_spotify_credentials


def test_overrides(monkeypatch):
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "cid")
    monkeypatch.setenv("SYNCLYRICS_POLL_INTERVAL_MS", "3000")
    monkeypatch.setenv("SYNCLYRICS_LEAD_OFFSET", "0.25")
    monkeypatch.setenv("SYNCLYRICS_LOG_LEVEL", "debug")

    cfg = AppConfig.from_env()
    assert cfg.has_spotify_credentials
    assert cfg.poll_interval_ms == 3000
    assert cfg.lead_offset_s == 0.25
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name,value",
    [
        ("SYNCLYRICS_POLL_INTERVAL_MS", "0"),
        ("SYNCLYRICS_TICK_INTERVAL_MS", "-5"),
        ("SYNCLYRICS_LEAD_OFFSET", "-1"),
        ("SYNCLYRICS_HTTP_TIMEOUT", "0"),
        ("SYNCLYRICS_POLL_INTERVAL_MS", "soon"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        AppConfig.from_env()
