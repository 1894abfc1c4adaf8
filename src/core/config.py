"""Configuration settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from core.exceptions import ConfigError

DEFAULT_REDIRECT_URI = "http://127.0.0.1:3000/callback"
DEFAULT_LRCLIB_URL = "https://lrclib.net"
DEFAULT_USER_AGENT = "synclyrics/0.1"

# Timing
POLL_INTERVAL_MS = 5000
TICK_INTERVAL_MS = 100
LEAD_OFFSET_S = 0.5
HTTP_TIMEOUT_S = 15.0


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class AppConfig:
    spotify_client_id: str = ""
    spotify_client_secret: str = ""
    spotify_redirect_uri: str = DEFAULT_REDIRECT_URI
    lrclib_base_url: str = DEFAULT_LRCLIB_URL
    user_agent: str = DEFAULT_USER_AGENT
    poll_interval_ms: int = POLL_INTERVAL_MS
    tick_interval_ms: int = TICK_INTERVAL_MS
    lead_offset_s: float = LEAD_OFFSET_S
    http_timeout_s: float = HTTP_TIMEOUT_S
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        cfg = cls(
            spotify_client_id=os.getenv("SPOTIFY_CLIENT_ID", ""),
            spotify_client_secret=os.getenv("SPOTIFY_CLIENT_SECRET", ""),
            spotify_redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI") or DEFAULT_REDIRECT_URI,
            lrclib_base_url=os.getenv("SYNCLYRICS_LRCLIB_URL") or DEFAULT_LRCLIB_URL,
            user_agent=os.getenv("SYNCLYRICS_USER_AGENT") or DEFAULT_USER_AGENT,
            poll_interval_ms=_env_number("SYNCLYRICS_POLL_INTERVAL_MS", POLL_INTERVAL_MS, int),
            tick_interval_ms=_env_number("SYNCLYRICS_TICK_INTERVAL_MS", TICK_INTERVAL_MS, int),
            lead_offset_s=_env_number("SYNCLYRICS_LEAD_OFFSET", LEAD_OFFSET_S, float),
            http_timeout_s=_env_number("SYNCLYRICS_HTTP_TIMEOUT", HTTP_TIMEOUT_S, float),
            log_level=(os.getenv("SYNCLYRICS_LOG_LEVEL") or "INFO").upper(),
        )
        cfg.validate()
        return cfg

    def validate(self) -> None:
        """Validate configuration values."""
        if self.poll_interval_ms <= 0:
            raise ConfigError("Invalid poll interval")

        if self.tick_interval_ms <= 0:
            raise ConfigError("Invalid tick interval")

        if self.lead_offset_s < 0:
            raise ConfigError("Lead offset must not be negative")

        if self.http_timeout_s <= 0:
            raise ConfigError("Invalid HTTP timeout")

    @property
    def has_spotify_credentials(self) -> bool:
        return bool(self.spotify_client_id and self.spotify_redirect_uri)
