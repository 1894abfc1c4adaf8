# spotify/auth.py
from __future__ import annotations

import logging
import threading
import time
from typing import Optional
from urllib.parse import urlencode

import requests

from core.exceptions import AuthError, ConfigError

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
TOKEN_URL = "https://accounts.spotify.com/api/token"
SCOPES = "user-read-playback-state"


class SpotifyAuth:
    """
    Authorization-code flow and token holder.

    Tokens live in memory only. refresh() may be called from a worker
    thread while the UI reads expiry, so token fields are guarded.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout_s: float = 15.0,
        session: requests.Session | None = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

        self._lock = threading.Lock()
        self._access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None
        self._expires_at: Optional[float] = None

    # --- token state ---
    @property
    def access_token(self) -> Optional[str]:
        with self._lock:
            return self._access_token

    @property
    def expires_at(self) -> Optional[float]:
        with self._lock:
            return self._expires_at

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return bool(self._access_token)

    def minutes_left(self, now: float | None = None) -> Optional[int]:
        expires_at = self.expires_at
        if expires_at is None:
            return None
        now = time.time() if now is None else now
        return int((expires_at - now) // 60)

    def _store(self, data: dict) -> None:
        access = data.get("access_token")
        if not access:
            raise AuthError("Token response did not include an access token")
        expires_in = data.get("expires_in")
        with self._lock:
            self._access_token = access
            # refresh responses may omit the refresh token
            if data.get("refresh_token"):
                self._refresh_token = data["refresh_token"]
            self._expires_at = time.time() + float(expires_in) if expires_in else None

    # --- flow ---
    def authorize_url(self) -> str:
        if not self.client_id or not self.redirect_uri:
            raise ConfigError("Spotify client ID or redirect URI not configured")
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "scope": SCOPES,
            "redirect_uri": self.redirect_uri,
        }
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    def _post_token(self, form: dict, basic_auth: bool) -> dict:
        auth = (self.client_id, self.client_secret) if basic_auth else None
        try:
            r = self.session.post(TOKEN_URL, data=form, auth=auth, timeout=self.timeout_s)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            raise AuthError(f"Spotify token request failed: {e}") from e

    def exchange_code(self, code: str) -> None:
        data = self._post_token(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.redirect_uri,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            basic_auth=False,
        )
        self._store(data)
        logger.info("Spotify login complete")

    def refresh(self) -> None:
        with self._lock:
            refresh_token = self._refresh_token
        if not refresh_token:
            raise AuthError("No refresh token available")

        data = self._post_token({"grant_type": "refresh_token", "refresh_token": refresh_token}, basic_auth=True)
        self._store(data)
        logger.info("Spotify access token refreshed")
