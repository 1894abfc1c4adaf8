from __future__ import annotations

import logging
from typing import Optional

import requests

from core.exceptions import AuthError, AuthExpired, PlaybackFetchError, PlaybackUnavailable
from core.models import PlaybackSample
from spotify.auth import SpotifyAuth

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.spotify.com/v1"

AUTH_REFRESH_FAILED_TEXT = "Error refreshing Spotify authentication"
FETCH_FAILED_TEXT = "Error fetching currently playing song"


def sample_from_payload(data: dict) -> Optional[PlaybackSample]:
    """
    Build a PlaybackSample from a currently-playing payload.
    Returns None when there is no track item (ads, podcasts, nothing loaded).
    """
    item = data.get("item")
    if not item or not item.get("id"):
        return None

    artists = tuple(a.get("name", "") for a in (item.get("artists") or []) if a.get("name"))
    album = item.get("album") or {}
    return PlaybackSample(
        is_playing=bool(data.get("is_playing", False)),
        track_id=item["id"],
        track_name=item.get("name") or "",
        artist_name=artists[0] if artists else "",
        artists=artists,
        album_name=album.get("name") or "",
        position_ms=int(data.get("progress_ms") or 0),
        duration_ms=int(item.get("duration_ms") or 0),
    )


class SpotifyClient:
    def __init__(self, auth: SpotifyAuth, timeout_s: float = 15.0, session: requests.Session | None = None):
        self.auth = auth
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def currently_playing(self) -> Optional[PlaybackSample]:
        token = self.auth.access_token
        if not token:
            raise AuthExpired("Not logged in to Spotify")

        try:
            r = self.session.get(
                f"{API_BASE_URL}/me/player/currently-playing",
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise PlaybackFetchError(str(e)) from e

        if r.status_code == 401:
            raise AuthExpired("Spotify access token expired")
        # 204: nothing playing
        if r.status_code == 204:
            return None

        try:
            r.raise_for_status()
            return sample_from_payload(r.json())
        except (requests.RequestException, ValueError) as e:
            raise PlaybackFetchError(str(e)) from e


def fetch_sample(client: SpotifyClient, auth: SpotifyAuth) -> Optional[PlaybackSample]:
    """
    Poll once; on an expired token refresh the credentials and retry once.
    Any remaining failure becomes PlaybackUnavailable with a user-facing message.
    """
    try:
        return client.currently_playing()
    except AuthExpired:
        logger.info("Spotify token expired, refreshing")
    except PlaybackFetchError as e:
        logger.error("Error fetching currently playing song: %s", e)
        raise PlaybackUnavailable(FETCH_FAILED_TEXT) from e

    try:
        auth.refresh()
        return client.currently_playing()
    except (AuthError, AuthExpired) as e:
        logger.error("Error refreshing token: %s", e)
        raise PlaybackUnavailable(AUTH_REFRESH_FAILED_TEXT) from e
    except PlaybackFetchError as e:
        logger.error("Error fetching currently playing song after refresh: %s", e)
        raise PlaybackUnavailable(FETCH_FAILED_TEXT) from e
