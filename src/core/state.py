from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

from core.config import AppConfig
from core.lrclib_client import LrcLibClient
from spotify.auth import SpotifyAuth
from spotify.client import SpotifyClient

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error

class AppState(QObject):
    """Session context: configuration and the remote collaborators, created once per run."""
    notification = Signal(object)   # emits Notify

    def __init__(self, config: AppConfig):
        super().__init__()
        self.config = config
        self.auth = SpotifyAuth(
            client_id=config.spotify_client_id,
            client_secret=config.spotify_client_secret,
            redirect_uri=config.spotify_redirect_uri,
            timeout_s=config.http_timeout_s,
        )
        self.spotify = SpotifyClient(self.auth, timeout_s=config.http_timeout_s)
        self.lrclib = LrcLibClient(
            base_url=config.lrclib_base_url,
            user_agent=config.user_agent,
            timeout_s=config.http_timeout_s,
        )
        self.queued_notifications: list[Notify] = []

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))
