"""Error taxonomy for the lyrics companion."""


class SyncLyricsError(Exception):
    """Base exception for the application."""
    pass


class ConfigError(SyncLyricsError):
    """Invalid or missing configuration."""
    pass


class LookupFailure(SyncLyricsError):
    """Lyrics source unreachable or returned a malformed response."""
    pass


class SpotifyError(SyncLyricsError):
    """Error talking to the Spotify Web API."""
    pass


class AuthExpired(SpotifyError):
    """Access token rejected (HTTP 401)."""
    pass


class AuthError(SpotifyError):
    """Token exchange or refresh failed."""
    pass


class PlaybackFetchError(SpotifyError):
    """Currently-playing request failed for a reason other than auth."""
    pass


class PlaybackUnavailable(SyncLyricsError):
    """Sample could not be fetched; the message is meant for the user."""
    pass
