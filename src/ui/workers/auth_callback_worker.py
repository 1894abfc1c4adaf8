# ui/workers/auth_callback_worker.py
from __future__ import annotations

import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlparse

from PySide6.QtCore import QThread, Signal

from core.exceptions import AuthError
from spotify.auth import SpotifyAuth

logger = logging.getLogger(__name__)

_SUCCESS_PAGE = b"""<html>
  <body>
    <h1>Authentication successful!</h1>
    <p>You can close this window now.</p>
    <script>setTimeout(() => { window.close(); }, 2000);</script>
  </body>
</html>"""


class _CallbackHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        parsed = urlparse(self.path)
        if parsed.path != self.server.callback_path:
            self.send_response(404)
            self.send_header("Content-Type", "text/plain")
            self.end_headers()
            self.wfile.write(b"Not found")
            return

        params = parse_qs(parsed.query)
        self.server.result = (params.get("code", [None])[0], params.get("error", [None])[0])

        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.end_headers()
        self.wfile.write(_SUCCESS_PAGE)

    def log_message(self, format, *args):
        logger.debug("callback server: " + format, *args)


class AuthCallbackWorker(QThread):
    """
    Listens on the redirect URI for the OAuth callback, then exchanges
    the code for tokens. Stops after the first /callback request.
    """
    login_finished = Signal(bool, str)  # ok, message

    def __init__(self, auth: SpotifyAuth, parent=None):
        super().__init__(parent)
        self.auth = auth

    def run(self):
        parsed = urlparse(self.auth.redirect_uri)
        host = parsed.hostname or "127.0.0.1"
        port = parsed.port or 80

        try:
            server = HTTPServer((host, port), _CallbackHandler)
        except OSError as e:
            logger.error("Callback server error: %s", e)
            self.login_finished.emit(False, "Failed to start callback server")
            return

        server.timeout = 0.5
        server.callback_path = parsed.path or "/callback"
        server.result = None
        logger.info("Callback server listening on %s:%d", host, port)

        try:
            while server.result is None and not self.isInterruptionRequested():
                server.handle_request()
        finally:
            server.server_close()
            logger.info("Callback server closed")

        if server.result is None:
            self.login_finished.emit(False, "Login cancelled")
            return

        code, error = server.result
        if not code:
            self.login_finished.emit(False, f"Spotify authorization failed: {error or 'no code returned'}")
            return

        try:
            self.auth.exchange_code(code)
        except AuthError as e:
            logger.error("Error getting tokens: %s", e)
            self.login_finished.emit(False, "Failed to get authentication tokens")
            return

        self.login_finished.emit(True, "Logged in")
