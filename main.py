import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import AppConfig
from core.exceptions import ConfigError
from core.state import AppState, Notify
from ui.main_window import MainWindow


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def init_app_state(config: AppConfig) -> AppState:
    app_state = AppState(config)

    if not config.has_spotify_credentials:
        app_state.queued_notifications.append(
            Notify(message="Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET to log in", notify_type="warn")
        )

    return app_state


def main() -> int:
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)
    qt_app = QApplication(sys.argv)

    app_state = init_app_state(config)
    main_window = MainWindow(app_state)
    main_window.show()

    return qt_app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
