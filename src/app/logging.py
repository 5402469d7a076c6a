"""Logging setup shared by the CLI and the web server."""
import logging
import sys

from src.app.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging() -> None:
    """Configure the post_categorizer logger with console and file handlers.

    Safe to call more than once; handlers are only attached the first time.
    """
    settings = get_settings()
    root = logging.getLogger("post_categorizer")
    root.setLevel(settings.log_level.upper())

    if root.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    settings.log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(settings.log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
