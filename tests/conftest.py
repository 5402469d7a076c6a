"""Shared test fixtures for post categorizer tests."""
import logging
from unittest.mock import patch

import pytest

from src.app.config import Settings
from src.tagging.classifier import Classifier
from src.tagging.index import build_index
from src.tagging.service import get_classifier


@pytest.fixture()
def tmp_settings(tmp_path):
    """Create a Settings instance backed by a temporary directory.

    Patches get_settings globally so all modules use the temp paths, and
    resets the shared classifier so it is rebuilt from these settings.
    """
    settings = Settings(
        log_path=tmp_path / "logs" / "app.log",
        confidence_ratio=0.3,
        warn_on_term_collisions=False,
    )

    get_classifier.cache_clear()
    with patch("src.app.config.get_settings", return_value=settings), \
            patch("src.app.paths.get_settings", return_value=settings), \
            patch("src.app.logging.get_settings", return_value=settings), \
            patch("src.tagging.service.get_settings", return_value=settings):
        yield settings
    get_classifier.cache_clear()


@pytest.fixture(scope="session")
def index():
    """Lookup index over the default taxonomy."""
    return build_index(warn_on_collisions=False)


@pytest.fixture()
def classifier(index):
    return Classifier(index)


@pytest.fixture()
def clean_logger():
    """Detach any handlers added to the post_categorizer logger during a test."""
    logger = logging.getLogger("post_categorizer")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
