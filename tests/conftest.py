"""Shared test setup: headless SDL and src on the import path."""

import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pygame  # noqa: E402
import pytest  # noqa: E402

from jetcaster_tv.utils import logging as app_logging  # noqa: E402

pygame.font.init()


@pytest.fixture(autouse=True)
def temp_log_file(tmp_path):
    """Keep error.log writes inside the test's temp dir."""
    previous = app_logging.get_log_file()
    app_logging.set_log_file(str(tmp_path / "error.log"))
    yield tmp_path / "error.log"
    app_logging.set_log_file(previous)


@pytest.fixture
def surface():
    return pygame.Surface((1280, 720))
