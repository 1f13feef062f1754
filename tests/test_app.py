"""Tests for the app's action handling, driven headless."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv import constants, routes
from jetcaster_tv.app import JetcasterTvApp
from jetcaster_tv.config.settings import get_default_settings
from jetcaster_tv.services.catalog import PodcastCatalog
from jetcaster_tv.services.models import Podcast


@pytest.fixture
def app(monkeypatch, tmp_path):
    monkeypatch.setattr(constants, "CONFIG_FILE", str(tmp_path / "config.json"))
    monkeypatch.setattr(constants, "CONTROLLER_MAPPING_FILE", str(tmp_path / "mapping.json"))
    settings = dict(get_default_settings(), fullscreen=False, enable_artwork=False)
    catalog = PodcastCatalog(
        [
            Podcast("urn:a", "Alpha", categories=["Tech"]),
            Podcast("urn:b", "Beta", categories=["Tech"]),
        ]
    )
    return JetcasterTvApp(settings=settings, catalog=catalog)


def test_left_at_edge_opens_drawer_and_select_navigates(app):
    ui = app.ui_state
    app.handle_action("left")
    assert ui.drawer.open

    app.handle_action("down")
    app.handle_action("down")
    app.handle_action("up")
    assert ui.drawer.highlighted == 1  # Search
    app.handle_action("select")
    assert ui.navigation.current_screen == routes.Search()
    assert not ui.drawer.open


def test_drawer_highlight_stays_in_range(app):
    app.handle_action("menu")
    for _ in range(10):
        app.handle_action("down")
    assert app.ui_state.drawer.highlighted == len(app.router.drawer.items) - 1
    for _ in range(10):
        app.handle_action("up")
    assert app.ui_state.drawer.highlighted == 0


def test_right_back_and_menu_close_drawer(app):
    ui = app.ui_state
    for closer in ("right", "back", "menu"):
        ui.drawer.open = True
        app.handle_action(closer)
        assert not ui.drawer.open, closer
    assert ui.navigation.back_stack == (routes.Discover(),)


def test_back_pops_then_opens_drawer_at_root(app):
    ui = app.ui_state
    ui.navigation.navigate_to_library()
    app.handle_action("back")
    assert ui.navigation.current_screen == routes.Discover()
    assert not ui.drawer.open
    app.handle_action("back")
    assert ui.drawer.open


def test_unwrapped_screens_have_no_drawer(app):
    ui = app.ui_state
    ui.navigation.navigate_to_settings()
    app.handle_action("left")
    app.handle_action("menu")
    assert not ui.drawer.open


def test_select_opens_podcast_and_frame_renders(app):
    ui = app.ui_state
    app.handle_action("down")  # tabs -> podcasts
    app.handle_action("right")
    app.handle_action("select")
    assert ui.navigation.current_screen == routes.Podcast("urn:b")

    app._render_frame()
    assert app.rects["destination"] == "podcast"


def test_every_destination_renders_in_app(app):
    navigation = app.ui_state.navigation
    for go in (
        navigation.navigate_to_library,
        navigation.navigate_to_search,
        navigation.navigate_to_profile,
        navigation.navigate_to_settings,
        navigation.play_episode,
    ):
        go()
        app._render_frame()
        assert app.rects["destination"] == navigation.current_screen.name
