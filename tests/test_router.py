"""Tests for the route table: one screen per destination."""

import os
import sys
from unittest import mock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv import routes
from jetcaster_tv.services.catalog import PodcastCatalog
from jetcaster_tv.services.models import Episode, Podcast
from jetcaster_tv.state import JetcasterAppState, UiState
from jetcaster_tv.ui.layout import app_defaults
from jetcaster_tv.ui.screens.screen_manager import Router
from jetcaster_tv.ui.theme import default_theme
from jetcaster_tv.view_models import PodcastScreenViewModel, ViewModels

SCREEN_ATTRS = {
    routes.Discover: "discover_screen",
    routes.Library: "library_screen",
    routes.Search: "search_screen",
    routes.Podcast: "podcast_screen",
    routes.Player: "player_screen",
    routes.Profile: "profile_screen",
    routes.Settings: "settings_screen",
}

DESTINATIONS = [
    routes.Discover(),
    routes.Library(),
    routes.Search(),
    routes.Podcast("urn:one"),
    routes.Player(),
    routes.Profile(),
    routes.Settings(),
]


def make_catalog():
    return PodcastCatalog(
        [
            Podcast("urn:one", "One", author="Ann", categories=["Tech"]),
            Podcast("urn:two", "Two", author="Bob", categories=["Tech"], subscribed=True),
        ],
        [Episode("urn:one/1", "urn:one", "First")],
    )


def make_router(catalog=None, factory=None, **kwargs):
    catalog = catalog or make_catalog()
    return Router(
        default_theme,
        ViewModels(catalog),
        factory or PodcastScreenViewModel.factory(catalog),
        settings={"account_name": "Tester", "enable_artwork": False},
        on_settings_changed=mock.Mock(),
        **kwargs,
    )


def state_at(destination):
    state = JetcasterAppState()
    if destination != routes.Discover():
        state.navigate(destination)
    return UiState(state)


@pytest.mark.parametrize("destination", DESTINATIONS, ids=lambda d: d.name)
def test_each_destination_renders_exactly_one_screen(destination, surface):
    router = make_router()
    screens = {}
    for attr in SCREEN_ATTRS.values():
        screens[attr] = mock.Mock()
        setattr(router, attr, screens[attr])

    rects = router.render(surface, surface.get_rect(), state_at(destination))

    assert rects["destination"] == destination.name
    for cls, attr in SCREEN_ATTRS.items():
        expected = 1 if isinstance(destination, cls) else 0
        assert screens[attr].render.call_count == expected, attr


@pytest.mark.parametrize("destination", DESTINATIONS, ids=lambda d: d.name)
def test_real_screens_render(destination, surface):
    rects = make_router().render(surface, surface.get_rect(), state_at(destination))
    assert rects["destination"] == destination.name
    assert ("drawer_items" in rects) == isinstance(destination, (routes.Discover, routes.Library))


def test_layouts_per_destination():
    router = make_router()
    margins = app_defaults.over_scan_margin
    default = margins.default.into_padding_values()

    for destination in (routes.Discover(), routes.Library(), routes.Search()):
        layout = router.layout_for(destination)
        assert layout.padding == default and layout.fill_max_size

    podcast = router.layout_for(routes.Podcast("urn:x"))
    assert podcast.padding == margins.podcast_details.into_padding_values()
    assert podcast.fill_max_size

    for destination in (routes.Profile(), routes.Settings()):
        layout = router.layout_for(destination)
        assert layout.padding == default and not layout.fill_max_size


def test_unknown_destination_type_raises(surface):
    router = make_router()
    ui = UiState()
    ui.navigation.navigate(object())
    with pytest.raises(TypeError):
        router.render(surface, surface.get_rect(), ui)
    with pytest.raises(TypeError):
        router.row_lengths(ui)


def test_player_renders_only_its_label(surface):
    router = make_router()
    with mock.patch.object(router.player_screen.text, "render") as render:
        router.render(surface, surface.get_rect(), state_at(routes.Player()))
    render.assert_called_once()
    assert render.call_args.args[1] == "Player"


def test_podcast_view_model_created_once_per_entry(surface):
    catalog = make_catalog()
    factory = mock.Mock(side_effect=PodcastScreenViewModel.factory(catalog))
    router = make_router(catalog, factory)
    ui = UiState()

    ui.navigation.show_podcast_details("urn:one")
    router.render(surface, surface.get_rect(), ui)
    router.row_lengths(ui)
    router.render(surface, surface.get_rect(), ui)
    assert factory.call_count == 1
    first = router.podcast_view_model(ui)

    # Same podcast pushed again is a separate entry
    ui.navigation.show_podcast_details("urn:one")
    router.render(surface, surface.get_rect(), ui)
    assert factory.call_count == 2
    assert router.podcast_view_model(ui) is not first

    # Back to the first entry reuses its view model
    ui.navigation.navigate_back()
    assert router.podcast_view_model(ui) is first
    assert factory.call_count == 2

    # Once popped off the stack the entry's view model is dropped
    ui.navigation.navigate_back()
    ui.navigation.show_podcast_details("urn:one")
    router.render(surface, surface.get_rect(), ui)
    assert factory.call_count == 3


def test_select_on_discover_opens_podcast_details():
    router = make_router()
    ui = UiState()
    ui.content_focus.move("down", router.row_lengths(ui))
    router.select(ui)
    assert ui.navigation.current_screen == routes.Podcast("urn:one")


def test_podcast_back_button_goes_to_discover():
    router = make_router()
    ui = state_at(routes.Podcast("urn:one"))
    ui.content_focus.move("right", router.row_lengths(ui))
    router.select(ui)
    assert ui.navigation.current_screen == routes.Discover()
    assert len(ui.navigation.back_stack) == 3


def test_podcast_episode_plays():
    router = make_router()
    ui = state_at(routes.Podcast("urn:one"))
    ui.content_focus.move("down", router.row_lengths(ui))
    router.select(ui)
    assert ui.navigation.current_screen == routes.Player()


def test_podcast_subscribe_toggle():
    catalog = make_catalog()
    router = make_router(catalog)
    ui = state_at(routes.Podcast("urn:one"))
    router.select(ui)
    assert catalog.find_podcast("urn:one").subscribed is True
    router.select(ui)
    assert catalog.find_podcast("urn:one").subscribed is False


def test_unknown_podcast_keeps_back_button():
    router = make_router()
    ui = state_at(routes.Podcast("urn:missing"))
    assert router.row_lengths(ui) == [1]
    router.select(ui)
    assert ui.navigation.current_screen == routes.Discover()


def test_empty_library_navigates_to_discover():
    catalog = PodcastCatalog([Podcast("urn:one", "One")])
    router = make_router(catalog)
    ui = state_at(routes.Library())
    assert router.row_lengths(ui) == [1]
    router.select(ui)
    assert ui.navigation.current_screen == routes.Discover()


def test_search_keyboard_and_results():
    router = make_router()
    ui = state_at(routes.Search())
    # "o" is the 15th key: row 1, column 1 with 13 keys per row
    ui.content_focus.move("down", router.row_lengths(ui))
    ui.content_focus.move("right", router.row_lengths(ui))
    router.select(ui)
    assert router.view_models.search.query == "o"

    results_row = router.search_screen.results_row
    assert router.row_lengths(ui)[results_row] == 2
    ui.content_focus.row = results_row
    ui.content_focus.column = 1
    router.select(ui)
    assert ui.navigation.current_screen == routes.Podcast("urn:two")


def test_settings_toggle_saves():
    router = make_router()
    ui = state_at(routes.Settings())
    router.select(ui)
    assert router.settings["enable_artwork"] is True
    router.on_settings_changed.assert_called_once_with(router.settings)

    ui.content_focus.row = 1  # Catalog Source is read-only
    router.select(ui)
    assert router.on_settings_changed.call_count == 1
