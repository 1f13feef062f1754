"""Tests for the navigation drawer entries and dispatch."""

import os
import sys
from unittest import mock

import pygame
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv.state import DrawerFocus
from jetcaster_tv.ui.organisms.navigation_drawer import (
    DRAWER_ENTRIES,
    DrawerItem,
    DrawerSpacer,
    NavigationDrawer,
)
from jetcaster_tv.ui.templates.global_navigation import WithGlobalNavigation

ACTIONS = [
    "navigate_to_profile",
    "navigate_to_search",
    "navigate_to_discover",
    "navigate_to_library",
    "navigate_to_settings",
]


def test_entry_order():
    kinds = [type(entry) for entry in DRAWER_ENTRIES]
    assert kinds == [DrawerItem, DrawerSpacer, DrawerItem, DrawerItem, DrawerItem, DrawerSpacer, DrawerItem]

    drawer = NavigationDrawer()
    assert [item.label for item in drawer.items] == ["Name", "Search", "Discover", "Library", "Settings"]
    assert [item.icon for item in drawer.items] == ["person", "search", "home", "video_library", "settings"]
    assert drawer.items[0].supporting_text == "Switch Account"
    assert [item.action for item in drawer.items] == ACTIONS


@pytest.mark.parametrize("index", range(len(ACTIONS)))
def test_activate_calls_exactly_one_dispatcher(index):
    dispatcher = mock.Mock(spec=ACTIONS)
    NavigationDrawer().activate(index, dispatcher)

    for i, name in enumerate(ACTIONS):
        expected = 1 if i == index else 0
        assert getattr(dispatcher, name).call_count == expected, name


def test_items_never_render_selected(surface):
    drawer = NavigationDrawer()
    with mock.patch.object(drawer.drawer_item, "render") as render:
        drawer.render(surface, surface.get_rect(), DrawerFocus(open=True, highlighted=2))
    assert render.call_count == len(drawer.items)
    for call in render.call_args_list:
        assert call.kwargs["selected"] is False


def test_layout_spacers_split_free_space():
    drawer = NavigationDrawer()
    bounds = pygame.Rect(0, 0, 400, 720)
    rects = drawer.layout(bounds, expanded=False)
    assert len(rects) == 5
    tops = [r.top for r in rects]
    assert tops == sorted(tops)
    # profile at the top, settings at the bottom of the padded column
    assert rects[0].top == 24
    assert rects[-1].bottom <= 720 - 24
    assert rects[-1].bottom >= 720 - 24 - 2


def test_global_navigation_places_content_beside_rail(surface):
    shell = WithGlobalNavigation()
    bounds = surface.get_rect()
    seen = []
    result, drawer_rects = shell.render(
        surface, bounds, DrawerFocus(), lambda area: seen.append(area) or "content"
    )
    assert result == "content"
    assert seen[0].left == shell.drawer.rail_width(False)
    assert seen[0].right == bounds.right
    assert len(drawer_rects) == 5
