"""Tests for reusable UI pieces and formatting helpers."""

import os
import sys
from datetime import date

import pygame
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv.ui.atoms.icon import Icon
from jetcaster_tv.ui.organisms.card_row import CardRow
from jetcaster_tv.ui.organisms.char_keyboard import CharKeyboard
from jetcaster_tv.ui.organisms.menu_list import MenuList
from jetcaster_tv.ui.organisms.tab_row import TabRow
from jetcaster_tv.ui.layout import PaddingValues, ScreenLayout
from jetcaster_tv.ui.screens.discover_screen import TAB_ROW, DiscoverScreen
from jetcaster_tv.services.catalog import PodcastCatalog
from jetcaster_tv.services.models import Podcast
from jetcaster_tv.state import ContentFocus
from jetcaster_tv.view_models import DiscoverViewModel
from jetcaster_tv.utils.formatting import format_duration, format_published, truncate_text


def test_keyboard_rows_and_editing():
    keyboard = CharKeyboard()
    assert keyboard.row_lengths() == [13, 13, 13]
    assert keyboard.char_at(0, 0) == "a"
    assert keyboard.char_at(2, 12) == "CLEAR"
    assert keyboard.char_at(3, 0) == ""

    text = keyboard.handle_selection(0, 1, "")  # b
    text = keyboard.handle_selection(2, 10, text)  # space
    assert text == "b "
    assert keyboard.handle_selection(2, 11, "abc") == "ab"
    assert keyboard.handle_selection(2, 12, "abc") == ""


def test_keyboard_render_returns_key_rects(surface):
    keyboard = CharKeyboard()
    keys, field = keyboard.render(surface, surface.get_rect(), "hi", focused=(1, 2))
    assert len(keys) == len(CharKeyboard.CHARS)
    assert all(key.top > field.bottom for key in keys)


def test_menu_list_keeps_highlight_visible(surface):
    menu = MenuList()
    items = [f"item {i}" for i in range(20)]
    rect = pygame.Rect(0, 0, 400, 44 * 5)
    rects, offset = menu.render(surface, rect, items, 15, get_label=str)
    assert len(rects) == 5
    assert offset <= 15 < offset + 5


def test_card_row_scrolls_focused_card_into_view(surface):
    row = CardRow()
    items = list(range(12))
    rect = pygame.Rect(0, 0, 500, row.height(100))
    rects, first = row.render(surface, rect, items, 9, 100, 20, get_title=str)
    assert len(rects) == 4
    assert first <= 9 < first + 4
    assert all(r.right <= rect.right for r in rects)


def test_icons_render_and_reject_unknown(surface):
    icon = Icon()
    for name in Icon.ICONS:
        icon.render(surface, name, (50, 50))
    with pytest.raises(ValueError):
        icon.render(surface, "nope", (50, 50))


def test_format_duration():
    assert format_duration(None) == ""
    assert format_duration(0) == ""
    assert format_duration(30) == "1 min"
    assert format_duration(42 * 60) == "42 min"
    assert format_duration(3600) == "1 hr"
    assert format_duration(3900) == "1 hr 5 min"


def test_format_published_and_truncate():
    assert format_published(date(2024, 3, 4)) == "Mar 4, 2024"
    assert format_published(None) == ""
    assert truncate_text("short", 10) == "short"
    assert truncate_text("a longer piece of text", 10) == "a longe..."


def test_tab_row_scrolls_focused_tab_into_view(surface):
    row = TabRow()
    labels = [f"Category {i}" for i in range(20)]
    padding = PaddingValues.symmetric(horizontal=16, vertical=8)

    rects, first = row.render(surface, (0, 0), labels, 0, 15, padding, max_width=500)
    assert first <= 15 < first + len(rects)
    assert all(r.right <= 500 for r in rects)

    rects, first = row.render(surface, (0, 0), labels, 0, 0, padding, max_width=500)
    assert first == 0


def test_tab_row_without_focus_keeps_selected_tab_drawn(surface):
    labels = [f"Category {i}" for i in range(20)]
    padding = PaddingValues.symmetric(horizontal=16, vertical=8)
    rects, first = TabRow().render(surface, (0, 0), labels, 12, None, padding, max_width=400)
    assert first <= 12 < first + len(rects)


def test_discover_draws_every_focusable_tab(surface):
    catalog = PodcastCatalog(
        [Podcast(f"urn:{i}", f"Show {i}", categories=[f"Category {i}"]) for i in range(20)]
    )
    vm = DiscoverViewModel(catalog)
    screen = DiscoverScreen()
    layout = ScreenLayout(PaddingValues.symmetric(horizontal=48, vertical=24), True)
    for column in range(len(vm.categories)):
        result = screen.render(
            surface, surface.get_rect(), layout, vm, ContentFocus(TAB_ROW, column)
        )
        assert result["first_tab"] <= column < result["first_tab"] + len(result["tabs"])
        assert vm.selected_category == f"Category {column}"
