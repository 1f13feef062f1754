"""Tests for layout presets and padding helpers."""

import os
import sys

import pygame

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv.ui.layout import (
    CardWidth,
    GapSettings,
    OverScanMargin,
    PaddingValues,
    ScreenLayout,
    app_defaults,
)


def test_into_padding_values_keeps_order_and_values():
    margin = OverScanMargin(top=1, bottom=2, start=3, end=4)
    padding = margin.into_padding_values()
    assert padding == PaddingValues(start=3, top=1, end=4, bottom=2)
    assert (padding.start, padding.top, padding.end, padding.bottom) == (3, 1, 4, 2)


def test_over_scan_presets():
    margins = app_defaults.over_scan_margin
    assert margins.default == OverScanMargin(top=24, bottom=24, start=48, end=48)
    assert margins.podcast_details == OverScanMargin(top=40, bottom=40, start=48, end=48)
    assert margins.drawer == OverScanMargin(top=24, bottom=24, start=0, end=0)
    assert margins.catalog == OverScanMargin(top=24, bottom=24, start=0, end=0)


def test_card_widths_gaps_and_paddings():
    assert app_defaults.card_width == CardWidth(large=268, medium=196, small=124)
    assert app_defaults.gap_settings == GapSettings(catalog_item_gap=20, catalog_section_gap=40)
    assert app_defaults.padding.tab == PaddingValues(start=16, top=6, end=16, bottom=6)
    assert app_defaults.padding.section_title == PaddingValues(bottom=16)


def test_symmetric_padding():
    assert PaddingValues.symmetric(horizontal=5, vertical=2) == PaddingValues(5, 2, 5, 2)


def test_apply_to_scales_with_density():
    rect = pygame.Rect(0, 0, 200, 100)
    inner = PaddingValues(start=10, top=5, end=20, bottom=15).apply_to(rect, density=2.0)
    assert inner == pygame.Rect(20, 10, 140, 60)


def test_apply_to_never_negative():
    inner = PaddingValues(start=50, end=50, top=50, bottom=50).apply_to(pygame.Rect(0, 0, 40, 40))
    assert inner.width == 0 and inner.height == 0


def test_screen_layout_content_rect():
    layout = ScreenLayout(app_defaults.over_scan_margin.default.into_padding_values(), True)
    content = layout.content_rect(pygame.Rect(0, 0, 960, 540))
    assert content == pygame.Rect(48, 24, 864, 492)
    assert layout.fill_max_size
    assert not ScreenLayout().fill_max_size
