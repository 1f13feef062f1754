"""
Tab row organism - Horizontal row of category tabs.
"""

import pygame
from typing import List, Optional, Tuple

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import PaddingValues
from jetcaster_tv.ui.molecules.tab import Tab


class TabRow:
    """Tabs laid out left to right; the selected tab is tinted."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.tab = Tab(theme)

    def height(self, padding: PaddingValues) -> int:
        return self.tab.measure("Ag", padding)[1]

    def render(
        self,
        screen: pygame.Surface,
        position: Tuple[int, int],
        labels: List[str],
        selected: int,
        focused: Optional[int],
        padding: PaddingValues,
        max_width: Optional[int] = None,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render tabs starting at position.

        When the tabs overflow max_width the row scrolls so the focused
        tab (or the selected one, without focus) is drawn.

        Returns:
            Tuple of (rects of the drawn tabs, index of first drawn tab)
        """
        if not labels:
            return [], 0

        gap = self.theme.px(self.theme.padding_sm)
        widths = [self.tab.measure(label, padding)[0] for label in labels]
        anchor = focused if focused is not None else selected
        first = 0
        if max_width is not None:
            first = self._calculate_scroll(widths, anchor, max_width, gap)

        x, y = position
        rects = []
        for i in range(first, len(labels)):
            if max_width is not None and rects and x + widths[i] > position[0] + max_width:
                break
            rects.append(
                self.tab.render(
                    screen,
                    (x, y),
                    labels[i],
                    padding,
                    selected=(i == selected),
                    focused=(i == focused),
                )
            )
            x += widths[i] + gap
        return rects, first

    def _calculate_scroll(self, widths: List[int], anchor: int, max_width: int, gap: int) -> int:
        """First tab index that keeps the anchor tab inside max_width."""
        anchor = max(0, min(anchor, len(widths) - 1))
        # One tab of context on the left, as in the card rows
        first = max(0, anchor - 1)
        while first < anchor:
            span = sum(widths[first:anchor + 1]) + gap * (anchor - first)
            if span <= max_width:
                break
            first += 1
        return first
