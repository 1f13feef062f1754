"""
Tab molecule - Pill-shaped category tab.
"""

import pygame
from typing import Tuple

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.text import Text
from jetcaster_tv.ui.layout import PaddingValues


class Tab:
    """Single tab of a tab row, sized from its label plus tab padding."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def measure(self, label: str, padding: PaddingValues) -> Tuple[int, int]:
        """Outer (width, height) of a tab with the given padding."""
        width, height = self.text.measure(label, self.theme.font_size_sm)
        return (
            width + self.theme.px(padding.start) + self.theme.px(padding.end),
            height + self.theme.px(padding.top) + self.theme.px(padding.bottom),
        )

    def render(
        self,
        screen: pygame.Surface,
        position: Tuple[int, int],
        label: str,
        padding: PaddingValues,
        selected: bool = False,
        focused: bool = False,
    ) -> pygame.Rect:
        """
        Render a tab at position (top-left).

        Returns:
            Tab rect
        """
        rect = pygame.Rect(position, self.measure(label, padding))
        radius = rect.height // 2

        if focused:
            pygame.draw.rect(screen, self.theme.text_primary, rect, border_radius=radius)
            color = self.theme.background
        elif selected:
            pygame.draw.rect(screen, self.theme.surface_selected, rect, border_radius=radius)
            color = self.theme.primary
        else:
            color = self.theme.text_secondary

        self.text.render(
            screen,
            label,
            (rect.left + self.theme.px(padding.start), rect.top + self.theme.px(padding.top)),
            color=color,
            size=self.theme.font_size_sm,
        )
        return rect
