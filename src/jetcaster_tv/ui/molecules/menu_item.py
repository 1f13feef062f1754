"""
Menu item molecule - Text-based list rows.
"""

import pygame
from typing import Optional

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.text import Text


class MenuItem:
    """
    Menu item molecule.

    Renders a list row with a primary label, optional right-aligned
    value and a focus highlight.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        highlighted: bool = False,
        secondary_text: Optional[str] = None,
    ) -> pygame.Rect:
        """
        Render a menu item.

        Args:
            screen: Surface to render to
            rect: Item rectangle
            label: Primary text
            highlighted: Item has D-pad focus
            secondary_text: Optional secondary text (right side)

        Returns:
            Item rect
        """
        padding = self.theme.px(self.theme.padding_md)
        content_left = rect.left + padding
        content_right = rect.right - padding

        if highlighted:
            pygame.draw.rect(
                screen, self.theme.surface_hover, rect, border_radius=self.theme.radius_md
            )
            pygame.draw.rect(
                screen,
                self.theme.primary,
                rect,
                width=2,
                border_radius=self.theme.radius_md,
            )

        _, label_height = self.text.measure(label, self.theme.font_size_sm)
        text_y = rect.centery - label_height // 2

        if secondary_text:
            secondary_width, _ = self.text.measure(
                secondary_text, size=self.theme.font_size_sm
            )
            self.text.render(
                screen,
                secondary_text,
                (content_right, text_y),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                align="right",
            )
            content_right -= secondary_width + padding

        self.text.render(
            screen,
            label,
            (content_left, text_y),
            color=self.theme.text_primary if highlighted else self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=max(0, content_right - content_left),
        )

        return rect
