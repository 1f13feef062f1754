"""
Action button molecule - Button with label.
"""

import pygame
from typing import Optional

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.button import Button
from jetcaster_tv.ui.atoms.icon import Icon
from jetcaster_tv.ui.atoms.text import Text


class ActionButton:
    """
    Action button molecule.

    Combines a button with text label and optional leading icon.
    Focused buttons fill with the primary color.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.button = Button(theme)
        self.icon = Icon(theme)
        self.text = Text(theme)

    def measure_width(self, label: str, icon: Optional[str] = None) -> int:
        """Width needed for label (plus icon) with horizontal padding."""
        width = self.text.measure(label, self.theme.font_size_sm)[0]
        width += self.theme.px(self.theme.padding_lg) * 2
        if icon:
            width += self.theme.px(self.theme.icon_size + self.theme.padding_sm)
        return width

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        focused: bool = False,
        icon: Optional[str] = None,
    ) -> pygame.Rect:
        """
        Render an action button.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            label: Button label
            focused: D-pad focus state
            icon: Optional icon type (see Icon.ICONS)

        Returns:
            Button rect
        """
        text_color = self.theme.on_primary if focused else self.theme.text_primary

        self.button.render(screen, rect, focused=focused, shadow=focused)

        text_x = rect.centerx
        if icon:
            icon_size = self.theme.px(self.theme.icon_size)
            icon_x = rect.left + self.theme.px(self.theme.padding_md) + icon_size // 2
            self.icon.render(
                screen, icon, (icon_x, rect.centery), icon_size, color=text_color
            )
            text_x = (icon_x + icon_size // 2 + rect.right) // 2

        _, text_height = self.text.measure(label, self.theme.font_size_sm)
        self.text.render(
            screen,
            label,
            (text_x, rect.centery - text_height // 2),
            color=text_color,
            size=self.theme.font_size_sm,
            align="center",
        )

        return rect
