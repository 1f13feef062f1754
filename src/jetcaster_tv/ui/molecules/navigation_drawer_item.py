"""
Navigation drawer item molecule - One entry of the navigation drawer.
"""

import pygame
from typing import Optional

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.icon import Icon
from jetcaster_tv.ui.atoms.text import Text


class NavigationDrawerItem:
    """
    Navigation drawer item molecule.

    Always shows its leading icon. Label and supporting text only
    appear when the drawer is expanded.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.icon = Icon(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        icon: str,
        label: str,
        supporting_text: Optional[str] = None,
        expanded: bool = False,
        selected: bool = False,
        focused: bool = False,
    ) -> pygame.Rect:
        """
        Render a drawer item.

        Args:
            screen: Surface to render to
            rect: Item rectangle
            icon: Leading icon type
            label: Item label
            supporting_text: Smaller second line under the label
            expanded: Drawer is expanded (labels visible)
            selected: Item represents the current destination
            focused: Item has D-pad focus

        Returns:
            Item rect
        """
        if focused:
            pygame.draw.rect(
                screen, self.theme.text_primary, rect, border_radius=rect.height // 2
            )
            content_color = self.theme.background
        elif selected:
            pygame.draw.rect(
                screen, self.theme.surface_selected, rect, border_radius=rect.height // 2
            )
            content_color = self.theme.primary
        else:
            content_color = self.theme.text_secondary

        collapsed_width = self.theme.px(self.theme.drawer_collapsed_width)
        icon_center = (rect.left + collapsed_width // 2, rect.centery)
        self.icon.render(screen, icon, icon_center, color=content_color)

        if not expanded:
            return rect

        text_left = rect.left + collapsed_width
        max_width = max(0, rect.right - text_left - self.theme.px(self.theme.padding_md))
        _, label_height = self.text.measure(label, self.theme.font_size_sm)

        if supporting_text:
            _, support_height = self.text.measure(supporting_text, self.theme.font_size_xs)
            top = rect.centery - (label_height + support_height) // 2
            self.text.render(
                screen, label, (text_left, top), color=content_color,
                size=self.theme.font_size_sm, max_width=max_width,
            )
            self.text.render(
                screen, supporting_text, (text_left, top + label_height),
                color=content_color, size=self.theme.font_size_xs, max_width=max_width,
            )
        else:
            self.text.render(
                screen, label, (text_left, rect.centery - label_height // 2),
                color=content_color, size=self.theme.font_size_sm, max_width=max_width,
            )

        return rect
