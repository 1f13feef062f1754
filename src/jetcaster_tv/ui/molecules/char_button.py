"""
Character button molecule - Single key of the on-screen keyboard.
"""

import pygame

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.text import Text


class CharButton:
    """
    Character button molecule.

    Used in the search keyboard where a remote has no letter keys.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        char: str,
        focused: bool = False,
    ) -> pygame.Rect:
        """
        Render a character button.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            char: Character or action label (" ", "DEL", "CLEAR")
            focused: D-pad focus state

        Returns:
            Button rect
        """
        if focused:
            bg_color = self.theme.primary
            text_color = self.theme.on_primary
        else:
            bg_color = self.theme.surface
            text_color = self.theme.text_secondary

        pygame.draw.rect(screen, bg_color, rect, border_radius=self.theme.radius_sm)

        if char == " ":
            display_text = "SPC"
            font_size = self.theme.font_size_xs
        elif len(char) > 1:  # DEL, CLEAR
            display_text = char
            font_size = self.theme.font_size_xs
        else:
            display_text = char.upper()
            font_size = self.theme.font_size_sm

        _, text_height = self.text.measure(display_text, font_size)
        self.text.render(
            screen,
            display_text,
            (rect.centerx, rect.centery - text_height // 2),
            color=text_color,
            size=font_size,
            align="center",
        )

        return rect
