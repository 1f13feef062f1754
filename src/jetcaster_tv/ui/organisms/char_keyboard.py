"""
Character keyboard organism - On-screen character selection.
"""

import pygame
from typing import List, Optional, Tuple

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.molecules.char_button import CharButton
from jetcaster_tv.ui.atoms.text import Text


class CharKeyboard:
    """
    Character keyboard organism.

    On-screen keyboard for text input with a remote. Keys are laid
    out in fixed-width rows so D-pad focus can address them by
    (row, column).
    """

    CHARS = list("abcdefghijklmnopqrstuvwxyz0123456789") + [" ", "DEL", "CLEAR"]

    def __init__(self, theme: Theme = default_theme, chars_per_row: int = 13):
        self.theme = theme
        self.chars_per_row = chars_per_row
        self.char_button = CharButton(theme)
        self.text = Text(theme)

    def row_lengths(self) -> List[int]:
        """Number of keys in each keyboard row."""
        full, rest = divmod(len(self.CHARS), self.chars_per_row)
        return [self.chars_per_row] * full + ([rest] if rest else [])

    def char_at(self, row: int, column: int) -> str:
        index = row * self.chars_per_row + column
        if 0 <= column < self.chars_per_row and 0 <= index < len(self.CHARS):
            return self.CHARS[index]
        return ""

    def handle_selection(self, row: int, column: int, current_text: str) -> str:
        """
        Apply the key at (row, column) to current_text.

        Returns:
            The edited text
        """
        char = self.char_at(row, column)

        if char == "DEL":
            return current_text[:-1]
        elif char == "CLEAR":
            return ""
        return current_text + char

    def height(self) -> int:
        """Pixel height of the input field plus all key rows."""
        padding = self.theme.px(self.theme.padding_sm)
        key = self.theme.px(self.theme.char_button_size)
        field = self.theme.px(self.theme.button_height)
        rows = len(self.row_lengths())
        return field + padding * 2 + rows * (key + padding)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        current_text: str,
        focused: Optional[Tuple[int, int]],
        placeholder: str = "Search podcasts",
    ) -> Tuple[List[pygame.Rect], pygame.Rect]:
        """
        Render the input field and keyboard.

        Args:
            screen: Surface to render to
            rect: Keyboard area rectangle
            current_text: Current input text
            focused: (row, column) of the focused key, or None
            placeholder: Shown in the field while empty

        Returns:
            Tuple of (key rects in CHARS order, input_field_rect)
        """
        padding = self.theme.px(self.theme.padding_sm)
        key_size = self.theme.px(self.theme.char_button_size)
        keyboard_width = self.chars_per_row * (key_size + padding) - padding

        input_field_rect = pygame.Rect(
            rect.left, rect.top, keyboard_width, self.theme.px(self.theme.button_height)
        )
        pygame.draw.rect(
            screen,
            self.theme.surface_hover,
            input_field_rect,
            border_radius=self.theme.radius_sm,
        )

        display_text = current_text if current_text else placeholder
        text_color = self.theme.text_primary if current_text else self.theme.text_disabled
        _, text_height = self.text.measure(display_text, self.theme.font_size_sm)
        text_rect = self.text.render(
            screen,
            display_text,
            (input_field_rect.left + padding, input_field_rect.centery - text_height // 2),
            color=text_color,
            size=self.theme.font_size_sm,
            max_width=input_field_rect.width - padding * 3,
        )
        if current_text:
            cursor_x = text_rect.right + 2
            pygame.draw.line(
                screen,
                self.theme.primary,
                (cursor_x, input_field_rect.top + padding),
                (cursor_x, input_field_rect.bottom - padding),
                2,
            )

        key_rects = []
        top = input_field_rect.bottom + padding * 2
        for i, char in enumerate(self.CHARS):
            row, column = divmod(i, self.chars_per_row)
            key_rect = pygame.Rect(
                rect.left + column * (key_size + padding),
                top + row * (key_size + padding),
                key_size,
                key_size,
            )
            self.char_button.render(
                screen, key_rect, char, focused=(focused == (row, column))
            )
            key_rects.append(key_rect)

        return key_rects, input_field_rect
