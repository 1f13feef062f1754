"""
Text atom - Basic text rendering component.
"""

import pygame
from typing import List, Tuple, Optional

from jetcaster_tv.ui.theme import Theme, Color, default_theme


class Text:
    """
    Basic text rendering atom.

    Handles text rendering with various styles, truncation,
    wrapping and alignment options. Sizes are scaled by theme density.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._font_cache: dict = {}

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the given (unscaled) size."""
        if size not in self._font_cache:
            self._font_cache[size] = pygame.font.Font(
                self.theme.font_path, self.theme.font_px(size)
            )
        return self._font_cache[size]

    def render(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        align: str = "left",  # "left", "center", "right"
        antialias: bool = True,
    ) -> pygame.Rect:
        """
        Render text to the screen.

        Args:
            screen: Surface to render to
            text: Text to render
            position: (x, y) position of the top edge
            color: Text color (default: text_primary)
            size: Font size (default: font_size_md)
            max_width: Maximum width (truncate with ellipsis if exceeded)
            align: Text alignment ("left", "center", "right")
            antialias: Use antialiasing

        Returns:
            Rect of rendered text
        """
        if color is None:
            color = self.theme.text_primary
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)

        if max_width:
            text = self._truncate(text, font, max_width)

        surface = font.render(text, antialias, color)
        rect = surface.get_rect()

        x, y = position
        if align == "center":
            rect.centerx = x
            rect.top = y
        elif align == "right":
            rect.right = x
            rect.top = y
        else:  # left
            rect.topleft = position

        screen.blit(surface, rect)
        return rect

    def render_wrapped(
        self,
        screen: pygame.Surface,
        text: str,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        size: Optional[int] = None,
        line_spacing: int = 4,
        max_lines: Optional[int] = None,
    ) -> pygame.Rect:
        """
        Render text word-wrapped inside rect.

        Lines that don't fit vertically are dropped; the last visible
        line gets an ellipsis when text was cut.

        Returns:
            Bounding rect of all rendered lines
        """
        if color is None:
            color = self.theme.text_secondary
        if size is None:
            size = self.theme.font_size_sm

        font = self.get_font(size)
        lines = self.wrap(text, font, rect.width)
        line_height = font.get_linesize() + line_spacing
        fits = max(0, (rect.height + line_spacing) // line_height)
        if max_lines is not None:
            fits = min(fits, max_lines)

        if len(lines) > fits and fits > 0:
            lines = lines[:fits]
            lines[-1] = self._truncate(lines[-1] + "...", font, rect.width)
        else:
            lines = lines[:fits]

        total_rect = pygame.Rect(rect.left, rect.top, 0, 0)
        y = rect.top
        for line in lines:
            line_rect = self.render(
                screen, line, (rect.left, y), color=color, size=size
            )
            total_rect = total_rect.union(line_rect)
            y += line_height

        return total_rect

    def wrap(self, text: str, font: pygame.font.Font, max_width: int) -> List[str]:
        """Split text into lines no wider than max_width."""
        lines: List[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if font.size(candidate)[0] <= max_width or not current:
                    current = candidate
                else:
                    lines.append(current)
                    current = word
            lines.append(current)
        return lines

    def measure(self, text: str, size: Optional[int] = None) -> Tuple[int, int]:
        """
        Measure text dimensions without rendering.

        Args:
            text: Text to measure
            size: Font size

        Returns:
            (width, height) tuple
        """
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)
        return font.size(text)

    def _truncate(
        self, text: str, font: pygame.font.Font, max_width: int, suffix: str = "..."
    ) -> str:
        """
        Truncate text to fit within max_width.

        Args:
            text: Text to truncate
            font: Font to use for measurement
            max_width: Maximum width in pixels
            suffix: Suffix to add when truncating

        Returns:
            Truncated text
        """
        if font.size(text)[0] <= max_width:
            return text

        suffix_width = font.size(suffix)[0]
        available_width = max_width - suffix_width

        # Binary search for optimal truncation point
        low, high = 0, len(text)
        while low < high:
            mid = (low + high + 1) // 2
            if font.size(text[:mid])[0] <= available_width:
                low = mid
            else:
                high = mid - 1

        return text[:low] + suffix
