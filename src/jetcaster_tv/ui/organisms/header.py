"""
Header organism - Screen and section titles.
"""

import pygame
from typing import Optional

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.text import Text
from jetcaster_tv.ui.layout import PaddingValues


class Header:
    """
    Header organism.

    Renders a title (and optional subtitle) at the top of a rect
    and reports the rect it consumed, including padding.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def height(
        self,
        padding: PaddingValues = PaddingValues(),
        size: Optional[int] = None,
        with_subtitle: bool = False,
    ) -> int:
        """Pixel height render() consumes for a one-line title."""
        if size is None:
            size = self.theme.font_size_lg
        height = self.text.get_font(size).get_height()
        if with_subtitle:
            height += self.theme.px(self.theme.padding_xs)
            height += self.text.get_font(self.theme.font_size_sm).get_height()
        return height + self.theme.px(padding.top) + self.theme.px(padding.bottom)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        title: str,
        subtitle: Optional[str] = None,
        padding: PaddingValues = PaddingValues(),
        size: Optional[int] = None,
    ) -> pygame.Rect:
        """
        Render a header.

        Args:
            screen: Surface to render to
            rect: Area to render at the top of
            title: Header title
            subtitle: Optional subtitle under the title
            padding: Space kept around the title block
            size: Title font size (default: font_size_lg)

        Returns:
            Rect consumed by the header, padding included
        """
        if size is None:
            size = self.theme.font_size_lg

        inner = padding.apply_to(rect, self.theme.density)
        title_rect = self.text.render(
            screen,
            title,
            inner.topleft,
            color=self.theme.text_primary,
            size=size,
            max_width=inner.width,
        )
        bottom = title_rect.bottom

        if subtitle:
            subtitle_rect = self.text.render(
                screen,
                subtitle,
                (inner.left, bottom + self.theme.px(self.theme.padding_xs)),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                max_width=inner.width,
            )
            bottom = subtitle_rect.bottom

        bottom += self.theme.px(padding.bottom)
        return pygame.Rect(rect.left, rect.top, rect.width, bottom - rect.top)
