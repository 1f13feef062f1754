"""
Podcast card molecule - Square artwork with a caption.
"""

import re

import pygame
from typing import Optional

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.atoms.text import Text


class PodcastCard:
    """
    Podcast card molecule.

    Displays square artwork (or initials while it loads) above a
    one-line title and optional subtitle. Focus draws a primary border.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def caption_height(self, with_subtitle: bool = True) -> int:
        """Pixels needed under the artwork for the caption lines."""
        lines = 2 if with_subtitle else 1
        line = self.text.get_font(self.theme.font_size_sm).get_linesize()
        return self.theme.px(self.theme.padding_sm) + line * lines

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        title: str,
        subtitle: Optional[str] = None,
        image: Optional[pygame.Surface] = None,
        focused: bool = False,
    ) -> pygame.Rect:
        """
        Render a card.

        Args:
            screen: Surface to render to
            rect: Card area; artwork is rect.width square at the top
            title: Caption line
            subtitle: Optional second caption line
            image: Artwork surface
            focused: D-pad focus state

        Returns:
            Artwork rect
        """
        art_rect = pygame.Rect(rect.left, rect.top, rect.width, rect.width)
        radius = self.theme.radius_md

        pygame.draw.rect(screen, self.theme.surface, art_rect, border_radius=radius)
        if image is not None:
            scaled = pygame.transform.smoothscale(image, art_rect.size)
            screen.blit(scaled, art_rect)
        else:
            initials = self.get_placeholder_initials(title)
            _, height = self.text.measure(initials, self.theme.font_size_xl)
            self.text.render(
                screen,
                initials,
                (art_rect.centerx, art_rect.centery - height // 2),
                color=self.theme.text_disabled,
                size=self.theme.font_size_xl,
                align="center",
            )

        if focused:
            pygame.draw.rect(
                screen, self.theme.primary, art_rect.inflate(6, 6), width=3,
                border_radius=radius + 3,
            )

        y = art_rect.bottom + self.theme.px(self.theme.padding_sm)
        title_rect = self.text.render(
            screen,
            title,
            (rect.left, y),
            color=self.theme.text_primary if focused else self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=rect.width,
        )
        if subtitle:
            self.text.render(
                screen,
                subtitle,
                (rect.left, title_rect.bottom),
                color=self.theme.text_disabled,
                size=self.theme.font_size_xs,
                max_width=rect.width,
            )

        return art_rect

    def get_placeholder_initials(self, name: str, max_chars: int = 2) -> str:
        """
        Get initials from a name for placeholder.

        Args:
            name: Full name
            max_chars: Maximum initials to return

        Returns:
            Initials string (only alphanumeric characters)
        """
        if not name:
            return "?"

        clean_name = re.sub(r"\([^)]*\)", "", name)
        clean_name = re.sub(r"\[[^\]]*\]", "", clean_name)

        initials = ""
        for word in clean_name.replace("-", " ").split():
            for char in word:
                if char.isalnum():
                    initials += char.upper()
                    break
            if len(initials) >= max_chars:
                break

        return initials if initials else "?"
