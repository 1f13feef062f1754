"""
Library screen - Subscribed podcasts.
"""

import pygame
from typing import Any, Callable, Dict, List, Optional

from jetcaster_tv.services.models import Podcast
from jetcaster_tv.state import ContentFocus
from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, ScreenLayout, app_defaults
from jetcaster_tv.ui.atoms.text import Text
from jetcaster_tv.ui.molecules.action_button import ActionButton
from jetcaster_tv.ui.organisms.card_row import CardRow
from jetcaster_tv.ui.organisms.header import Header
from jetcaster_tv.view_models import LibraryViewModel


class LibraryScreen:
    """
    Library screen.

    One row of subscribed podcasts. With no subscriptions, a message
    and a single button leading to Discover.
    """

    EMPTY_MESSAGE = "No subscribed podcasts"
    DISCOVER_BUTTON = "Navigate to Discover"

    def __init__(
        self, theme: Theme = default_theme, defaults: JetcasterAppDefaults = app_defaults
    ):
        self.theme = theme
        self.defaults = defaults
        self.header = Header(theme)
        self.card_row = CardRow(theme)
        self.text = Text(theme)
        self.action_button = ActionButton(theme)

    def row_lengths(self, view_model: LibraryViewModel) -> List[int]:
        if view_model.is_empty:
            return [1]
        return [len(view_model.subscribed_podcasts)]

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        layout: ScreenLayout,
        view_model: LibraryViewModel,
        focus: Optional[ContentFocus],
        get_artwork: Optional[Callable[[Podcast, int], Optional[pygame.Surface]]] = None,
    ) -> Dict[str, Any]:
        """
        Render the library screen.

        Returns:
            Dictionary with "podcasts" rects, or "discover_button" when empty
        """
        content = layout.content_rect(bounds, self.theme.density)
        if layout.fill_max_size:
            pygame.draw.rect(screen, self.theme.background, content)

        header_rect = self.header.render(
            screen,
            content,
            "Library",
            padding=self.defaults.padding.section_title,
        )
        body = pygame.Rect(
            content.left, header_rect.bottom, content.width, content.bottom - header_rect.bottom
        )

        if view_model.is_empty:
            message_rect = self.text.render(
                screen,
                self.EMPTY_MESSAGE,
                body.topleft,
                color=self.theme.text_secondary,
                size=self.theme.font_size_md,
            )
            button_rect = pygame.Rect(
                body.left,
                message_rect.bottom + self.theme.px(self.theme.padding_md),
                self.action_button.measure_width(self.DISCOVER_BUTTON, icon="home"),
                self.theme.px(self.theme.button_height),
            )
            self.action_button.render(
                screen,
                button_rect,
                self.DISCOVER_BUTTON,
                focused=focus is not None,
                icon="home",
            )
            return {"discover_button": button_rect}

        card_width = self.theme.px(self.defaults.card_width.medium)
        podcast_rects, _ = self.card_row.render(
            screen,
            pygame.Rect(body.left, body.top, body.width, self.card_row.height(card_width)),
            view_model.subscribed_podcasts,
            focus.column if focus is not None else None,
            card_width,
            self.theme.px(self.defaults.gap_settings.catalog_item_gap),
            get_title=lambda p: p.title,
            get_subtitle=lambda p: p.author,
            get_image=(lambda p: get_artwork(p, card_width)) if get_artwork else None,
        )
        return {"podcasts": podcast_rects}

    def select(
        self,
        focus: ContentFocus,
        view_model: LibraryViewModel,
        navigate_to_discover: Callable[[], None],
        show_podcast_details: Callable[[Podcast], None],
    ) -> None:
        if view_model.is_empty:
            navigate_to_discover()
            return

        podcasts = view_model.subscribed_podcasts
        if 0 <= focus.column < len(podcasts):
            show_podcast_details(podcasts[focus.column])
