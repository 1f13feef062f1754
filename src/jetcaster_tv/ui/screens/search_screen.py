"""
Search screen - On-screen keyboard and matching podcasts.
"""

import pygame
from typing import Any, Callable, Dict, List, Optional

from jetcaster_tv.services.models import Podcast
from jetcaster_tv.state import ContentFocus
from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, ScreenLayout, app_defaults
from jetcaster_tv.ui.atoms.text import Text
from jetcaster_tv.ui.organisms.card_row import CardRow
from jetcaster_tv.ui.organisms.char_keyboard import CharKeyboard
from jetcaster_tv.ui.organisms.header import Header
from jetcaster_tv.view_models import SearchViewModel


class SearchScreen:
    """
    Search screen.

    The keyboard rows come first, then one row of results. The query
    updates as keys are selected.
    """

    def __init__(
        self, theme: Theme = default_theme, defaults: JetcasterAppDefaults = app_defaults
    ):
        self.theme = theme
        self.defaults = defaults
        self.keyboard = CharKeyboard(theme)
        self.header = Header(theme)
        self.card_row = CardRow(theme)
        self.text = Text(theme)

    @property
    def results_row(self) -> int:
        return len(self.keyboard.row_lengths())

    def row_lengths(self, view_model: SearchViewModel) -> List[int]:
        return self.keyboard.row_lengths() + [len(view_model.results)]

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        layout: ScreenLayout,
        view_model: SearchViewModel,
        focus: Optional[ContentFocus],
        get_artwork: Optional[Callable[[Podcast, int], Optional[pygame.Surface]]] = None,
    ) -> Dict[str, Any]:
        """
        Render the search screen.

        Returns:
            Dictionary of key rects, input field rect and result rects
        """
        content = layout.content_rect(bounds, self.theme.density)
        if layout.fill_max_size:
            pygame.draw.rect(screen, self.theme.background, content)

        key_focus = None
        if focus is not None and focus.row < self.results_row:
            key_focus = (focus.row, focus.column)

        key_rects, input_rect = self.keyboard.render(
            screen, content, view_model.query, key_focus
        )

        top = content.top + self.keyboard.height() + self.theme.px(self.theme.padding_lg)
        results = view_model.results
        header_rect = self.header.render(
            screen,
            pygame.Rect(content.left, top, content.width, content.bottom - top),
            "Results",
            padding=self.defaults.padding.section_title,
            size=self.theme.font_size_md,
        )

        if not results:
            if view_model.query.strip():
                self.text.render(
                    screen,
                    f'No podcasts match "{view_model.query.strip()}"',
                    (content.left, header_rect.bottom),
                    color=self.theme.text_secondary,
                    size=self.theme.font_size_sm,
                    max_width=content.width,
                )
            return {"keys": key_rects, "input": input_rect, "results": []}

        card_width = self.theme.px(self.defaults.card_width.small)
        result_rects, _ = self.card_row.render(
            screen,
            pygame.Rect(
                content.left, header_rect.bottom, content.width, self.card_row.height(card_width)
            ),
            results,
            focus.column if focus is not None and focus.row == self.results_row else None,
            card_width,
            self.theme.px(self.defaults.gap_settings.catalog_item_gap),
            get_title=lambda p: p.title,
            get_subtitle=lambda p: p.author,
            get_image=(lambda p: get_artwork(p, card_width)) if get_artwork else None,
        )
        return {"keys": key_rects, "input": input_rect, "results": result_rects}

    def select(
        self,
        focus: ContentFocus,
        view_model: SearchViewModel,
        show_podcast_details: Callable[[Podcast], None],
    ) -> None:
        if focus.row < self.results_row:
            view_model.set_query(
                self.keyboard.handle_selection(focus.row, focus.column, view_model.query)
            )
            return

        results = view_model.results
        if 0 <= focus.column < len(results):
            show_podcast_details(results[focus.column])
