"""
Discover screen - Category tabs, podcasts and latest episodes.
"""

import pygame
from typing import Any, Callable, Dict, List, Optional

from jetcaster_tv.services.models import Podcast
from jetcaster_tv.state import ContentFocus
from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, ScreenLayout, app_defaults
from jetcaster_tv.ui.organisms.card_row import CardRow
from jetcaster_tv.ui.organisms.header import Header
from jetcaster_tv.ui.organisms.tab_row import TabRow
from jetcaster_tv.utils.formatting import format_duration
from jetcaster_tv.view_models import DiscoverViewModel

ArtworkGetter = Callable[[Podcast, int], Optional[pygame.Surface]]

TAB_ROW = 0
PODCAST_ROW = 1
EPISODE_ROW = 2


class DiscoverScreen:
    """
    Discover screen.

    Focus rows: category tabs, podcast cards, latest episode cards.
    Moving focus across the tabs selects the focused category.
    """

    LATEST_EPISODE_LIMIT = 10

    def __init__(
        self, theme: Theme = default_theme, defaults: JetcasterAppDefaults = app_defaults
    ):
        self.theme = theme
        self.defaults = defaults
        self.tab_row = TabRow(theme)
        self.header = Header(theme)
        self.card_row = CardRow(theme)

    def row_lengths(self, view_model: DiscoverViewModel) -> List[int]:
        return [
            len(view_model.categories),
            len(view_model.podcasts),
            len(view_model.latest_episodes(self.LATEST_EPISODE_LIMIT)),
        ]

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        layout: ScreenLayout,
        view_model: DiscoverViewModel,
        focus: Optional[ContentFocus],
        get_artwork: Optional[ArtworkGetter] = None,
    ) -> Dict[str, Any]:
        """
        Render the discover screen.

        Args:
            screen: Surface to render to
            bounds: Area given by the router
            layout: Padding and fill for this destination
            view_model: Discover state
            focus: Content focus, or None while the drawer has focus
            get_artwork: Artwork lookup (podcast, size in px)

        Returns:
            Dictionary of tab, podcast and episode rects
        """
        content = layout.content_rect(bounds, self.theme.density)
        if layout.fill_max_size:
            pygame.draw.rect(screen, self.theme.background, content)

        if focus is not None and focus.row == TAB_ROW:
            view_model.select_category(focus.column)

        gaps = self.defaults.gap_settings
        widths = self.defaults.card_width
        padding = self.defaults.padding
        medium = self.theme.px(widths.medium)
        small = self.theme.px(widths.small)
        item_gap = self.theme.px(gaps.catalog_item_gap)
        section_gap = self.theme.px(gaps.catalog_section_gap)

        podcasts = view_model.podcasts
        episodes = view_model.latest_episodes(self.LATEST_EPISODE_LIMIT)

        # Section tops relative to content.top, used to scroll the focused row into view
        tab_height = self.tab_row.height(padding.tab) + self.theme.px(self.theme.padding_md)
        title_height = self.header.height(padding.section_title, self.theme.font_size_md)
        podcast_top = tab_height + title_height
        podcast_bottom = podcast_top + self.card_row.height(medium)
        episode_top = podcast_bottom + section_gap + title_height
        episode_bottom = episode_top + self.card_row.height(small)
        bottoms = {TAB_ROW: tab_height, PODCAST_ROW: podcast_bottom, EPISODE_ROW: episode_bottom}

        scroll = 0
        if focus is not None:
            scroll = max(0, bottoms.get(focus.row, 0) - content.height)

        previous_clip = screen.get_clip()
        screen.set_clip(content)
        top = content.top - scroll

        tab_rects, first_tab = self.tab_row.render(
            screen,
            (content.left, top),
            view_model.categories,
            selected=view_model.selected_index,
            focused=focus.column if focus is not None and focus.row == TAB_ROW else None,
            padding=padding.tab,
            max_width=content.width,
        )

        self.header.render(
            screen,
            pygame.Rect(content.left, top + tab_height, content.width, title_height),
            view_model.selected_category or "Discover",
            padding=padding.section_title,
            size=self.theme.font_size_md,
        )
        podcast_rects, _ = self.card_row.render(
            screen,
            pygame.Rect(content.left, top + podcast_top, content.width, podcast_bottom - podcast_top),
            podcasts,
            focus.column if focus is not None and focus.row == PODCAST_ROW else None,
            medium,
            item_gap,
            get_title=lambda p: p.title,
            get_subtitle=lambda p: p.author,
            get_image=(lambda p: get_artwork(p, medium)) if get_artwork else None,
        )

        self.header.render(
            screen,
            pygame.Rect(content.left, top + podcast_bottom + section_gap, content.width, title_height),
            "Latest episodes",
            padding=padding.section_title,
            size=self.theme.font_size_md,
        )

        def episode_artwork(episode):
            podcast = view_model.podcast_for(episode)
            return get_artwork(podcast, small) if podcast is not None else None

        episode_rects, _ = self.card_row.render(
            screen,
            pygame.Rect(content.left, top + episode_top, content.width, episode_bottom - episode_top),
            episodes,
            focus.column if focus is not None and focus.row == EPISODE_ROW else None,
            small,
            item_gap,
            get_title=lambda e: e.title,
            get_subtitle=lambda e: format_duration(e.duration),
            get_image=episode_artwork if get_artwork else None,
        )

        screen.set_clip(previous_clip)
        return {
            "tabs": tab_rects,
            "first_tab": first_tab,
            "podcasts": podcast_rects,
            "episodes": episode_rects,
        }

    def select(
        self,
        focus: ContentFocus,
        view_model: DiscoverViewModel,
        show_podcast_details: Callable[[Podcast], None],
    ) -> None:
        """
        Act on the focused item.

        A podcast card opens its details. An episode card opens the
        details of the podcast it belongs to.
        """
        if focus.row == TAB_ROW:
            view_model.select_category(focus.column)
            return

        if focus.row == PODCAST_ROW:
            podcasts = view_model.podcasts
            if 0 <= focus.column < len(podcasts):
                show_podcast_details(podcasts[focus.column])
            return

        if focus.row == EPISODE_ROW:
            episodes = view_model.latest_episodes(self.LATEST_EPISODE_LIMIT)
            if 0 <= focus.column < len(episodes):
                podcast = view_model.podcast_for(episodes[focus.column])
                if podcast is not None:
                    show_podcast_details(podcast)
