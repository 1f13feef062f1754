"""
Podcast details screen - Artwork, description, subscription and episodes.
"""

import pygame
from typing import Any, Callable, Dict, List, Optional

from jetcaster_tv.services.models import Episode, Podcast
from jetcaster_tv.state import ContentFocus
from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, ScreenLayout, app_defaults
from jetcaster_tv.ui.atoms.text import Text
from jetcaster_tv.ui.molecules.action_button import ActionButton
from jetcaster_tv.ui.molecules.podcast_card import PodcastCard
from jetcaster_tv.ui.organisms.menu_list import MenuList
from jetcaster_tv.utils.formatting import format_duration, format_published
from jetcaster_tv.view_models import PodcastScreenViewModel

BUTTON_ROW = 0


def _episode_details(episode: Episode) -> str:
    parts = [format_published(episode.published), format_duration(episode.duration)]
    return " | ".join(part for part in parts if part)


class PodcastScreen:
    """
    Podcast details screen.

    Row 0 holds the buttons; each episode is a row of its own below it.
    An unknown podcast shows a message and only the back button.
    """

    NOT_FOUND_MESSAGE = "Podcast not found"
    BACK_BUTTON = "Back to Home"

    def __init__(
        self, theme: Theme = default_theme, defaults: JetcasterAppDefaults = app_defaults
    ):
        self.theme = theme
        self.defaults = defaults
        self.text = Text(theme)
        self.card = PodcastCard(theme)
        self.action_button = ActionButton(theme)
        self.menu_list = MenuList(theme)

    def buttons(self, view_model: PodcastScreenViewModel) -> List[str]:
        if view_model.podcast is None:
            return [self.BACK_BUTTON]
        subscribe = "Unsubscribe" if view_model.is_subscribed else "Subscribe"
        return [subscribe, self.BACK_BUTTON]

    def row_lengths(self, view_model: PodcastScreenViewModel) -> List[int]:
        return [len(self.buttons(view_model))] + [1] * len(view_model.episodes)

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        layout: ScreenLayout,
        view_model: PodcastScreenViewModel,
        focus: Optional[ContentFocus],
        get_artwork: Optional[Callable[[Podcast, int], Optional[pygame.Surface]]] = None,
    ) -> Dict[str, Any]:
        """
        Render the podcast details screen.

        Returns:
            Dictionary of button rects and episode rects
        """
        content = layout.content_rect(bounds, self.theme.density)
        if layout.fill_max_size:
            pygame.draw.rect(screen, self.theme.background, content)

        podcast = view_model.podcast
        gap = self.theme.px(self.defaults.gap_settings.catalog_section_gap)
        padding = self.theme.px(self.theme.padding_md)

        if podcast is None:
            message_rect = self.text.render(
                screen,
                self.NOT_FOUND_MESSAGE,
                content.topleft,
                color=self.theme.text_primary,
                size=self.theme.font_size_lg,
            )
            button_rects = self._render_buttons(
                screen, content.left, message_rect.bottom + padding, view_model, focus
            )
            return {"buttons": button_rects, "episodes": []}

        art_size = self.theme.px(self.defaults.card_width.large)
        art_rect = pygame.Rect(content.left, content.top, art_size, art_size)
        image = get_artwork(podcast, art_size) if get_artwork else None
        pygame.draw.rect(screen, self.theme.surface, art_rect, border_radius=self.theme.radius_lg)
        if image is not None:
            screen.blit(pygame.transform.smoothscale(image, art_rect.size), art_rect)
        else:
            initials = self.card.get_placeholder_initials(podcast.title)
            _, height = self.text.measure(initials, self.theme.font_size_xl)
            self.text.render(
                screen,
                initials,
                (art_rect.centerx, art_rect.centery - height // 2),
                color=self.theme.text_disabled,
                size=self.theme.font_size_xl,
                align="center",
            )

        left = art_rect.right + gap
        width = max(0, content.right - left)
        title_rect = self.text.render(
            screen,
            podcast.title,
            (left, content.top),
            size=self.theme.font_size_xl,
            max_width=width,
        )
        author_rect = self.text.render(
            screen,
            podcast.author,
            (left, title_rect.bottom + self.theme.px(self.theme.padding_xs)),
            color=self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=width,
        )
        description_rect = self.text.render_wrapped(
            screen,
            podcast.description,
            pygame.Rect(left, author_rect.bottom + padding, width, content.height),
            size=self.theme.font_size_sm,
            max_lines=3,
        )

        buttons_top = max(description_rect.bottom, author_rect.bottom) + padding
        button_rects = self._render_buttons(screen, left, buttons_top, view_model, focus)

        episodes_top = buttons_top + self.theme.px(self.theme.button_height) + padding
        highlighted = None
        if focus is not None and focus.row > BUTTON_ROW:
            highlighted = focus.row - 1

        episode_rects, _ = self.menu_list.render(
            screen,
            pygame.Rect(left, episodes_top, width, max(0, content.bottom - episodes_top)),
            view_model.episodes,
            highlighted,
            get_label=lambda e: e.title,
            get_secondary=_episode_details,
        )
        return {"buttons": button_rects, "episodes": episode_rects}

    def _render_buttons(
        self,
        screen: pygame.Surface,
        left: int,
        top: int,
        view_model: PodcastScreenViewModel,
        focus: Optional[ContentFocus],
    ) -> List[pygame.Rect]:
        rects = []
        x = left
        for i, label in enumerate(self.buttons(view_model)):
            icon = "back" if label == self.BACK_BUTTON else None
            rect = pygame.Rect(
                x,
                top,
                self.action_button.measure_width(label, icon=icon),
                self.theme.px(self.theme.button_height),
            )
            focused = focus is not None and focus.row == BUTTON_ROW and focus.column == i
            self.action_button.render(screen, rect, label, focused=focused, icon=icon)
            rects.append(rect)
            x = rect.right + self.theme.px(self.theme.padding_md)
        return rects

    def select(
        self,
        focus: ContentFocus,
        view_model: PodcastScreenViewModel,
        back_to_home_screen: Callable[[], None],
        play_episode: Callable[[], None],
    ) -> None:
        """
        Act on the focused item.

        The subscription button flips the subscription, the back button
        calls back_to_home_screen and any episode calls play_episode.
        """
        if focus.row == BUTTON_ROW:
            buttons = self.buttons(view_model)
            if not 0 <= focus.column < len(buttons):
                return
            if buttons[focus.column] == self.BACK_BUTTON:
                back_to_home_screen()
            else:
                view_model.toggle_subscription()
            return

        if 0 <= focus.row - 1 < len(view_model.episodes):
            play_episode()
