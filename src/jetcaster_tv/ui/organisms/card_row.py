"""
Card row organism - Horizontally scrolling row of podcast cards.
"""

import pygame
from typing import List, Tuple, Optional, Any, Callable

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.molecules.podcast_card import PodcastCard


class CardRow:
    """
    Card row organism.

    Lays cards of a fixed width left to right, separated by a fixed
    gap, and scrolls so the focused card stays on screen.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.card = PodcastCard(theme)

    def height(self, card_width: int, with_subtitle: bool = True) -> int:
        """Total pixel height of a row of cards card_width wide."""
        return card_width + self.card.caption_height(with_subtitle)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        items: List[Any],
        focused: Optional[int],
        card_width: int,
        gap: int,
        get_title: Callable[[Any], str],
        get_subtitle: Optional[Callable[[Any], str]] = None,
        get_image: Optional[Callable[[Any], Optional[pygame.Surface]]] = None,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render a row of cards.

        Args:
            screen: Surface to render to
            rect: Row area; cards are clipped to its width
            items: Items to show
            focused: Index of the focused item, or None when the row has no focus
            card_width: Card width in pixels
            gap: Gap between cards in pixels
            get_title: Caption for an item
            get_subtitle: Optional second caption line
            get_image: Artwork for an item (None while loading)

        Returns:
            Tuple of (artwork rect per visible item, index of first visible item)
        """
        if not items or card_width <= 0:
            return [], 0

        visible_count = max(1, (rect.width + gap) // (card_width + gap))
        first = self._calculate_scroll(focused or 0, len(items), visible_count)

        item_rects = []
        x = rect.left
        for i in range(first, min(first + visible_count, len(items))):
            item = items[i]
            card_rect = pygame.Rect(x, rect.top, card_width, rect.height)
            art_rect = self.card.render(
                screen,
                card_rect,
                get_title(item),
                subtitle=get_subtitle(item) if get_subtitle else None,
                image=get_image(item) if get_image else None,
                focused=(i == focused),
            )
            item_rects.append(art_rect)
            x += card_width + gap

        self._draw_scroll_indicators(screen, rect, first, len(items), visible_count, card_width)
        return item_rects, first

    def _calculate_scroll(self, focused: int, total_items: int, visible_count: int) -> int:
        """Keep the focused card visible with one card of context on the left."""
        if total_items <= visible_count:
            return 0
        ideal = max(0, focused - 1)
        return min(ideal, total_items - visible_count)

    def _draw_scroll_indicators(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        first: int,
        total_items: int,
        visible_count: int,
        card_width: int,
    ) -> None:
        """Draw chevrons when cards are hidden on either side."""
        size = self.theme.px(8)
        center_y = rect.top + card_width // 2

        if first > 0:
            points = [
                (rect.left - size - 4, center_y),
                (rect.left - 4, center_y - size),
                (rect.left - 4, center_y + size),
            ]
            pygame.draw.polygon(screen, self.theme.text_secondary, points)

        if first + visible_count < total_items:
            points = [
                (rect.right + size + 4, center_y),
                (rect.right + 4, center_y - size),
                (rect.right + 4, center_y + size),
            ]
            pygame.draw.polygon(screen, self.theme.text_secondary, points)
