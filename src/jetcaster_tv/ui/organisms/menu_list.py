"""
Menu list organism - Scrollable vertical list of menu items.
"""

import pygame
from typing import List, Tuple, Optional, Any, Callable

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.molecules.menu_item import MenuItem


class MenuList:
    """
    Menu list organism.

    Displays a scrollable list of menu items, keeping the
    highlighted row in view.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.menu_item = MenuItem(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        items: List[Any],
        highlighted: Optional[int],
        get_label: Callable[[Any], str],
        get_secondary: Optional[Callable[[Any], Optional[str]]] = None,
        item_height: Optional[int] = None,
        item_spacing: int = 0,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render a menu list.

        Args:
            screen: Surface to render to
            rect: List area rectangle
            items: List of items
            highlighted: Focused index, or None when the list has no focus
            get_label: Function to get label from item
            get_secondary: Function to get right-aligned value text
            item_height: Row height in pixels (default: theme menu item height)
            item_spacing: Space between rows in pixels

        Returns:
            Tuple of (list of item rects, scroll offset)
        """
        if not items:
            return [], 0

        if item_height is None:
            item_height = self.theme.px(self.theme.menu_item_height)

        total_item_height = item_height + item_spacing
        visible_count = max(1, rect.height // total_item_height)
        scroll_offset = self._calculate_scroll(highlighted or 0, len(items), visible_count)

        item_rects = []
        y = rect.top
        for i in range(scroll_offset, min(scroll_offset + visible_count, len(items))):
            item = items[i]
            item_rect = pygame.Rect(rect.left, y, rect.width, item_height)
            self.menu_item.render(
                screen,
                item_rect,
                get_label(item),
                highlighted=(i == highlighted),
                secondary_text=get_secondary(item) if get_secondary else None,
            )
            item_rects.append(item_rect)
            y += total_item_height

        return item_rects, scroll_offset

    def _calculate_scroll(
        self, highlighted: int, total_items: int, visible_count: int
    ) -> int:
        """Calculate scroll offset to keep highlighted item visible."""
        if total_items <= visible_count:
            return 0

        # Keep highlighted item in view with some context
        context = 1
        min_scroll = max(0, highlighted - visible_count + context + 1)
        max_scroll_limit = total_items - visible_count
        return max(0, min(min_scroll, max_scroll_limit))
