"""
Settings screen - Application settings menu.
"""

import pygame
from typing import Any, Callable, Dict, List, Optional, Tuple

from jetcaster_tv.state import ContentFocus
from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, ScreenLayout, app_defaults
from jetcaster_tv.ui.organisms.header import Header
from jetcaster_tv.ui.organisms.menu_list import MenuList
from jetcaster_tv.utils.formatting import truncate_text


class SettingsScreen:
    """
    Settings screen.

    Displays application settings with their current values. Toggles
    flip and save on select; other rows are informational.
    """

    # (label, settings key for a boolean toggle or None)
    ITEMS: List[Tuple[str, Optional[str]]] = [
        ("Show Artwork", "enable_artwork"),
        ("Catalog Source", None),
        ("Fullscreen", "fullscreen"),
    ]

    MAX_VALUE_LENGTH = 48

    def __init__(
        self, theme: Theme = default_theme, defaults: JetcasterAppDefaults = app_defaults
    ):
        self.theme = theme
        self.defaults = defaults
        self.header = Header(theme)
        self.menu_list = MenuList(theme)

    def row_lengths(self) -> List[int]:
        return [1] * len(self.ITEMS)

    def get_value(self, label: str, settings: Dict[str, Any]) -> str:
        """Display value for a settings row."""
        if label == "Show Artwork":
            return "ON" if settings.get("enable_artwork", True) else "OFF"
        elif label == "Fullscreen":
            value = "ON" if settings.get("fullscreen", True) else "OFF"
            return f"{value} (restart)"
        elif label == "Catalog Source":
            source = settings.get("catalog_url") or settings.get("catalog_path") or "Bundled"
            return truncate_text(source, self.MAX_VALUE_LENGTH)
        return ""

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        layout: ScreenLayout,
        settings: Dict[str, Any],
        focus: Optional[ContentFocus],
    ) -> Dict[str, Any]:
        """
        Render the settings screen.

        Args:
            screen: Surface to render to
            bounds: Area given by the router
            layout: Padding and fill for this destination
            settings: Current settings dictionary
            focus: Content focus (row = settings item)

        Returns:
            Dictionary of item rects
        """
        content = layout.content_rect(bounds, self.theme.density)
        if layout.fill_max_size:
            pygame.draw.rect(screen, self.theme.background, content)

        header_rect = self.header.render(
            screen, content, "Settings", padding=self.defaults.padding.section_title
        )
        list_rect = pygame.Rect(
            content.left,
            header_rect.bottom,
            content.width,
            max(0, content.bottom - header_rect.bottom),
        )
        item_rects, _ = self.menu_list.render(
            screen,
            list_rect,
            [label for label, _ in self.ITEMS],
            focus.row if focus is not None else None,
            get_label=lambda label: label,
            get_secondary=lambda label: self.get_value(label, settings),
        )
        return {"items": item_rects}

    def select(
        self,
        focus: ContentFocus,
        settings: Dict[str, Any],
        on_change: Callable[[Dict[str, Any]], Any],
    ) -> None:
        """Flip the focused toggle and hand the settings to on_change."""
        if not 0 <= focus.row < len(self.ITEMS):
            return
        _, key = self.ITEMS[focus.row]
        if key is None:
            return
        settings[key] = not settings.get(key, True)
        on_change(settings)
