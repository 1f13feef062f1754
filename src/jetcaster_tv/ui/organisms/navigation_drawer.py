"""
Navigation drawer organism - Persistent side panel of navigation actions.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

import pygame

from jetcaster_tv.state import DrawerFocus
from jetcaster_tv.ui.layout import JetcasterAppDefaults, app_defaults
from jetcaster_tv.ui.molecules.navigation_drawer_item import NavigationDrawerItem
from jetcaster_tv.ui.theme import Theme, default_theme


@dataclass(frozen=True)
class DrawerItem:
    """
    A drawer entry.

    Attributes:
        label: Text shown when expanded
        icon: Leading icon type
        action: Name of the zero-argument navigation method to call
        supporting_text: Optional smaller second line
    """

    label: str
    icon: str
    action: str
    supporting_text: Optional[str] = None


@dataclass(frozen=True)
class DrawerSpacer:
    """Takes a share of the leftover drawer height, proportional to weight."""

    weight: float = 1.0


DrawerEntry = Union[DrawerItem, DrawerSpacer]

DRAWER_ENTRIES: Tuple[DrawerEntry, ...] = (
    DrawerItem("Name", "person", "navigate_to_profile", supporting_text="Switch Account"),
    DrawerSpacer(),
    DrawerItem("Search", "search", "navigate_to_search"),
    DrawerItem("Discover", "home", "navigate_to_discover"),
    DrawerItem("Library", "video_library", "navigate_to_library"),
    DrawerSpacer(),
    DrawerItem("Settings", "settings", "navigate_to_settings"),
)


class NavigationDrawer:
    """
    Navigation drawer organism.

    Collapsed it is an icon rail; with focus it expands over the
    content and shows labels. No entry is ever drawn as selected: the
    drawer does not know which destination is current.
    """

    def __init__(
        self,
        theme: Theme = default_theme,
        defaults: JetcasterAppDefaults = app_defaults,
        entries: Tuple[DrawerEntry, ...] = DRAWER_ENTRIES,
    ):
        self.theme = theme
        self.defaults = defaults
        self.entries = entries
        self.drawer_item = NavigationDrawerItem(theme)

    @property
    def items(self) -> List[DrawerItem]:
        """Focusable entries in display order (spacers removed)."""
        return [entry for entry in self.entries if isinstance(entry, DrawerItem)]

    def activate(self, index: int, actions: Any) -> None:
        """
        Invoke the navigation action of the item at index.

        Args:
            index: Index into self.items
            actions: Navigation dispatcher (e.g. JetcasterAppState)
        """
        item = self.items[index]
        getattr(actions, item.action)()

    def rail_width(self, expanded: bool) -> int:
        width = (
            self.theme.drawer_expanded_width if expanded else self.theme.drawer_collapsed_width
        )
        return self.theme.px(width)

    def layout(self, bounds: pygame.Rect, expanded: bool) -> List[pygame.Rect]:
        """
        Compute item rects inside the drawer column.

        Args:
            bounds: Full area the drawer sits in (its left edge is used)
            expanded: Use expanded width

        Returns:
            One rect per entry in self.items
        """
        column = pygame.Rect(bounds.left, bounds.top, self.rail_width(expanded), bounds.height)
        column = self.defaults.over_scan_margin.drawer.into_padding_values().apply_to(
            column, self.theme.density
        )

        item_height = self.theme.px(self.theme.drawer_item_height)
        gap = self.theme.px(self.theme.padding_xs)
        inset = self.theme.px(self.theme.padding_sm)
        items = self.items

        fixed = len(items) * item_height + max(0, len(items) - 1) * gap
        free = max(0, column.height - fixed)
        total_weight = sum(e.weight for e in self.entries if isinstance(e, DrawerSpacer))

        rects = []
        y = column.top
        for entry in self.entries:
            if isinstance(entry, DrawerSpacer):
                if total_weight:
                    y += int(free * entry.weight / total_weight)
                continue
            rects.append(
                pygame.Rect(column.left + inset, y, column.width - inset * 2, item_height)
            )
            y += item_height + gap
        return rects

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        focus: DrawerFocus,
    ) -> List[pygame.Rect]:
        """
        Render the drawer.

        Args:
            screen: Surface to render to
            bounds: Full area the drawer and its content occupy
            focus: Drawer open state and highlighted item

        Returns:
            Item rects, in self.items order
        """
        expanded = focus.open
        if expanded:
            scrim = pygame.Surface(bounds.size, pygame.SRCALPHA)
            scrim.fill(self.theme.scrim)
            screen.blit(scrim, bounds.topleft)
            panel = pygame.Rect(bounds.left, bounds.top, self.rail_width(True), bounds.height)
            pygame.draw.rect(screen, self.theme.surface, panel)

        rects = self.layout(bounds, expanded)
        for i, (item, rect) in enumerate(zip(self.items, rects)):
            self.drawer_item.render(
                screen,
                rect,
                item.icon,
                item.label,
                supporting_text=item.supporting_text,
                expanded=expanded,
                selected=False,
                focused=expanded and i == focus.highlighted,
            )
        return rects
