"""
Global navigation template - Drawer rail plus the screen beside it.
"""

import pygame
from typing import Callable, List, Tuple

from jetcaster_tv.state import DrawerFocus
from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, app_defaults
from jetcaster_tv.ui.organisms.navigation_drawer import NavigationDrawer


class WithGlobalNavigation:
    """
    Wraps a top-level screen with the navigation drawer.

    The content is laid out next to the collapsed rail. An open drawer
    is drawn afterwards so it overlays the content.
    """

    def __init__(
        self,
        theme: Theme = default_theme,
        defaults: JetcasterAppDefaults = app_defaults,
        drawer: NavigationDrawer = None,
    ):
        self.theme = theme
        self.drawer = drawer if drawer is not None else NavigationDrawer(theme, defaults)

    def content_bounds(self, bounds: pygame.Rect) -> pygame.Rect:
        """Area to the right of the collapsed rail."""
        rail = self.drawer.rail_width(expanded=False)
        return pygame.Rect(
            bounds.left + rail, bounds.top, max(0, bounds.width - rail), bounds.height
        )

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        drawer_focus: DrawerFocus,
        content: Callable[[pygame.Rect], dict],
    ) -> Tuple[dict, List[pygame.Rect]]:
        """
        Render content then the drawer.

        Args:
            screen: Surface to render to
            bounds: Whole area available to the wrapped screen
            drawer_focus: Drawer open state and highlighted item
            content: Renders the screen into the given rect

        Returns:
            Tuple of (content result, drawer item rects)
        """
        result = content(self.content_bounds(bounds))
        drawer_rects = self.drawer.render(screen, bounds, drawer_focus)
        return result, drawer_rects
