"""
Screen manager - Route table mapping the current destination to one screen.
"""

import pygame
from typing import Any, Callable, Dict, List, Optional, Tuple

from jetcaster_tv import routes
from jetcaster_tv.config.settings import save_settings
from jetcaster_tv.services.models import Podcast
from jetcaster_tv.state import UiState
from jetcaster_tv.ui.theme import Theme
from jetcaster_tv.ui.layout import JetcasterAppDefaults, ScreenLayout, app_defaults
from jetcaster_tv.ui.templates.global_navigation import WithGlobalNavigation
from jetcaster_tv.view_models import PodcastScreenViewModel, ViewModels
from .discover_screen import DiscoverScreen
from .library_screen import LibraryScreen
from .search_screen import SearchScreen
from .podcast_screen import PodcastScreen
from .player_screen import PlayerScreen
from .profile_screen import ProfileScreen
from .settings_screen import SettingsScreen

PodcastViewModelFactory = Callable[[routes.Podcast], PodcastScreenViewModel]

WRAPPED_DESTINATIONS = (routes.Discover, routes.Library)


class Router:
    """
    Route table.

    Renders exactly one screen for the current destination and routes
    focus and selection to it. Discover and Library are wrapped with the
    navigation drawer; every other destination is drawn on its own.
    """

    def __init__(
        self,
        theme: Theme,
        view_models: ViewModels,
        podcast_view_model_factory: PodcastViewModelFactory,
        defaults: JetcasterAppDefaults = app_defaults,
        settings: Optional[Dict[str, Any]] = None,
        get_artwork: Optional[Callable[[Podcast, int], Optional[pygame.Surface]]] = None,
        on_settings_changed: Callable[[Dict[str, Any]], Any] = save_settings,
    ):
        self.theme = theme
        self.defaults = defaults
        self.view_models = view_models
        self.podcast_view_model_factory = podcast_view_model_factory
        self.settings = settings if settings is not None else {}
        self.get_artwork = get_artwork
        self.on_settings_changed = on_settings_changed

        self.global_navigation = WithGlobalNavigation(theme, defaults)

        self.discover_screen = DiscoverScreen(theme, defaults)
        self.library_screen = LibraryScreen(theme, defaults)
        self.search_screen = SearchScreen(theme, defaults)
        self.podcast_screen = PodcastScreen(theme, defaults)
        self.player_screen = PlayerScreen(theme)
        self.profile_screen = ProfileScreen(theme)
        self.settings_screen = SettingsScreen(theme, defaults)

        margins = defaults.over_scan_margin
        default_padding = margins.default.into_padding_values()
        self.layouts: Dict[type, ScreenLayout] = {
            routes.Discover: ScreenLayout(default_padding, fill_max_size=True),
            routes.Library: ScreenLayout(default_padding, fill_max_size=True),
            routes.Search: ScreenLayout(default_padding, fill_max_size=True),
            routes.Podcast: ScreenLayout(
                margins.podcast_details.into_padding_values(), fill_max_size=True
            ),
            routes.Player: ScreenLayout(default_padding),
            routes.Profile: ScreenLayout(default_padding),
            routes.Settings: ScreenLayout(default_padding),
        }

        # Podcast view models keyed by (back stack index, id of the entry)
        self._podcast_view_models: Dict[
            Tuple[int, int], Tuple[routes.Podcast, PodcastScreenViewModel]
        ] = {}

    @property
    def drawer(self):
        return self.global_navigation.drawer

    def is_wrapped(self, destination: routes.Screen) -> bool:
        """True if the destination is shown with the navigation drawer."""
        return isinstance(destination, WRAPPED_DESTINATIONS)

    def layout_for(self, destination: routes.Screen) -> ScreenLayout:
        try:
            return self.layouts[type(destination)]
        except KeyError:
            raise TypeError(f"Unknown destination: {destination!r}") from None

    def podcast_view_model(self, ui_state: UiState) -> PodcastScreenViewModel:
        """
        View model of the podcast entry on top of the back stack.

        Created on first use for that entry and kept while the entry
        stays on the stack.
        """
        back_stack = ui_state.navigation.back_stack
        live = {(i, id(entry)) for i, entry in enumerate(back_stack)}
        for key in list(self._podcast_view_models):
            if key not in live:
                del self._podcast_view_models[key]

        entry = back_stack[-1]
        key = (len(back_stack) - 1, id(entry))
        if key not in self._podcast_view_models:
            # The entry is stored alongside so its id stays unique while cached
            self._podcast_view_models[key] = (entry, self.podcast_view_model_factory(entry))
        return self._podcast_view_models[key][1]

    def _show_podcast_details(self, ui_state: UiState) -> Callable[[Podcast], None]:
        return lambda podcast: ui_state.navigation.show_podcast_details(podcast.uri)

    def render(
        self, screen: pygame.Surface, bounds: pygame.Rect, ui_state: UiState
    ) -> Dict[str, Any]:
        """
        Render the screen for the current destination.

        Args:
            screen: Surface to render to
            bounds: Area of the whole app
            ui_state: Navigation, drawer and focus state

        Returns:
            Dictionary with the destination name, the screen's rects
            under "content" and, for wrapped screens, "drawer_items"
        """
        destination = ui_state.navigation.current_screen
        layout = self.layout_for(destination)
        focus = None if ui_state.drawer.open else ui_state.content_focus
        rects: Dict[str, Any] = {"destination": destination.name}

        if isinstance(destination, routes.Discover):
            content, drawer_items = self.global_navigation.render(
                screen,
                bounds,
                ui_state.drawer,
                lambda area: self.discover_screen.render(
                    screen, area, layout, self.view_models.discover, focus, self.get_artwork
                ),
            )
            rects["content"] = content
            rects["drawer_items"] = drawer_items

        elif isinstance(destination, routes.Library):
            content, drawer_items = self.global_navigation.render(
                screen,
                bounds,
                ui_state.drawer,
                lambda area: self.library_screen.render(
                    screen, area, layout, self.view_models.library, focus, self.get_artwork
                ),
            )
            rects["content"] = content
            rects["drawer_items"] = drawer_items

        elif isinstance(destination, routes.Search):
            rects["content"] = self.search_screen.render(
                screen, bounds, layout, self.view_models.search, focus, self.get_artwork
            )

        elif isinstance(destination, routes.Podcast):
            rects["content"] = self.podcast_screen.render(
                screen,
                bounds,
                layout,
                self.podcast_view_model(ui_state),
                focus,
                self.get_artwork,
            )

        elif isinstance(destination, routes.Player):
            rects["content"] = self.player_screen.render(screen, bounds, layout)

        elif isinstance(destination, routes.Profile):
            rects["content"] = self.profile_screen.render(
                screen, bounds, layout, self.settings.get("account_name", "Name")
            )

        elif isinstance(destination, routes.Settings):
            rects["content"] = self.settings_screen.render(
                screen, bounds, layout, self.settings, focus
            )

        return rects

    def row_lengths(self, ui_state: UiState) -> List[int]:
        """Focusable items per row of the current screen."""
        destination = ui_state.navigation.current_screen

        if isinstance(destination, routes.Discover):
            return self.discover_screen.row_lengths(self.view_models.discover)
        elif isinstance(destination, routes.Library):
            return self.library_screen.row_lengths(self.view_models.library)
        elif isinstance(destination, routes.Search):
            return self.search_screen.row_lengths(self.view_models.search)
        elif isinstance(destination, routes.Podcast):
            return self.podcast_screen.row_lengths(self.podcast_view_model(ui_state))
        elif isinstance(destination, routes.Player):
            return self.player_screen.row_lengths()
        elif isinstance(destination, routes.Profile):
            return self.profile_screen.row_lengths()
        elif isinstance(destination, routes.Settings):
            return self.settings_screen.row_lengths()
        raise TypeError(f"Unknown destination: {destination!r}")

    def select(self, ui_state: UiState) -> None:
        """Activate the focused item of the current screen."""
        destination = ui_state.navigation.current_screen
        navigation = ui_state.navigation
        focus = ui_state.content_focus
        focus.clamp(self.row_lengths(ui_state))

        if isinstance(destination, routes.Discover):
            self.discover_screen.select(
                focus, self.view_models.discover, self._show_podcast_details(ui_state)
            )
        elif isinstance(destination, routes.Library):
            self.library_screen.select(
                focus,
                self.view_models.library,
                navigation.navigate_to_discover,
                self._show_podcast_details(ui_state),
            )
        elif isinstance(destination, routes.Search):
            self.search_screen.select(
                focus, self.view_models.search, self._show_podcast_details(ui_state)
            )
        elif isinstance(destination, routes.Podcast):
            self.podcast_screen.select(
                focus,
                self.podcast_view_model(ui_state),
                back_to_home_screen=navigation.navigate_to_discover,
                play_episode=navigation.play_episode,
            )
        elif isinstance(destination, routes.Settings):
            self.settings_screen.select(focus, self.settings, self.on_settings_changed)
        elif not isinstance(destination, (routes.Player, routes.Profile)):
            raise TypeError(f"Unknown destination: {destination!r}")
