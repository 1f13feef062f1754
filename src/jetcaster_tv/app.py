"""
Jetcaster TV Application - Main orchestrator.

This module provides the main application class that coordinates
all components: navigation state, settings, services, input, and UI.
"""

import dataclasses
import traceback
from typing import Any, Dict, Optional

import pygame

from jetcaster_tv.constants import (
    APP_NAME,
    DEV_MODE,
    DESIGN_WIDTH_DP,
    FPS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from jetcaster_tv.config.settings import (
    load_settings,
    save_settings,
    load_controller_mapping,
    get_controller_mapping,
)
from jetcaster_tv.input.controller import ControllerHandler
from jetcaster_tv.input.navigation import NavigationHandler
from jetcaster_tv.services.artwork_cache import ArtworkCache
from jetcaster_tv.services.catalog import PodcastCatalog, load_catalog
from jetcaster_tv.state import JetcasterAppState, UiState
from jetcaster_tv.ui.theme import Theme
from jetcaster_tv.ui.screens.screen_manager import Router
from jetcaster_tv.utils.logging import log_error, init_log_file
from jetcaster_tv.view_models import PodcastScreenViewModel, ViewModels

DIRECTIONS = ("up", "down", "left", "right")


class JetcasterTvApp:
    """
    Main application class for Jetcaster TV.

    Orchestrates all components and runs the main loop.
    """

    def __init__(
        self,
        settings: Optional[Dict[str, Any]] = None,
        catalog: Optional[PodcastCatalog] = None,
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use instead of loading config.json
            catalog: Catalog to use instead of loading one
        """
        init_log_file()

        self.settings = settings if settings is not None else load_settings()

        pygame.init()
        pygame.display.set_caption(APP_NAME)

        # Windowed in dev mode or when fullscreen is off, else native resolution
        if DEV_MODE or not self.settings.get("fullscreen", True):
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        else:
            display_info = pygame.display.Info()
            width = display_info.current_w if display_info.current_w > 0 else SCREEN_WIDTH
            height = display_info.current_h if display_info.current_h > 0 else SCREEN_HEIGHT
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        self.clock = pygame.time.Clock()

        # Initialize joystick (remotes often show up as one)
        pygame.joystick.init()
        self.joystick: Optional[pygame.joystick.JoystickType] = None
        if pygame.joystick.get_count() > 0:
            self.joystick = pygame.joystick.Joystick(0)
            self.joystick.init()
            print(f"Joystick detected: {self.joystick.get_name()}")
        else:
            print("No joystick detected, using keyboard")

        # Scale the dp-based layout to the window
        self.theme = dataclasses.replace(
            Theme(), density=self.screen.get_width() / DESIGN_WIDTH_DP
        )

        self.catalog = catalog if catalog is not None else load_catalog(self.settings)
        print(f"Catalog loaded: {len(self.catalog)} podcasts")

        load_controller_mapping()
        self.controller_mapping = get_controller_mapping()

        self.navigation = NavigationHandler()
        self.navigation.set_joystick(self.joystick)
        self.navigation.set_controller_mapping(self.controller_mapping)
        self.controller = ControllerHandler(self.controller_mapping)

        self.artwork_cache = ArtworkCache()
        self.ui_state = UiState(JetcasterAppState())
        self.router = Router(
            self.theme,
            ViewModels(self.catalog),
            PodcastScreenViewModel.factory(self.catalog),
            settings=self.settings,
            get_artwork=self._get_artwork,
            on_settings_changed=save_settings,
        )
        self.rects: Dict[str, Any] = {}

    def _get_artwork(self, podcast, size: int) -> Optional[pygame.Surface]:
        return self.artwork_cache.get_artwork(podcast, size, self.settings)

    # ---- Input ---- #

    def handle_action(self, action: str) -> None:
        """
        Apply one UI action.

        Args:
            action: "select", "back", "menu" or a direction
        """
        ui = self.ui_state
        navigation = ui.navigation
        wrapped = self.router.is_wrapped(navigation.current_screen)

        if ui.drawer.open:
            self._handle_drawer_action(action)
            return

        if action in DIRECTIONS:
            moved = ui.content_focus.move(action, self.router.row_lengths(ui))
            if not moved and action == "left" and wrapped:
                ui.drawer.open = True
        elif action == "select":
            self.router.select(ui)
        elif action == "back":
            if not navigation.navigate_back() and wrapped:
                ui.drawer.open = True
        elif action == "menu" and wrapped:
            ui.drawer.open = True

    def _handle_drawer_action(self, action: str) -> None:
        drawer = self.ui_state.drawer
        item_count = len(self.router.drawer.items)

        if action == "up":
            drawer.highlighted = max(0, drawer.highlighted - 1)
        elif action == "down":
            drawer.highlighted = min(item_count - 1, drawer.highlighted + 1)
        elif action in ("right", "back", "menu"):
            drawer.close()
        elif action == "select":
            self.router.drawer.activate(drawer.highlighted, self.ui_state.navigation)
            drawer.close()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type not in (pygame.KEYDOWN, pygame.JOYBUTTONDOWN, pygame.JOYHATMOTION):
            return

        action = self.controller.get_action_for_event(event)
        if action is not None:
            self.handle_action(action)

    # ---- Main loop ---- #

    def _render_frame(self) -> None:
        self.screen.fill(self.theme.background)
        self.rects = self.router.render(self.screen, self.screen.get_rect(), self.ui_state)
        pygame.display.flip()

    def run(self):
        """Run the main application loop."""
        running = True

        while running:
            self.clock.tick(FPS)

            self.navigation.update()
            self.navigation.handle_continuous(self.handle_action)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self._handle_event(event)

            self.artwork_cache.update()
            self._render_frame()

        pygame.quit()


def main():
    """Entry point for the application."""
    try:
        app = JetcasterTvApp()
        app.run()
    except Exception as e:
        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
