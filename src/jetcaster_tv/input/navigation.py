"""
Held-direction repeat for Jetcaster TV.
Turns a held D-pad or arrow key into repeated focus moves that speed up.
"""

import pygame
from typing import Dict, Optional, Callable, Any

from jetcaster_tv.constants import (
    NAVIGATION_INITIAL_DELAY,
    NAVIGATION_START_RATE,
    NAVIGATION_MAX_RATE,
    NAVIGATION_ACCELERATION,
)


class NavigationHandler:
    """
    Repeats focus moves while a direction is held.

    The first move comes from the KEYDOWN/hat event itself. Once the
    direction has been held for NAVIGATION_INITIAL_DELAY, moves repeat,
    each interval NAVIGATION_ACCELERATION times the previous one, down
    to NAVIGATION_MAX_RATE.
    """

    DIRECTIONS = ("up", "down", "left", "right")

    KEYS = {
        "up": pygame.K_UP,
        "down": pygame.K_DOWN,
        "left": pygame.K_LEFT,
        "right": pygame.K_RIGHT,
    }

    def __init__(self):
        self._held: Dict[str, bool] = {d: False for d in self.DIRECTIONS}
        self._pressed_at: Dict[str, int] = {d: 0 for d in self.DIRECTIONS}
        self._last_repeat: Dict[str, int] = {d: 0 for d in self.DIRECTIONS}
        self._interval: Dict[str, float] = {d: 0 for d in self.DIRECTIONS}

        self._joystick: Optional[pygame.joystick.JoystickType] = None
        self._controller_mapping: Dict[str, Any] = {}

    def set_joystick(self, joystick: Optional[pygame.joystick.JoystickType]) -> None:
        self._joystick = joystick

    def set_controller_mapping(self, mapping: Dict[str, Any]) -> None:
        """Use button indices from mapping for button-based D-pads."""
        self._controller_mapping = mapping

    def update(self, now: Optional[int] = None) -> None:
        """
        Sample held directions. Call once per frame.

        Args:
            now: Current ticks in ms (default: pygame.time.get_ticks())
        """
        if now is None:
            now = pygame.time.get_ticks()

        for direction in self.DIRECTIONS:
            self._held[direction] = False

        if self._joystick and self._joystick.get_init():
            self._sample_joystick()
        self._sample_keyboard()

        for direction in self.DIRECTIONS:
            if not self._held[direction]:
                self._pressed_at[direction] = 0
                self._last_repeat[direction] = 0
                self._interval[direction] = 0
            elif self._pressed_at[direction] == 0:
                self._pressed_at[direction] = now
                self._last_repeat[direction] = now
                self._interval[direction] = NAVIGATION_START_RATE

    def _sample_joystick(self) -> None:
        if self._joystick.get_numhats() > 0:
            x, y = self._joystick.get_hat(0)
            self._held["up"] |= y > 0
            self._held["down"] |= y < 0
            self._held["left"] |= x < 0
            self._held["right"] |= x > 0

        for direction in self.DIRECTIONS:
            button = self._controller_mapping.get(direction)
            if isinstance(button, int) and self._joystick.get_numbuttons() > button:
                if self._joystick.get_button(button):
                    self._held[direction] = True

    def _sample_keyboard(self) -> None:
        keys = pygame.key.get_pressed()
        for direction, key in self.KEYS.items():
            if keys[key]:
                self._held[direction] = True

    def is_held(self, direction: str) -> bool:
        return self._held.get(direction, False)

    def should_repeat(self, direction: str, now: Optional[int] = None) -> bool:
        """
        Check whether a held direction is due for another move.

        Returns:
            True at most once per repeat interval
        """
        if not self._held[direction]:
            return False
        if now is None:
            now = pygame.time.get_ticks()

        if now - self._pressed_at[direction] < NAVIGATION_INITIAL_DELAY:
            return False

        if now - self._last_repeat[direction] >= self._interval[direction]:
            self._last_repeat[direction] = now
            self._interval[direction] = max(
                self._interval[direction] * NAVIGATION_ACCELERATION,
                NAVIGATION_MAX_RATE,
            )
            return True
        return False

    def handle_continuous(
        self, on_navigate: Callable[[str], None], now: Optional[int] = None
    ) -> None:
        """Call on_navigate for the first held direction that is due."""
        for direction in self.DIRECTIONS:
            if self.should_repeat(direction, now):
                on_navigate(direction)
                break  # One move per frame
