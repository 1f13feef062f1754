"""
Remote and controller input for Jetcaster TV.
Maps joystick buttons, hats and keyboard keys to UI actions.
"""

import pygame
from typing import Dict, Any, Optional, List


class ControllerHandler:
    """
    Translates pygame events into the actions the app understands.

    A hat D-pad always produces directions. Buttons come from the
    optional controller mapping. Keyboard keys work without any mapping.
    """

    ACTIONS = ["select", "back", "up", "down", "left", "right", "menu"]

    KEYBOARD_MAP = {
        "select": (pygame.K_RETURN, pygame.K_KP_ENTER),
        "back": (pygame.K_ESCAPE, pygame.K_BACKSPACE),
        "up": (pygame.K_UP,),
        "down": (pygame.K_DOWN,),
        "left": (pygame.K_LEFT,),
        "right": (pygame.K_RIGHT,),
        "menu": (pygame.K_TAB, pygame.K_m),
    }

    HAT_DIRECTIONS = {
        (0, 1): "up",
        (0, -1): "down",
        (-1, 0): "left",
        (1, 0): "right",
    }

    def __init__(self, mapping: Optional[Dict[str, Any]] = None):
        """
        Args:
            mapping: action -> button index, or ("hat", x, y)
        """
        self._mapping: Dict[str, Any] = mapping or {}

    def get_button(self, action: str) -> Optional[Any]:
        return self._mapping.get(action)

    def unmapped_actions(self) -> List[str]:
        """Actions with no joystick binding (keyboard still works)."""
        return [a for a in self.ACTIONS if a not in self._mapping]

    def input_matches_action(self, event: pygame.event.Event, action: str) -> bool:
        """
        Check if a pygame event triggers an action.

        Args:
            event: Pygame event to check
            action: Action name to match against
        """
        if event.type == pygame.KEYDOWN:
            return event.key in self.KEYBOARD_MAP.get(action, ())

        button_info = self.get_button(action)

        if event.type == pygame.JOYBUTTONDOWN:
            return isinstance(button_info, int) and event.button == button_info

        if event.type == pygame.JOYHATMOTION:
            if (
                isinstance(button_info, (tuple, list))
                and len(button_info) >= 3
                and button_info[0] == "hat"
            ):
                return tuple(event.value) == tuple(button_info[1:3])
            return self.HAT_DIRECTIONS.get(tuple(event.value)) == action

        return False

    def get_action_for_event(self, event: pygame.event.Event) -> Optional[str]:
        """
        Get the action name for a pygame event.

        Returns:
            Action name or None if the event means nothing to the UI
        """
        for action in self.ACTIONS:
            if self.input_matches_action(event, action):
                return action
        return None
