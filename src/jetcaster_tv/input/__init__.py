"""
Input handling for Jetcaster TV.
Handles keyboard and remote/controller input.
"""

from .navigation import NavigationHandler
from .controller import ControllerHandler

__all__ = [
    "NavigationHandler",
    "ControllerHandler",
]
