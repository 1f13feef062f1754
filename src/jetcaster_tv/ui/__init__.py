"""
UI components for Jetcaster TV.
Follows Atomic Design methodology: atoms -> molecules -> organisms -> templates -> screens.
"""

from .theme import Theme
from .layout import app_defaults, ScreenLayout

__all__ = ["Theme", "app_defaults", "ScreenLayout"]
