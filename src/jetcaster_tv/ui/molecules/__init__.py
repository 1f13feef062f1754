"""
UI Molecules - Combinations of atoms.
Simple groups of atoms functioning together.
"""

from .menu_item import MenuItem
from .podcast_card import PodcastCard
from .action_button import ActionButton
from .char_button import CharButton
from .navigation_drawer_item import NavigationDrawerItem
from .tab import Tab

__all__ = [
    "MenuItem",
    "PodcastCard",
    "ActionButton",
    "CharButton",
    "NavigationDrawerItem",
    "Tab",
]
