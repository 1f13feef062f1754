"""
UI Screens - Complete screen implementations.
"""

from .discover_screen import DiscoverScreen
from .library_screen import LibraryScreen
from .search_screen import SearchScreen
from .podcast_screen import PodcastScreen
from .player_screen import PlayerScreen
from .profile_screen import ProfileScreen
from .settings_screen import SettingsScreen
from .screen_manager import Router

__all__ = [
    "DiscoverScreen",
    "LibraryScreen",
    "SearchScreen",
    "PodcastScreen",
    "PlayerScreen",
    "ProfileScreen",
    "SettingsScreen",
    "Router",
]
