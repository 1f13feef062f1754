"""
Jetcaster TV - a podcast browser for the living room.
"""

from jetcaster_tv.constants import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "APP_VERSION", "__version__"]
