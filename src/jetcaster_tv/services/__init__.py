"""
Services for Jetcaster TV.
Catalog loading and artwork caching.
"""

from .models import Podcast, Episode
from .catalog import PodcastCatalog, load_catalog, parse_catalog
from .artwork_cache import ArtworkCache

__all__ = [
    "Podcast",
    "Episode",
    "PodcastCatalog",
    "load_catalog",
    "parse_catalog",
    "ArtworkCache",
]
