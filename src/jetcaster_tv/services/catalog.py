"""
Podcast catalog service for Jetcaster TV.
Loads the catalog from a URL, a local file, or the bundled asset.
"""

import json
import os
import traceback
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

import requests

from jetcaster_tv import constants
from jetcaster_tv.services.models import Episode, Podcast
from jetcaster_tv.utils.logging import log_error


class PodcastCatalog:
    """
    In-memory podcast catalog.

    Subscriptions are kept on the Podcast objects and are not persisted.
    """

    def __init__(self, podcasts: Iterable[Podcast] = (), episodes: Iterable[Episode] = ()):
        self._podcasts: Dict[str, Podcast] = {}
        for podcast in podcasts:
            self._podcasts[podcast.uri] = podcast
        self._episodes: List[Episode] = [
            e for e in episodes if e.podcast_uri in self._podcasts
        ]

    def __len__(self) -> int:
        return len(self._podcasts)

    @property
    def podcasts(self) -> List[Podcast]:
        return list(self._podcasts.values())

    def categories(self) -> List[str]:
        """Category names in first-seen order."""
        seen: List[str] = []
        for podcast in self._podcasts.values():
            for category in podcast.categories:
                if category not in seen:
                    seen.append(category)
        return seen

    def podcasts_in_category(self, name: str) -> List[Podcast]:
        return [p for p in self._podcasts.values() if name in p.categories]

    def find_podcast(self, uri: str) -> Optional[Podcast]:
        return self._podcasts.get(uri)

    def episodes_for(self, uri: str) -> List[Episode]:
        """Episodes of one podcast, newest first."""
        return _newest_first(e for e in self._episodes if e.podcast_uri == uri)

    def latest_episodes(
        self, limit: int = 10, podcast_uris: Optional[Iterable[str]] = None
    ) -> List[Episode]:
        """
        Newest episodes across the catalog.

        Args:
            limit: Maximum number of episodes
            podcast_uris: Only consider these podcasts (default: all)
        """
        episodes = self._episodes
        if podcast_uris is not None:
            wanted = set(podcast_uris)
            episodes = [e for e in episodes if e.podcast_uri in wanted]
        return _newest_first(episodes)[:limit]

    def subscribed_podcasts(self) -> List[Podcast]:
        return [p for p in self._podcasts.values() if p.subscribed]

    def set_subscribed(self, uri: str, value: bool) -> None:
        """
        Raises:
            KeyError: Unknown podcast uri
        """
        self._podcasts[uri].subscribed = value

    def search(self, query: str) -> List[Podcast]:
        """Case-insensitive substring match on title or author."""
        needle = query.strip().lower()
        if not needle:
            return []
        return [
            p
            for p in self._podcasts.values()
            if needle in p.title.lower() or needle in p.author.lower()
        ]


def _newest_first(episodes: Iterable[Episode]) -> List[Episode]:
    # Undated episodes sort last
    return sorted(episodes, key=lambda e: e.published or date.min, reverse=True)


def parse_catalog(data: Dict[str, Any]) -> PodcastCatalog:
    """
    Build a catalog from decoded JSON.

    Malformed podcast or episode entries are logged and skipped.

    Raises:
        ValueError: data is not a catalog object
    """
    if not isinstance(data, dict):
        raise ValueError("catalog must be a JSON object")

    podcasts = []
    for entry in data.get("podcasts", []):
        try:
            podcasts.append(Podcast.from_dict(entry))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log_error(f"Skipping malformed podcast entry: {entry!r}", type(e).__name__)

    episodes = []
    for entry in data.get("episodes", []):
        try:
            episodes.append(Episode.from_dict(entry))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log_error(f"Skipping malformed episode entry: {entry!r}", type(e).__name__)

    return PodcastCatalog(podcasts, episodes)


def _fetch_catalog_url(url: str) -> PodcastCatalog:
    response = requests.get(url, timeout=constants.CATALOG_REQUEST_TIMEOUT)
    response.raise_for_status()
    return parse_catalog(response.json())


def _read_catalog_file(path: str) -> PodcastCatalog:
    with open(path, "r", encoding="utf-8") as f:
        return parse_catalog(json.load(f))


def load_catalog(settings: Optional[Dict[str, Any]] = None) -> PodcastCatalog:
    """
    Load the podcast catalog.

    Sources are tried in order: settings["catalog_url"], then
    settings["catalog_path"], then the bundled catalog. A failing source
    is logged and the next one is tried.

    Args:
        settings: Application settings dictionary

    Returns:
        The first catalog that loads, or an empty catalog
    """
    settings = settings or {}

    url = settings.get("catalog_url", "")
    if url:
        try:
            return _fetch_catalog_url(url)
        except Exception as e:
            log_error(
                f"Failed to fetch catalog from {url}",
                type(e).__name__,
                traceback.format_exc(),
            )

    path = settings.get("catalog_path", "")
    if path:
        if os.path.exists(path):
            try:
                return _read_catalog_file(path)
            except Exception as e:
                log_error(
                    f"Failed to read catalog file {path}",
                    type(e).__name__,
                    traceback.format_exc(),
                )
        else:
            log_error(f"Catalog file not found: {path}")

    try:
        return _read_catalog_file(constants.BUNDLED_CATALOG_FILE)
    except Exception as e:
        log_error(
            "Failed to read bundled catalog", type(e).__name__, traceback.format_exc()
        )
        return PodcastCatalog()
