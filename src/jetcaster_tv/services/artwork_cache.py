"""
Artwork caching service for Jetcaster TV.
Handles async podcast artwork loading, caching, and queue management.
"""

import traceback
from io import BytesIO
from queue import Queue, Empty
from threading import Thread
from typing import Dict, Any, Optional, Tuple

import pygame
import requests

from jetcaster_tv.constants import ARTWORK_REQUEST_TIMEOUT
from jetcaster_tv.services.models import Podcast
from jetcaster_tv.utils.logging import log_error

LOADING = "loading"


class ArtworkCache:
    """
    Manages podcast artwork loading and caching.

    Uses background threads to load images asynchronously and a queue
    to safely pass them back to the main thread.
    """

    def __init__(self):
        self._cache: Dict[Tuple[str, int], Any] = {}
        self._queue: Queue = Queue()

    def get_artwork(
        self, podcast: Podcast, size: int, settings: Dict[str, Any]
    ) -> Optional[pygame.Surface]:
        """
        Get artwork for a podcast, loading async if not cached.

        Args:
            podcast: Podcast whose image_url to load
            size: Square edge length in pixels
            settings: Application settings

        Returns:
            pygame.Surface if available, None if not ready, failed or disabled
        """
        if not settings.get("enable_artwork", True):
            return None
        if not podcast.image_url:
            return None

        cache_key = (podcast.image_url, size)
        if cache_key in self._cache:
            cached = self._cache[cache_key]
            if cached != LOADING:
                return cached
            return None

        self._cache[cache_key] = LOADING
        thread = Thread(
            target=self._load_image_async,
            args=(podcast.image_url, cache_key, (size, size), self._queue),
        )
        thread.daemon = True
        thread.start()

        return None  # Not ready yet

    def update(self):
        """
        Process loaded images from background threads.
        Should be called from main thread each frame.
        """
        while not self._queue.empty():
            try:
                cache_key, image = self._queue.get_nowait()
                self._cache[cache_key] = image
            except Empty:
                break

    def clear(self):
        """Clear all cached images and pending results."""
        self._cache.clear()
        while not self._queue.empty():
            try:
                self._queue.get_nowait()
            except Empty:
                break

    def _load_image_async(
        self,
        url: str,
        cache_key: Tuple[str, int],
        target_size: Tuple[int, int],
        queue: Queue,
    ):
        """Load image in background thread."""
        try:
            response = requests.get(url, timeout=ARTWORK_REQUEST_TIMEOUT)
            response.raise_for_status()

            image = pygame.image.load(BytesIO(response.content))
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            queue.put((cache_key, pygame.transform.smoothscale(image, target_size)))

        except Exception as e:
            log_error(
                f"Failed to load artwork from {url}",
                type(e).__name__,
                traceback.format_exc(),
            )
            queue.put((cache_key, None))
