"""
View models for Jetcaster TV screens.

Each view model wraps the PodcastCatalog with the state one screen needs.
Screens read from them and call their methods; they never touch the
catalog directly.
"""

from typing import Callable, List, Optional

from jetcaster_tv import routes
from jetcaster_tv.services.catalog import PodcastCatalog
from jetcaster_tv.services.models import Episode, Podcast


class DiscoverViewModel:
    """Category tabs and the podcasts and latest episodes of the selected one."""

    def __init__(self, catalog: PodcastCatalog):
        self.catalog = catalog
        self._selected = 0

    @property
    def categories(self) -> List[str]:
        return self.catalog.categories()

    @property
    def selected_category(self) -> Optional[str]:
        categories = self.categories
        if not categories:
            return None
        return categories[min(self._selected, len(categories) - 1)]

    def select_category(self, index: int) -> None:
        if 0 <= index < len(self.categories):
            self._selected = index

    @property
    def selected_index(self) -> int:
        return min(self._selected, max(0, len(self.categories) - 1))

    @property
    def podcasts(self) -> List[Podcast]:
        category = self.selected_category
        if category is None:
            return self.catalog.podcasts
        return self.catalog.podcasts_in_category(category)

    def latest_episodes(self, limit: int = 10) -> List[Episode]:
        """Newest episodes of the podcasts in the selected category."""
        return self.catalog.latest_episodes(
            limit, podcast_uris=[p.uri for p in self.podcasts]
        )

    def podcast_for(self, episode: Episode) -> Optional[Podcast]:
        return self.catalog.find_podcast(episode.podcast_uri)


class LibraryViewModel:
    def __init__(self, catalog: PodcastCatalog):
        self.catalog = catalog

    @property
    def subscribed_podcasts(self) -> List[Podcast]:
        return self.catalog.subscribed_podcasts()

    @property
    def is_empty(self) -> bool:
        return not self.subscribed_podcasts


class SearchViewModel:
    """Query text and the podcasts matching it."""

    def __init__(self, catalog: PodcastCatalog):
        self.catalog = catalog
        self.query = ""

    def set_query(self, text: str) -> None:
        self.query = text

    @property
    def results(self) -> List[Podcast]:
        return self.catalog.search(self.query)


class PodcastScreenViewModel:
    """
    State of one podcast details screen.

    Created per back stack entry through the callable returned by
    factory(), so two details screens on the stack keep separate state.
    """

    def __init__(self, catalog: PodcastCatalog, podcast_uri: str):
        self.catalog = catalog
        self.podcast_uri = podcast_uri

    @classmethod
    def factory(
        cls, catalog: PodcastCatalog
    ) -> Callable[[routes.Podcast], "PodcastScreenViewModel"]:
        def create(screen: routes.Podcast) -> "PodcastScreenViewModel":
            return cls(catalog, screen.podcast_uri)

        return create

    @property
    def podcast(self) -> Optional[Podcast]:
        return self.catalog.find_podcast(self.podcast_uri)

    @property
    def episodes(self) -> List[Episode]:
        if self.podcast is None:
            return []
        return self.catalog.episodes_for(self.podcast_uri)

    @property
    def is_subscribed(self) -> bool:
        podcast = self.podcast
        return podcast is not None and podcast.subscribed

    def toggle_subscription(self) -> None:
        """Flip the subscription. Does nothing for an unknown podcast."""
        if self.podcast is None:
            return
        self.catalog.set_subscribed(self.podcast_uri, not self.is_subscribed)


class ViewModels:
    """The shared, app-lifetime view models handed to the router."""

    def __init__(self, catalog: PodcastCatalog):
        self.catalog = catalog
        self.discover = DiscoverViewModel(catalog)
        self.library = LibraryViewModel(catalog)
        self.search = SearchViewModel(catalog)
