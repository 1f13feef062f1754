"""
Navigation destinations for Jetcaster TV.

The destination set is closed: every screen the app can show is one of
the variants below, and each variant owns exactly one route string.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type, Union
from urllib.parse import quote, unquote


class UnknownRouteError(ValueError):
    """Raised when a route string does not match any destination."""


@dataclass(frozen=True)
class Discover:
    ROUTE: ClassVar[str] = "/discover"
    name: ClassVar[str] = "discover"

    @property
    def route(self) -> str:
        return self.ROUTE


@dataclass(frozen=True)
class Library:
    ROUTE: ClassVar[str] = "/library"
    name: ClassVar[str] = "library"

    @property
    def route(self) -> str:
        return self.ROUTE


@dataclass(frozen=True)
class Search:
    ROUTE: ClassVar[str] = "/search"
    name: ClassVar[str] = "search"

    @property
    def route(self) -> str:
        return self.ROUTE


@dataclass(frozen=True)
class Podcast:
    """Podcast details for a single podcast, addressed by its feed URI."""

    ROOT: ClassVar[str] = "/podcast"
    ROUTE_PATTERN: ClassVar[str] = "/podcast/{podcastUri}"
    name: ClassVar[str] = "podcast"

    podcast_uri: str

    @property
    def route(self) -> str:
        return self.create_route(self.podcast_uri)

    @classmethod
    def create_route(cls, podcast_uri: str) -> str:
        """Build the route for a podcast; the URI is fully percent-encoded."""
        return f"{cls.ROOT}/{quote(podcast_uri, safe='')}"


@dataclass(frozen=True)
class Player:
    ROUTE: ClassVar[str] = "/player"
    name: ClassVar[str] = "player"

    @property
    def route(self) -> str:
        return self.ROUTE


@dataclass(frozen=True)
class Profile:
    ROUTE: ClassVar[str] = "/profile"
    name: ClassVar[str] = "profile"

    @property
    def route(self) -> str:
        return self.ROUTE


@dataclass(frozen=True)
class Settings:
    ROUTE: ClassVar[str] = "/settings"
    name: ClassVar[str] = "settings"

    @property
    def route(self) -> str:
        return self.ROUTE


Screen = Union[Discover, Library, Search, Podcast, Player, Profile, Settings]

ALL_DESTINATIONS: Tuple[Type, ...] = (
    Discover,
    Library,
    Search,
    Podcast,
    Player,
    Profile,
    Settings,
)

_FIXED_ROUTES = {
    Discover.ROUTE: Discover,
    Library.ROUTE: Library,
    Search.ROUTE: Search,
    Player.ROUTE: Player,
    Profile.ROUTE: Profile,
    Settings.ROUTE: Settings,
}


def screen_from_route(route: str) -> Screen:
    """
    Parse a route string back into its destination.

    Args:
        route: Route string, e.g. "/library" or "/podcast/https%3A%2F%2F..."

    Returns:
        The matching destination

    Raises:
        UnknownRouteError: If no destination owns the route
    """
    if route in _FIXED_ROUTES:
        return _FIXED_ROUTES[route]()

    prefix = Podcast.ROOT + "/"
    if route.startswith(prefix):
        encoded = route[len(prefix):]
        if encoded and "/" not in encoded:
            return Podcast(unquote(encoded))

    raise UnknownRouteError(f"No destination for route '{route}'")
