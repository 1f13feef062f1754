"""
Catalog data models for Jetcaster TV.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


def _text(data: Dict[str, Any], key: str) -> str:
    """Optional text field; missing or null becomes an empty string."""
    value = data.get(key)
    return "" if value is None else str(value)


def _categories(data: Dict[str, Any]) -> List[str]:
    """
    Category names of a podcast entry.

    A single string is taken as one category.

    Raises:
        ValueError: categories is neither a string nor a list
    """
    value = data.get("categories")
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ValueError(f"categories must be a list, got {type(value).__name__}")
    return [str(c).strip() for c in value if c is not None and str(c).strip()]


@dataclass
class Podcast:
    """A podcast show as listed in the catalog."""

    uri: str
    title: str
    author: str = ""
    description: str = ""
    image_url: str = ""
    categories: List[str] = field(default_factory=list)
    subscribed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Podcast":
        """
        Build a Podcast from a catalog entry.

        Raises:
            KeyError: uri or title missing
            ValueError: uri or title empty, or categories malformed
        """
        uri = str(data["uri"] or "").strip()
        title = str(data["title"] or "").strip()
        if not uri or not title:
            raise ValueError("podcast entry needs a non-empty uri and title")
        return cls(
            uri=uri,
            title=title,
            author=_text(data, "author"),
            description=_text(data, "description"),
            image_url=_text(data, "image_url").strip(),
            categories=_categories(data),
            subscribed=bool(data.get("subscribed", False)),
        )


@dataclass
class Episode:
    """An episode belonging to a podcast."""

    uri: str
    podcast_uri: str
    title: str
    summary: str = ""
    published: Optional[date] = None
    duration: Optional[int] = None  # seconds

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Episode":
        published = data.get("published")
        duration = data.get("duration")
        return cls(
            uri=str(data["uri"]),
            podcast_uri=str(data["podcast_uri"]),
            title=str(data["title"]),
            summary=_text(data, "summary"),
            published=date.fromisoformat(published) if published else None,
            duration=int(duration) if duration is not None else None,
        )
