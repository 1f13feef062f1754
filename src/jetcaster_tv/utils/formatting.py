"""
Formatting utilities for Jetcaster TV.
"""

from datetime import date
from typing import Optional


def format_duration(seconds: Optional[int]) -> str:
    """
    Convert an episode duration to a short label.

    Args:
        seconds: Duration in seconds

    Returns:
        "1 hr 5 min", "42 min", or "" when unknown
    """
    if not seconds or seconds < 0:
        return ""
    minutes = seconds // 60
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours} hr {minutes} min" if minutes else f"{hours} hr"
    return f"{max(minutes, 1)} min"


def format_published(published: Optional[date]) -> str:
    """Format a publish date as e.g. 'Mar 4, 2024'."""
    if published is None:
        return ""
    return f"{published.strftime('%b')} {published.day}, {published.year}"


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length, adding suffix if truncated.

    Args:
        text: The text to truncate
        max_length: Maximum allowed length
        suffix: Suffix to add if truncated (default: "...")

    Returns:
        Truncated text with suffix if needed
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix
