"""
Utility functions for Jetcaster TV.
"""

from .logging import log_error, init_log_file, get_log_file
from .formatting import format_duration, truncate_text

__all__ = [
    "log_error",
    "init_log_file",
    "get_log_file",
    "format_duration",
    "truncate_text",
]
