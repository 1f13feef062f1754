"""
UI Templates - Page layouts.
Compositions of organisms into complete page structures.
"""

from .global_navigation import WithGlobalNavigation

__all__ = [
    "WithGlobalNavigation",
]
