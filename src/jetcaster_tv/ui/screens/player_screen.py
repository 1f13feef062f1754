"""
Player screen - Placeholder until playback exists.
"""

import pygame
from typing import Any, Dict, List

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import ScreenLayout
from jetcaster_tv.ui.atoms.text import Text


class PlayerScreen:
    """Renders the word "Player" and nothing else."""

    LABEL = "Player"

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def row_lengths(self) -> List[int]:
        return []

    def render(
        self, screen: pygame.Surface, bounds: pygame.Rect, layout: ScreenLayout
    ) -> Dict[str, Any]:
        content = layout.content_rect(bounds, self.theme.density)
        label_rect = self.text.render(screen, self.LABEL, content.topleft)
        return {"label": label_rect}
