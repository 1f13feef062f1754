"""
Icon atom - Vector icons drawn with pygame primitives.
"""

import math

import pygame
from typing import Tuple, Optional

from jetcaster_tv.ui.theme import Theme, Color, default_theme


class Icon:
    """
    Icon rendering atom.

    Draws the small set of material-style glyphs the app needs,
    centred on a point and sized to a square box.
    """

    ICONS = ("person", "search", "home", "video_library", "settings", "back", "play")

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        icon_type: str,
        center: Tuple[int, int],
        size: Optional[int] = None,
        color: Optional[Color] = None,
    ) -> pygame.Rect:
        """
        Render an icon.

        Args:
            screen: Surface to render to
            icon_type: One of Icon.ICONS
            center: Center position
            size: Box size in pixels (default: theme icon size)
            color: Stroke/fill color

        Returns:
            Icon bounding rect

        Raises:
            ValueError: If icon_type is unknown
        """
        if icon_type not in self.ICONS:
            raise ValueError(f"Unknown icon '{icon_type}'")
        if size is None:
            size = self.theme.px(self.theme.icon_size)
        if color is None:
            color = self.theme.text_primary

        rect = pygame.Rect(0, 0, size, size)
        rect.center = center
        width = max(2, size // 12)

        draw = getattr(self, f"_draw_{icon_type}")
        draw(screen, rect, color, width)
        return rect

    def _draw_person(self, screen, rect, color, width):
        cx = rect.centerx
        head_radius = rect.height // 5
        pygame.draw.circle(screen, color, (cx, rect.top + head_radius + 1), head_radius)
        body = pygame.Rect(
            rect.left + rect.width // 6,
            rect.centery + 1,
            rect.width * 2 // 3,
            rect.height // 2 - 1,
        )
        shoulders = body.width // 2
        pygame.draw.rect(
            screen,
            color,
            body,
            border_top_left_radius=shoulders,
            border_top_right_radius=shoulders,
        )

    def _draw_search(self, screen, rect, color, width):
        radius = rect.width // 3
        lens_center = (rect.left + radius + 2, rect.top + radius + 2)
        pygame.draw.circle(screen, color, lens_center, radius, width)
        offset = int(radius * math.cos(math.pi / 4))
        pygame.draw.line(
            screen,
            color,
            (lens_center[0] + offset, lens_center[1] + offset),
            (rect.right - 2, rect.bottom - 2),
            width + 1,
        )

    def _draw_home(self, screen, rect, color, width):
        roof = [
            (rect.left + 1, rect.centery),
            (rect.centerx, rect.top + 2),
            (rect.right - 1, rect.centery),
        ]
        pygame.draw.lines(screen, color, False, roof, width)
        house = pygame.Rect(
            rect.left + rect.width // 5,
            rect.centery - 1,
            rect.width * 3 // 5,
            rect.height // 2 - 1,
        )
        pygame.draw.rect(screen, color, house, width)
        door = pygame.Rect(0, 0, house.width // 3, house.height // 2)
        door.midbottom = house.midbottom
        pygame.draw.rect(screen, color, door)

    def _draw_video_library(self, screen, rect, color, width):
        back = pygame.Rect(rect.left + 1, rect.top + 5, rect.width - 7, rect.height - 7)
        front = back.move(5, -4)
        pygame.draw.rect(screen, color, back, width)
        pygame.draw.rect(screen, self.theme.background, front)
        pygame.draw.rect(screen, color, front, width)
        self._draw_play(screen, front.inflate(-front.width // 2, -front.height // 2), color, width)

    def _draw_settings(self, screen, rect, color, width):
        cx, cy = rect.center
        outer = rect.width // 2 - 1
        inner = rect.width // 3
        for tooth in range(8):
            angle = tooth * math.pi / 4
            start = (cx + inner * math.cos(angle), cy + inner * math.sin(angle))
            end = (cx + outer * math.cos(angle), cy + outer * math.sin(angle))
            pygame.draw.line(screen, color, start, end, width + 2)
        pygame.draw.circle(screen, color, (cx, cy), inner, width + 1)
        pygame.draw.circle(screen, color, (cx, cy), max(2, rect.width // 8))

    def _draw_back(self, screen, rect, color, width):
        cx, cy = rect.center
        arm = rect.width // 3
        points = [(cx + arm // 2, cy - arm), (cx - arm // 2, cy), (cx + arm // 2, cy + arm)]
        pygame.draw.lines(screen, color, False, points, width)

    def _draw_play(self, screen, rect, color, width):
        points = [
            (rect.left + rect.width // 4, rect.top + 1),
            (rect.right - rect.width // 6, rect.centery),
            (rect.left + rect.width // 4, rect.bottom - 1),
        ]
        pygame.draw.polygon(screen, color, points)
