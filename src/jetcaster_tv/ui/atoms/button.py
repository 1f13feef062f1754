"""
Button atom - Basic button shape rendering.
"""

import pygame
from typing import Optional

from jetcaster_tv.ui.theme import Theme, Color, default_theme


class Button:
    """
    Basic button rendering atom.

    Renders button shapes with configurable colors, borders,
    and shadows.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        border_radius: Optional[int] = None,
        shadow: bool = True,
        border_color: Optional[Color] = None,
        border_width: int = 0,
        focused: bool = False,
    ) -> pygame.Rect:
        """
        Render a button shape.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            color: Fill color (default: surface_hover)
            border_radius: Corner radius (default: theme.radius_md)
            shadow: Draw shadow
            border_color: Border color (optional)
            border_width: Border width
            focused: Apply D-pad focus effect

        Returns:
            Button rect
        """
        if color is None:
            color = self.theme.primary if focused else self.theme.surface_hover
        if border_radius is None:
            border_radius = self.theme.radius_md

        if shadow:
            shadow_rect = rect.copy()
            shadow_rect.y += 2
            # Create a surface with alpha for shadow
            shadow_surface = pygame.Surface(
                (shadow_rect.width, shadow_rect.height), pygame.SRCALPHA
            )
            pygame.draw.rect(
                shadow_surface,
                self.theme.shadow,
                shadow_surface.get_rect(),
                border_radius=border_radius,
            )
            screen.blit(shadow_surface, shadow_rect.topleft)

        pygame.draw.rect(screen, color, rect, border_radius=border_radius)

        if border_color and border_width > 0:
            pygame.draw.rect(
                screen,
                border_color,
                rect,
                width=border_width,
                border_radius=border_radius,
            )

        return rect
