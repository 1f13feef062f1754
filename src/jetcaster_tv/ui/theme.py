"""
Theme and design tokens for Jetcaster TV.
Centralizes all visual constants for consistent styling.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]
ColorAlpha = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the application UI.

    All visual constants are defined here for consistent theming.
    This class is immutable to prevent accidental modifications.
    """

    # ---- Base Colors ---- #
    background: Color = (18, 18, 20)
    surface: Color = (32, 33, 36)
    surface_hover: Color = (48, 49, 54)
    surface_selected: Color = (62, 58, 44)

    # ---- Primary Accent (Amber) ---- #
    primary: Color = (249, 170, 51)
    primary_dark: Color = (196, 128, 22)
    primary_light: Color = (255, 205, 120)
    on_primary: Color = (28, 22, 10)

    # ---- Text Colors ---- #
    text_primary: Color = (236, 236, 238)
    text_secondary: Color = (170, 171, 178)
    text_disabled: Color = (96, 97, 104)

    # ---- Status Colors ---- #
    error: Color = (242, 108, 96)

    # ---- Effects ---- #
    shadow: ColorAlpha = (0, 0, 0, 80)
    scrim: ColorAlpha = (0, 0, 0, 160)

    # ---- Spacing (dp) ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 16
    padding_lg: int = 24

    # ---- Typography (px at density 1) ---- #
    font_size_xs: int = 14
    font_size_sm: int = 18
    font_size_md: int = 24
    font_size_lg: int = 32
    font_size_xl: int = 44
    font_path: Optional[str] = None  # pygame default font

    # ---- Border Radius ---- #
    radius_sm: int = 4
    radius_md: int = 8
    radius_lg: int = 12

    # ---- Component Sizes (dp) ---- #
    button_height: int = 40
    menu_item_height: int = 44
    drawer_collapsed_width: int = 72
    drawer_expanded_width: int = 256
    drawer_item_height: int = 48
    icon_size: int = 24
    char_button_size: int = 32

    # ---- Scale ---- #
    density: float = 1.0  # pixels per dp

    def px(self, dp: float) -> int:
        """Convert a dp distance to whole pixels for this theme's density."""
        return round(dp * self.density)

    def font_px(self, size: int) -> int:
        """Scale a font size by density."""
        return max(8, round(size * self.density))


# Default theme instance
default_theme = Theme()
