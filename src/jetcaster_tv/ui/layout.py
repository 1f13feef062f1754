"""
Layout presets for Jetcaster TV.

Over-scan margins, card widths, paddings and gaps used by every screen.
All distances are in dp; multiply by Theme.density for pixels.
"""

from dataclasses import dataclass, field

import pygame

Dp = float


@dataclass(frozen=True)
class PaddingValues:
    """Edge insets in (start, top, end, bottom) order."""

    start: Dp = 0
    top: Dp = 0
    end: Dp = 0
    bottom: Dp = 0

    @classmethod
    def symmetric(cls, horizontal: Dp = 0, vertical: Dp = 0) -> "PaddingValues":
        return cls(start=horizontal, top=vertical, end=horizontal, bottom=vertical)

    def apply_to(self, rect: pygame.Rect, density: float = 1.0) -> pygame.Rect:
        """Return rect shrunk by these insets. Never produces negative sizes."""
        start = round(self.start * density)
        top = round(self.top * density)
        end = round(self.end * density)
        bottom = round(self.bottom * density)
        return pygame.Rect(
            rect.left + start,
            rect.top + top,
            max(0, rect.width - start - end),
            max(0, rect.height - top - bottom),
        )


@dataclass(frozen=True)
class OverScanMargin:
    """Distance kept from the TV edges, which may be cropped by the panel."""

    top: Dp = 24
    bottom: Dp = 24
    start: Dp = 48
    end: Dp = 48

    def into_padding_values(self) -> PaddingValues:
        return PaddingValues(self.start, self.top, self.end, self.bottom)


@dataclass(frozen=True)
class OverScanMarginSettings:
    default: OverScanMargin = OverScanMargin()
    podcast_details: OverScanMargin = OverScanMargin(top=40, bottom=40)
    drawer: OverScanMargin = OverScanMargin(start=0, end=0)
    catalog: OverScanMargin = OverScanMargin(start=0, end=0)


@dataclass(frozen=True)
class CardWidth:
    large: Dp = 268
    medium: Dp = 196
    small: Dp = 124


@dataclass(frozen=True)
class PaddingSettings:
    tab: PaddingValues = PaddingValues.symmetric(horizontal=16, vertical=6)
    section_title: PaddingValues = PaddingValues(bottom=16)


@dataclass(frozen=True)
class GapSettings:
    catalog_item_gap: Dp = 20
    catalog_section_gap: Dp = 40


@dataclass(frozen=True)
class JetcasterAppDefaults:
    over_scan_margin: OverScanMarginSettings = field(
        default_factory=OverScanMarginSettings
    )
    gap_settings: GapSettings = field(default_factory=GapSettings)
    card_width: CardWidth = field(default_factory=CardWidth)
    padding: PaddingSettings = field(default_factory=PaddingSettings)


@dataclass(frozen=True)
class ScreenLayout:
    """
    Placement handed to each screen by the router.

    Args:
        padding: Insets applied to the area the screen is given
        fill_max_size: Screen takes the whole padded area (and paints it);
            otherwise it only draws its own content
    """

    padding: PaddingValues = PaddingValues()
    fill_max_size: bool = False

    def content_rect(self, bounds: pygame.Rect, density: float = 1.0) -> pygame.Rect:
        return self.padding.apply_to(bounds, density)


# Default instance
app_defaults = JetcasterAppDefaults()
