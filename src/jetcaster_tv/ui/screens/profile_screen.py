"""
Profile screen - Current account.
"""

import pygame
from typing import Any, Dict, List

from jetcaster_tv.ui.theme import Theme, default_theme
from jetcaster_tv.ui.layout import ScreenLayout
from jetcaster_tv.ui.atoms.icon import Icon
from jetcaster_tv.ui.organisms.header import Header
from jetcaster_tv.utils.formatting import truncate_text


class ProfileScreen:
    """
    Profile screen.

    Shows the configured account name. Account switching is not
    available, so nothing here takes focus.
    """

    MAX_NAME_LENGTH = 40

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.icon = Icon(theme)
        self.header = Header(theme)

    def row_lengths(self) -> List[int]:
        return []

    def render(
        self,
        screen: pygame.Surface,
        bounds: pygame.Rect,
        layout: ScreenLayout,
        account_name: str,
    ) -> Dict[str, Any]:
        content = layout.content_rect(bounds, self.theme.density)
        if layout.fill_max_size:
            pygame.draw.rect(screen, self.theme.background, content)

        avatar_size = self.theme.px(self.theme.icon_size * 3)
        avatar_rect = pygame.Rect(content.left, content.top, avatar_size, avatar_size)
        pygame.draw.circle(screen, self.theme.surface, avatar_rect.center, avatar_size // 2)
        self.icon.render(
            screen,
            "person",
            avatar_rect.center,
            size=self.theme.px(self.theme.icon_size * 2),
            color=self.theme.text_secondary,
        )

        gap = self.theme.px(self.theme.padding_lg)
        header_rect = self.header.render(
            screen,
            pygame.Rect(
                avatar_rect.right + gap,
                content.top,
                max(0, content.width - avatar_size - gap),
                avatar_size,
            ),
            truncate_text(account_name, self.MAX_NAME_LENGTH),
            subtitle="Switch Account",
            size=self.theme.font_size_xl,
        )
        return {"avatar": avatar_rect, "header": header_rect}
