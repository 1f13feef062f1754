"""
UI Organisms - Complex UI sections.
Composed of multiple molecules working together.
"""

from .header import Header
from .menu_list import MenuList
from .card_row import CardRow
from .tab_row import TabRow
from .char_keyboard import CharKeyboard
from .navigation_drawer import NavigationDrawer, DrawerItem, DrawerSpacer, DRAWER_ENTRIES

__all__ = [
    "Header",
    "MenuList",
    "CardRow",
    "TabRow",
    "CharKeyboard",
    "NavigationDrawer",
    "DrawerItem",
    "DrawerSpacer",
    "DRAWER_ENTRIES",
]
