"""
Application state management for Jetcaster TV.

Navigation state is an explicit object (JetcasterAppState) that is handed
to the drawer shell and the router. Focus state for D-pad navigation lives
alongside it in UiState.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from jetcaster_tv.routes import (
    Discover,
    Library,
    Player,
    Podcast,
    Profile,
    Screen,
    Search,
    Settings,
)

BackStack = Tuple[Screen, ...]


def push_screen(back_stack: BackStack, screen: Screen) -> BackStack:
    """Return a new back stack with screen on top."""
    return back_stack + (screen,)


def pop_screen(back_stack: BackStack) -> BackStack:
    """Return a new back stack without its top entry. The root entry stays."""
    if len(back_stack) <= 1:
        return back_stack
    return back_stack[:-1]


class JetcasterAppState:
    """
    Navigation state holder.

    Owns the back stack and exposes one zero-argument navigation action
    per top-level destination, the same surface the drawer dispatches to.
    """

    def __init__(self, start: Screen = Discover()):
        self._back_stack: BackStack = (start,)
        self._listeners: List[Callable[[Screen], None]] = []

    @property
    def back_stack(self) -> BackStack:
        return self._back_stack

    @property
    def current_screen(self) -> Screen:
        return self._back_stack[-1]

    def add_listener(self, callback: Callable[[Screen], None]) -> None:
        """Register a callback invoked with the new current screen on change."""
        self._listeners.append(callback)

    def navigate(self, screen: Screen) -> None:
        self._set_back_stack(push_screen(self._back_stack, screen))

    def navigate_to_discover(self) -> None:
        self.navigate(Discover())

    def navigate_to_library(self) -> None:
        self.navigate(Library())

    def navigate_to_search(self) -> None:
        self.navigate(Search())

    def navigate_to_profile(self) -> None:
        self.navigate(Profile())

    def navigate_to_settings(self) -> None:
        self.navigate(Settings())

    def show_podcast_details(self, podcast_uri: str) -> None:
        self.navigate(Podcast(podcast_uri))

    def play_episode(self) -> None:
        self.navigate(Player())

    def navigate_back(self) -> bool:
        """
        Pop the current screen.

        Returns:
            False if already at the root entry
        """
        popped = pop_screen(self._back_stack)
        if popped == self._back_stack:
            return False
        self._set_back_stack(popped)
        return True

    def back_to_home(self) -> None:
        """Pop everything above the root and make sure Discover is on top."""
        root = self._back_stack[0]
        if isinstance(root, Discover):
            self._set_back_stack((root,))
        else:
            self._set_back_stack((root, Discover()))

    def _set_back_stack(self, back_stack: BackStack) -> None:
        self._back_stack = back_stack
        for callback in list(self._listeners):
            callback(self.current_screen)


@dataclass
class ContentFocus:
    """D-pad focus inside a screen, laid out as rows of focusable items."""

    row: int = 0
    column: int = 0

    def clamp(self, row_lengths: Sequence[int]) -> None:
        """Snap the focus onto a valid item (first non-empty row if needed)."""
        if not any(row_lengths):
            self.row = 0
            self.column = 0
            return
        if self.row >= len(row_lengths) or row_lengths[self.row] == 0:
            self.row = next(i for i, length in enumerate(row_lengths) if length)
        self.column = max(0, min(self.column, row_lengths[self.row] - 1))

    def move(self, direction: str, row_lengths: Sequence[int]) -> bool:
        """
        Move focus one step.

        Args:
            direction: "up", "down", "left" or "right"
            row_lengths: Number of focusable items in each row

        Returns:
            False if the move would leave the grid
        """
        if not any(row_lengths):
            return False
        self.clamp(row_lengths)

        if direction in ("left", "right"):
            column = self.column + (-1 if direction == "left" else 1)
            if 0 <= column < row_lengths[self.row]:
                self.column = column
                return True
            return False

        step = -1 if direction == "up" else 1
        row = self.row + step
        while 0 <= row < len(row_lengths):
            if row_lengths[row] > 0:
                self.row = row
                self.column = min(self.column, row_lengths[row] - 1)
                return True
            row += step
        return False


@dataclass
class DrawerFocus:
    """Open state and highlighted entry of the navigation drawer."""

    open: bool = False
    highlighted: int = 0

    def close(self) -> None:
        self.open = False


class UiState:
    """
    Centralized UI state for Jetcaster TV.

    Groups the navigation holder with the drawer and per-entry content
    focus so the app loop has a single object to pass around.
    """

    def __init__(self, navigation: Optional[JetcasterAppState] = None):
        self.navigation = navigation if navigation is not None else JetcasterAppState()
        self.drawer = DrawerFocus()

        # Focus per back stack depth, so duplicate routes don't share focus
        self._focus: Dict[int, ContentFocus] = {}
        self._depth = len(self.navigation.back_stack)
        self.navigation.add_listener(self._on_navigate)

    @property
    def content_focus(self) -> ContentFocus:
        depth = len(self.navigation.back_stack)
        if depth not in self._focus:
            self._focus[depth] = ContentFocus()
        return self._focus[depth]

    def _on_navigate(self, screen: Screen) -> None:
        depth = len(self.navigation.back_stack)
        if depth >= self._depth:
            # Pushed (or replaced): the new entry starts from the top-left
            self._focus[depth] = ContentFocus()
        self._focus = {d: f for d, f in self._focus.items() if d <= depth}
        self._depth = depth
        self.drawer.close()
