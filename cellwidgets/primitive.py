"""Core building blocks: keys, styles, an in-memory screen and the base primitive."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum, auto
from typing import Any, Callable, Optional

from wcwidth import wcwidth


class Key(Enum):
    """Keys that widgets react to."""

    RUNE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    TAB = auto()
    BACKTAB = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    DELETE = auto()
    CTRL_V = auto()


class MouseAction(Enum):
    """Mouse actions delivered to mouse handlers."""

    MOVE = auto()
    LEFT_DOWN = auto()
    LEFT_UP = auto()
    LEFT_CLICK = auto()
    LEFT_DOUBLE_CLICK = auto()
    MIDDLE_DOWN = auto()
    MIDDLE_UP = auto()
    MIDDLE_CLICK = auto()
    RIGHT_DOWN = auto()
    RIGHT_UP = auto()
    RIGHT_CLICK = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()


class Align(IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


@dataclass(frozen=True)
class Style:
    """Foreground and background colour of a cell. ``None`` means the default."""

    foreground: Any = None
    background: Any = None

    def with_foreground(self, color: Any) -> "Style":
        """Return a copy with the foreground colour replaced."""
        return replace(self, foreground=color)

    def with_background(self, color: Any) -> "Style":
        """Return a copy with the background colour replaced."""
        return replace(self, background=color)


@dataclass(frozen=True)
class KeyEvent:
    """A key press. For ``Key.RUNE`` the typed character is in ``rune``."""

    key: Key
    rune: str = ""

    def __post_init__(self) -> None:
        if self.key is Key.RUNE and len(self.rune) != 1:
            raise ValueError("a rune key event needs exactly one character")


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a screen position."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


class Screen:
    """A rectangular grid of cells, each holding a character and a style."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen dimensions must not be negative")
        self._width = width
        self._height = height
        self._cells = [[(" ", Style()) for _ in range(width)] for _ in range(height)]

    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self._width, self._height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        """Return the character and style at a cell; ("", Style()) outside the screen."""
        if not self._inside(x, y):
            return "", Style()
        return self._cells[y][x]

    def set_content(self, x: int, y: int, ch: str, style: Style) -> None:
        """Write a character into a cell. Writes outside the screen are ignored."""
        if self._inside(x, y):
            self._cells[y][x] = (ch, style)

    def row_text(self, y: int) -> str:
        """Return the characters of one row joined into a string."""
        if not 0 <= y < self._height:
            raise IndexError("row out of range")
        return "".join(ch for ch, _ in self._cells[y])


SetFocus = Callable[["Primitive"], None]


class Primitive:
    """A rectangular widget that can be drawn, focused and fed events."""

    def __init__(self) -> None:
        self._x, self._y, self._width, self._height = 0, 0, 15, 10
        self._padding_top = self._padding_bottom = 0
        self._padding_left = self._padding_right = 0
        self._has_focus = False
        self.background_color: Any = None
        self.transparent = False

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Set the position and size of the primitive."""
        self._x, self._y, self._width, self._height = x, y, width, height

    def get_rect(self) -> tuple[int, int, int, int]:
        """Return (x, y, width, height)."""
        return self._x, self._y, self._width, self._height

    def set_border_padding(self, top: int, bottom: int, left: int, right: int) -> None:
        """Set the empty space kept inside the primitive's rectangle."""
        self._padding_top, self._padding_bottom = top, bottom
        self._padding_left, self._padding_right = left, right

    def inner_rect(self) -> tuple[int, int, int, int]:
        """Return the rectangle left for content once padding is removed."""
        x = self._x + self._padding_left
        y = self._y + self._padding_top
        width = max(0, self._width - self._padding_left - self._padding_right)
        height = max(0, self._height - self._padding_top - self._padding_bottom)
        return x, y, width, height

    def in_rect(self, x: int, y: int) -> bool:
        """Return whether a screen position lies within the primitive."""
        return self._x <= x < self._x + self._width and self._y <= y < self._y + self._height

    def focus(self, delegate: SetFocus) -> None:
        """Receive focus. Containers may hand it on through ``delegate``."""
        self._has_focus = True

    def blur(self) -> None:
        """Lose focus."""
        self._has_focus = False

    def has_focus(self) -> bool:
        """Return whether this primitive (or a child) has focus."""
        return self._has_focus

    def draw(self, screen: Screen) -> None:
        """Fill the primitive's area with its background unless it is transparent."""
        if self.transparent:
            return
        screen_width, screen_height = screen.size()
        style = Style(background=self.background_color)
        for row in range(max(self._y, 0), min(self._y + self._height, screen_height)):
            for col in range(max(self._x, 0), min(self._x + self._width, screen_width)):
                screen.set_content(col, row, " ", style)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        """Process a key event while focused. The base primitive ignores keys."""

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional["Primitive"]]:
        """Process a mouse event; return (consumed, capturing primitive)."""
        if action is MouseAction.LEFT_DOWN and self.in_rect(*event.position):
            set_focus(self)
            return True, None
        return False, None

    def handle_paste(self, text: str, set_focus: SetFocus) -> None:
        """Process pasted text while focused. The base primitive ignores it."""


def _clusters(text: str) -> list[tuple[str, int]]:
    """Split text into printable cells: a base character plus combining marks."""
    clusters: list[tuple[str, int]] = []
    for ch in text:
        width = wcwidth(ch)
        if width < 0:
            continue
        if width == 0 and clusters:
            last, last_width = clusters[-1]
            clusters[-1] = (last + ch, last_width)
        else:
            clusters.append((ch, width))
    return clusters


def string_width(text: str) -> int:
    """Return the number of screen cells the text occupies."""
    return sum(width for _, width in _clusters(text))


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    width: int,
    align: Align,
    style: Style,
    skip: int = 0,
) -> int:
    """Print text into a one-row area and return the number of cells printed.

    ``skip`` cells are dropped from the start of the text first. Text wider
    than ``width`` is cut according to the alignment.
    """
    if width <= 0:
        return 0
    clusters = _clusters(text)

    skipped = 0
    while clusters and skipped < skip:
        skipped += clusters.pop(0)[1]

    total = sum(w for _, w in clusters)
    chopped_left = chopped_right = 0
    while total > width:
        take_left = align is Align.RIGHT or (
            align is Align.CENTER and chopped_left <= chopped_right
        )
        _, removed = clusters.pop(0) if take_left else clusters.pop()
        total -= removed
        if take_left:
            chopped_left += removed
        else:
            chopped_right += removed

    if align is Align.CENTER:
        offset = (width - total) // 2
    elif align is Align.RIGHT:
        offset = width - total
    else:
        offset = 0

    position = x + offset
    for cluster, cluster_width in clusters:
        screen.set_content(position, y, cluster, style)
        for extra in range(1, cluster_width):
            screen.set_content(position + extra, y, "", style)
        position += cluster_width
    return total