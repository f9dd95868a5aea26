"""Core screen model: colours, styles, keys, events, borders and text output."""

from __future__ import annotations

import queue
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum, IntFlag, auto
from typing import Callable, Optional

from wcwidth import wcwidth


class Align(IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


_COLOR_NAMES = frozenset(
    {
        "black", "maroon", "green", "olive", "navy", "purple", "teal", "silver",
        "gray", "grey", "red", "lime", "yellow", "blue", "fuchsia", "aqua",
        "white", "orange", "pink", "brown", "gold", "cyan", "magenta",
        "darkblue", "darkcyan", "darkgray", "darkgrey", "darkgreen",
        "darkmagenta", "darkorange", "darkred", "darkviolet", "lightblue",
        "lightcyan", "lightgreen", "lightgray", "lightgrey", "lightyellow",
        "violet", "indigo", "skyblue", "navyblue",
    }
)
_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class Color:
    """A terminal colour: "default", a W3C colour name or "#rrggbb"."""

    value: str = "default"

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Return the colour named by ``text``; raise ValueError if unknown."""
        lowered = text.strip().lower()
        if lowered == "default" or lowered in _COLOR_NAMES:
            return cls(lowered)
        if _HEX_COLOR.fullmatch(lowered):
            return cls(lowered)
        raise ValueError(f"unknown color: {text!r}")

    @property
    def is_default(self) -> bool:
        return self.value == "default"

    def __str__(self) -> str:
        return self.value


Color.DEFAULT = Color("default")
Color.BLACK = Color("black")
Color.WHITE = Color("white")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.DARKCYAN = Color("darkcyan")
Color.DARKMAGENTA = Color("darkmagenta")


class Attr(IntFlag):
    """Text attributes."""

    NONE = 0
    BOLD = auto()
    BLINK = auto()
    REVERSE = auto()
    UNDERLINE = auto()
    DIM = auto()


_ATTR_LETTERS = {
    "b": Attr.BOLD,
    "l": Attr.BLINK,
    "r": Attr.REVERSE,
    "u": Attr.UNDERLINE,
    "d": Attr.DIM,
}


@dataclass(frozen=True)
class Style:
    """Foreground, background and attributes of one screen cell."""

    foreground: Color = Color.DEFAULT
    background: Color = Color.DEFAULT
    attributes: Attr = Attr.NONE

    def with_foreground(self, color: Color) -> "Style":
        return replace(self, foreground=color)

    def with_background(self, color: Color) -> "Style":
        return replace(self, background=color)

    def with_attributes(self, attributes: Attr) -> "Style":
        return replace(self, attributes=Attr(attributes))


class Key(IntEnum):
    """Keys that key events carry."""

    RUNE = auto()
    ENTER = auto()
    TAB = auto()
    BACKTAB = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    BACKSPACE2 = auto()
    DELETE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    CTRL_C = auto()
    CTRL_N = auto()
    CTRL_P = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``rune`` holds the character for Key.RUNE."""

    key: Key
    rune: str = ""


@dataclass(frozen=True)
class ResizeEvent:
    """The screen changed size."""

    width: int
    height: int


@dataclass
class BorderSet:
    """Characters used to draw borders."""

    horizontal: str = "\u2500"
    vertical: str = "\u2502"
    top_left: str = "\u250c"
    top_right: str = "\u2510"
    bottom_left: str = "\u2514"
    bottom_right: str = "\u2518"
    left_t: str = "\u251c"
    right_t: str = "\u2524"
    top_t: str = "\u252c"
    bottom_t: str = "\u2534"
    cross: str = "\u253c"
    horizontal_focus: str = "\u2550"
    vertical_focus: str = "\u2551"
    top_left_focus: str = "\u2554"
    top_right_focus: str = "\u2557"
    bottom_left_focus: str = "\u255a"
    bottom_right_focus: str = "\u255d"


BORDERS = BorderSet()

HORIZONTAL_ELLIPSIS = "\u2026"


class Focusable(ABC):
    """Something that can report whether it has focus."""

    @abstractmethod
    def has_focus(self) -> bool:
        ...


FocusDelegate = Callable[["Primitive"], None]
InputHandler = Callable[[KeyEvent, FocusDelegate], None]


class Primitive(Focusable):
    """The interface of every widget that can be placed on a screen."""

    @abstractmethod
    def draw(self, screen: "Screen") -> None:
        ...

    @abstractmethod
    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        ...

    @abstractmethod
    def input_handler(self) -> Optional[InputHandler]:
        ...

    @abstractmethod
    def focus(self, delegate: FocusDelegate) -> None:
        ...

    @abstractmethod
    def blur(self) -> None:
        ...

    @abstractmethod
    def focusable(self) -> Focusable:
        ...


class Screen:
    """An in-memory grid of cells with an event queue."""

    def __init__(self, width: int = 80, height: int = 25) -> None:
        self._width = width
        self._height = height
        self._cells: dict[tuple[int, int], tuple[str, Style]] = {}
        self._events: "queue.Queue[object]" = queue.Queue()
        self.initialized = False
        self.finalized = False
        self.cursor_visible = True
        self.show_count = 0

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def resize(self, width: int, height: int) -> None:
        """Change the size and queue a resize event."""
        self._width, self._height = width, height
        self._cells = {
            pos: cell for pos, cell in self._cells.items()
            if pos[0] < width and pos[1] < height
        }
        self.post_event(ResizeEvent(width, height))

    def set_content(self, x: int, y: int, ch: str, style: Style) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._cells[(x, y)] = (ch, style)

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        return self._cells.get((x, y), (" ", Style()))

    def clear(self) -> None:
        self._cells.clear()

    def show(self) -> None:
        self.show_count += 1

    def init(self) -> None:
        self.initialized = True
        self.finalized = False

    def fini(self) -> None:
        if not self.finalized:
            self.finalized = True
            self._events.put(None)

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def post_event(self, event: object) -> None:
        self._events.put(event)

    def poll_event(self) -> object:
        """Wait for the next event; None once the screen was finalized."""
        if self.finalized and self._events.empty():
            return None
        return self._events.get()

    def row_text(self, y: int) -> str:
        """Return the characters of one row."""
        return "".join(self.get_content(x, y)[0] for x in range(self._width))


# Colour, region and escaped tags.
_COLOR_FIELD = r"(?:[a-zA-Z]+|#[0-9a-zA-Z]{6}|-)"
_COLOR_TAG = re.compile(
    rf"\[({_COLOR_FIELD}?(?::{_COLOR_FIELD}?)?(?::(?:[lbdru]+|-)?)?)\]"
)
_REGION_TAG = re.compile(r'\["([a-zA-Z0-9_,;: \-.]*)"\]')
_ESCAPED_TAG = re.compile(r'\[([a-zA-Z0-9_,;: \-."#]+)\[(\[*)\]')
_ANY_TAG = re.compile(
    f"(?P<escape>{_ESCAPED_TAG.pattern})|(?P<color>{_COLOR_TAG.pattern})"
    f"|(?P<region>{_REGION_TAG.pattern})"
)


@dataclass
class _Cell:
    ch: str
    foreground: Color
    background: Optional[Color]
    attributes: Attr
    width: int = field(default=1)


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def string_width(text: str) -> int:
    """Return the number of screen cells ``text`` takes."""
    return sum(_char_width(ch) for ch in text)


def _parse_tagged(text: str, color: Color) -> list[_Cell]:
    cells: list[_Cell] = []
    fg, bg, attrs = color, None, Attr.NONE

    def emit(chunk: str) -> None:
        cells.extend(_Cell(ch, fg, bg, attrs, _char_width(ch)) for ch in chunk)

    pos = 0
    for match in _ANY_TAG.finditer(text):
        emit(text[pos:match.start()])
        pos = match.end()
        if match.group("escape") is not None:
            emit("[" + match.group(2) + match.group(3) + "]")
        elif match.group("color") is not None:
            content = match.group(5)
            if content == "":
                emit(match.group(0))
                continue
            parts = content.split(":")
            if parts[0] == "-":
                fg = color
            elif parts[0]:
                fg = _tag_color(parts[0])
            if len(parts) > 1:
                if parts[1] == "-":
                    bg = Color.DEFAULT
                elif parts[1]:
                    bg = _tag_color(parts[1])
            if len(parts) > 2:
                if parts[2] == "-":
                    attrs = Attr.NONE
                elif parts[2]:
                    attrs = Attr.NONE
                    for letter in parts[2]:
                        attrs |= _ATTR_LETTERS[letter]
    emit(text[pos:])
    return cells


def _tag_color(name: str) -> Color:
    try:
        return Color.parse(name)
    except ValueError:
        return Color.DEFAULT


def tagged_string_width(text: str) -> int:
    """Return the screen width of ``text`` with its tags removed."""
    return sum(cell.width for cell in _parse_tagged(text, Color.DEFAULT))


def print_text(
    screen: Screen, text: str, x: int, y: int, max_width: int, align: Align, color: Color
) -> tuple[int, int]:
    """Print tagged text in one row; return (characters printed, width used)."""
    if max_width <= 0:
        return 0, 0
    cells = _parse_tagged(text, color)
    total = sum(cell.width for cell in cells)
    if align == Align.RIGHT:
        chosen: list[_Cell] = []
        used = 0
        for cell in reversed(cells):
            if used + cell.width > max_width:
                break
            chosen.insert(0, cell)
            used += cell.width
    else:
        skip = (total - max_width) // 2 if align == Align.CENTER and total > max_width else 0
        start = 0
        skipped = 0
        while start < len(cells) and skipped < skip:
            skipped += cells[start].width
            start += 1
        chosen, used = [], 0
        for cell in cells[start:]:
            if used + cell.width > max_width:
                break
            chosen.append(cell)
            used += cell.width
    if align == Align.CENTER:
        x += (max_width - used) // 2
    elif align == Align.RIGHT:
        x += max_width - used
    for cell in chosen:
        _, existing = screen.get_content(x, y)
        background = existing.background if cell.background is None else cell.background
        screen.set_content(x, y, cell.ch, Style(cell.foreground, background, cell.attributes))
        x += cell.width
    return len(chosen), used


_UP, _DOWN, _LEFT, _RIGHT = "u", "d", "l", "r"
_JOINABLE = {
    "\u2500": frozenset({_LEFT, _RIGHT}),
    "\u2502": frozenset({_UP, _DOWN}),
    "\u250c": frozenset({_DOWN, _RIGHT}),
    "\u2510": frozenset({_DOWN, _LEFT}),
    "\u2514": frozenset({_UP, _RIGHT}),
    "\u2518": frozenset({_UP, _LEFT}),
    "\u251c": frozenset({_UP, _DOWN, _RIGHT}),
    "\u2524": frozenset({_UP, _DOWN, _LEFT}),
    "\u252c": frozenset({_DOWN, _LEFT, _RIGHT}),
    "\u2534": frozenset({_UP, _LEFT, _RIGHT}),
    "\u253c": frozenset({_UP, _DOWN, _LEFT, _RIGHT}),
}
_BY_DIRECTIONS = {directions: ch for ch, directions in _JOINABLE.items()}


def print_joined_semigraphics(screen: Screen, x: int, y: int, ch: str, color: Color) -> None:
    """Draw a line character, merging it with a line character already there."""
    existing, style = screen.get_content(x, y)
    result = ch
    if existing in _JOINABLE and ch in _JOINABLE:
        result = _BY_DIRECTIONS.get(_JOINABLE[existing] | _JOINABLE[ch], ch)
    screen.set_content(x, y, result, style.with_foreground(color))