"""Translation of ANSI escape sequences into colour tags."""

from __future__ import annotations

import io
from enum import Enum, auto
from typing import Protocol, Union


class _Target(Protocol):
    def write(self, text: str) -> object:
        ...


class _State(Enum):
    TEXT = auto()
    ESCAPE = auto()
    SUBSTRING = auto()
    CONTROL_SEQUENCE = auto()


_COLORS = (
    "black", "red", "green", "yellow", "blue", "darkmagenta", "darkcyan", "white",
    "#7f7f7f", "#ff0000", "#00ff00", "#ffff00", "#5c5cff", "#ff00ff", "#00ffff", "#ffffff",
)

_ATTRIBUTES = {
    "1": "b", "01": "b", "2": "d", "02": "d", "4": "u", "04": "u",
    "5": "l", "05": "l", "7": "7", "07": "7",
}


def _atoi(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _lookup_color(number: int, bright: bool) -> str:
    if number < 0 or number > 7:
        return "black"
    return _COLORS[number + 8 if bright else number]


def _hex(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def _extended_color(fields: list[str], index: int) -> str:
    if len(fields) <= index + 1:
        return ""
    if fields[index + 1] == "5" and len(fields) > index + 2:
        number = _atoi(fields[index + 2])
        if number <= 7:
            return _lookup_color(number, False)
        if number <= 15:
            return _lookup_color(number, True)
        if number <= 231:
            red = (number - 16) // 36
            green = ((number - 16) // 6) % 6
            blue = (number - 16) % 6
            return _hex(255 * red // 5, 255 * green // 5, 255 * blue // 5)
        if number <= 255:
            grey = 255 * (number - 232) // 23
            return _hex(grey, grey, grey)
        return ""
    if fields[index + 1] == "2" and len(fields) > index + 4:
        return _hex(*(_atoi(fields[index + n]) for n in (2, 3, 4)))
    return ""


def _graphic_rendition(parameter: str) -> str:
    fields = parameter.split(";")
    if len(fields) == 1 and fields[0] == "0":
        return "[-:-:-]"
    foreground = background = attributes = ""
    clear_attributes = False
    for index, value in enumerate(fields):
        if value in _ATTRIBUTES:
            attributes += _ATTRIBUTES[value]
        elif value in ("22", "24", "25", "27"):
            clear_attributes = True
        elif value in {str(n) for n in range(30, 38)}:
            foreground = _lookup_color(int(value) - 30, False)
        elif value in {str(n) for n in range(40, 48)}:
            background = _lookup_color(int(value) - 40, False)
        elif value in {str(n) for n in range(90, 98)}:
            foreground = _lookup_color(int(value) - 90, True)
        elif value in {str(n) for n in range(100, 108)}:
            background = _lookup_color(int(value) - 100, True)
        elif value in ("38", "48"):
            color = _extended_color(fields, index)
            if color:
                if value == "38":
                    foreground = color
                else:
                    background = color
            break
    if attributes or clear_attributes:
        attributes = ":" + attributes
    if foreground or background or attributes:
        return f"[{foreground}:{background}{attributes}]"
    return ""


class AnsiWriter:
    """A writer that turns ANSI escape codes into colour tags for ``target``.

    Other escape codes are dropped. Parser state persists across writes.
    """

    def __init__(self, target: _Target) -> None:
        self.target = target
        self._state = _State.TEXT
        self._parameter = ""
        self._intermediate = ""

    def write(self, text: Union[str, bytes]) -> int:
        """Translate ``text`` and write the result; return the input length."""
        if isinstance(text, bytes):
            decoded = text.decode("utf-8", errors="replace")
        else:
            decoded = text
        out: list[str] = []
        for ch in decoded:
            state = self._state
            if state is _State.ESCAPE:
                if ch == "[":
                    self._parameter = ""
                    self._intermediate = ""
                    self._state = _State.CONTROL_SEQUENCE
                elif ch == "c":
                    out.append("[-:-:-]")
                    self._state = _State.TEXT
                elif ch in "P]X^_":
                    self._state = _State.SUBSTRING
                else:
                    self._state = _State.TEXT
            elif state is _State.CONTROL_SEQUENCE:
                code = ord(ch)
                if 0x30 <= code <= 0x3F:
                    self._parameter += ch
                elif 0x20 <= code <= 0x2F:
                    self._intermediate += ch
                elif 0x40 <= code <= 0x7E:
                    if ch == "E":
                        out.append("\n" * (_atoi(self._parameter) or 1))
                    elif ch == "m":
                        out.append(_graphic_rendition(self._parameter))
                    self._state = _State.TEXT
                else:
                    self._state = _State.TEXT
            elif state is _State.SUBSTRING:
                if ch == "\x1b":
                    self._state = _State.ESCAPE
            elif ch == "\x1b":
                self._state = _State.ESCAPE
            else:
                out.append(ch)
        self.target.write("".join(out))
        return len(text)


def translate_ansi(text: str) -> str:
    """Return ``text`` with ANSI escape sequences replaced by colour tags."""
    buffer = io.StringIO()
    AnsiWriter(buffer).write(text)
    return buffer.getvalue()