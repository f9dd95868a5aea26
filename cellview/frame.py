"""A frame around another primitive with header and footer text."""

from __future__ import annotations

from dataclasses import dataclass

from .box import Box
from .screen import Align, Color, FocusDelegate, Focusable, Primitive, Screen, print_text


@dataclass
class _FrameText:
    text: str
    header: bool
    align: Align
    color: Color


class Frame(Box):
    """Wraps a primitive, adding spacing and lines of header/footer text.

    Header rows are printed top to bottom, footer rows bottom to top.
    """

    def __init__(self, primitive: Primitive) -> None:
        super().__init__()
        self.primitive = primitive
        self._text: list[_FrameText] = []
        self.top = self.bottom = 1
        self.header = self.footer = 1
        self.left = self.right = 1

    def add_text(self, text: str, header: bool, align: Align, color: Color) -> "Frame":
        """Add a line of text to the header (``header`` true) or footer."""
        self._text.append(_FrameText(text, header, Align(align), color))
        return self

    def clear(self) -> "Frame":
        """Remove all text."""
        self._text = []
        return self

    def set_borders(
        self, top: int, bottom: int, header: int, footer: int, left: int, right: int
    ) -> "Frame":
        """Set the border widths and the space around header and footer."""
        self.top, self.bottom = top, bottom
        self.header, self.footer = header, footer
        self.left, self.right = left, right
        return self

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, top, width, height = self.inner_rect()
        bottom = top + height - 1
        x += self.left
        top += self.top
        bottom -= self.bottom
        width -= self.left + self.right
        if width <= 0 or top >= bottom:
            return

        rows = [0] * 6
        top_max = top
        bottom_min = bottom
        for line in self._text:
            if line.header:
                y = top + rows[line.align]
                rows[line.align] += 1
                if y >= bottom_min:
                    continue
                top_max = max(top_max, y + 1)
            else:
                y = bottom - rows[3 + line.align]
                rows[3 + line.align] += 1
                if y <= top_max:
                    continue
                bottom_min = min(bottom_min, y - 1)
            print_text(screen, line.text, x, y, width, line.align, line.color)

        if top_max > top:
            top = top_max + self.header
        if bottom_min < bottom:
            bottom = bottom_min - self.footer
        if top > bottom:
            return
        self.primitive.set_rect(x, top, width, bottom + 1 - top)
        self.primitive.draw(screen)

    def focus(self, delegate: FocusDelegate) -> None:
        delegate(self.primitive)

    def has_focus(self) -> bool:
        if isinstance(self.primitive, Focusable):
            return self.primitive.has_focus()
        return False