"""The basic rectangular widget with background, border and title."""

from __future__ import annotations

from typing import Callable, Optional

from .screen import (
    BORDERS,
    HORIZONTAL_ELLIPSIS,
    Align,
    Attr,
    Color,
    FocusDelegate,
    Focusable,
    InputHandler,
    KeyEvent,
    Primitive,
    Screen,
    Style,
    print_text,
)

InputCapture = Callable[[KeyEvent], Optional[KeyEvent]]
DrawFunc = Callable[[Screen, int, int, int, int], "tuple[int, int, int, int]"]

DEFAULT_BACKGROUND = Color.BLACK
DEFAULT_BORDER_COLOR = Color.WHITE
DEFAULT_TITLE_COLOR = Color.WHITE


class Box(Primitive):
    """A rectangle with a background and an optional border and title.

    Other widgets build on it; subclasses override ``has_focus`` and the
    border drawing follows their answer.
    """

    def __init__(self) -> None:
        self.x, self.y, self.width, self.height = 0, 0, 15, 10
        self._inner: Optional[tuple[int, int, int, int]] = None
        self.padding_top = self.padding_bottom = 0
        self.padding_left = self.padding_right = 0
        self.background_color: Color = DEFAULT_BACKGROUND
        self.border = False
        self.border_color: Color = DEFAULT_BORDER_COLOR
        self.border_attributes: Attr = Attr.NONE
        self.title = ""
        self.title_color: Color = DEFAULT_TITLE_COLOR
        self.title_align: Align = Align.CENTER
        self.input_capture: Optional[InputCapture] = None
        self.draw_func: Optional[DrawFunc] = None
        self._has_focus = False

    def set_border_padding(self, top: int, bottom: int, left: int, right: int) -> "Box":
        """Set the space between the border and the content."""
        self.padding_top, self.padding_bottom = top, bottom
        self.padding_left, self.padding_right = left, right
        return self

    @property
    def rect(self) -> tuple[int, int, int, int]:
        """The position and size as (x, y, width, height)."""
        return self.x, self.y, self.width, self.height

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y, self.width, self.height = x, y, width, height
        self._inner = None

    def _computed_inner_rect(self) -> tuple[int, int, int, int]:
        x, y, width, height = self.rect
        if self.border:
            x, y, width, height = x + 1, y + 1, width - 2, height - 2
        x += self.padding_left
        y += self.padding_top
        width -= self.padding_left + self.padding_right
        height -= self.padding_top + self.padding_bottom
        return x, y, max(width, 0), max(height, 0)

    def inner_rect(self) -> tuple[int, int, int, int]:
        """Return the content area without border and padding."""
        if self._inner is not None:
            return self._inner
        return self._computed_inner_rect()

    def wrap_input_handler(self, handler: Optional[InputHandler]) -> InputHandler:
        """Return ``handler`` preceded by this box's input capture."""

        def wrapped(event: KeyEvent, set_focus: FocusDelegate) -> None:
            if self.input_capture is not None:
                event = self.input_capture(event)
            if event is not None and handler is not None:
                handler(event, set_focus)

        return wrapped

    def input_handler(self) -> Optional[InputHandler]:
        return self.wrap_input_handler(None)

    def draw(self, screen: Screen) -> None:
        if self.width <= 0 or self.height <= 0:
            return

        background = Style().with_background(self.background_color)
        if not self.background_color.is_default:
            for row in range(self.y, self.y + self.height):
                for column in range(self.x, self.x + self.width):
                    screen.set_content(column, row, " ", background)

        if self.border and self.width >= 2 and self.height >= 2:
            self._draw_border(screen, background)

        if self.draw_func is not None:
            inner = self.draw_func(screen, self.x, self.y, self.width, self.height)
        else:
            inner = self._computed_inner_rect()
        self._inner = self._clamp_to_screen(screen, *inner)

    def _draw_border(self, screen: Screen, background: Style) -> None:
        style = background.with_foreground(self.border_color).with_attributes(
            self.border_attributes
        )
        if self.has_focus():
            horizontal, vertical = BORDERS.horizontal_focus, BORDERS.vertical_focus
            top_left, top_right = BORDERS.top_left_focus, BORDERS.top_right_focus
            bottom_left, bottom_right = BORDERS.bottom_left_focus, BORDERS.bottom_right_focus
        else:
            horizontal, vertical = BORDERS.horizontal, BORDERS.vertical
            top_left, top_right = BORDERS.top_left, BORDERS.top_right
            bottom_left, bottom_right = BORDERS.bottom_left, BORDERS.bottom_right
        right = self.x + self.width - 1
        bottom = self.y + self.height - 1
        for column in range(self.x + 1, right):
            screen.set_content(column, self.y, horizontal, style)
            screen.set_content(column, bottom, horizontal, style)
        for row in range(self.y + 1, bottom):
            screen.set_content(self.x, row, vertical, style)
            screen.set_content(right, row, vertical, style)
        screen.set_content(self.x, self.y, top_left, style)
        screen.set_content(right, self.y, top_right, style)
        screen.set_content(self.x, bottom, bottom_left, style)
        screen.set_content(right, bottom, bottom_right, style)

        if self.title and self.width >= 4:
            printed, _ = print_text(
                screen, self.title, self.x + 1, self.y, self.width - 2,
                self.title_align, self.title_color,
            )
            if len(self.title) - printed > 0 and printed > 0:
                _, cell_style = screen.get_content(self.x + self.width - 2, self.y)
                print_text(
                    screen, HORIZONTAL_ELLIPSIS, self.x + self.width - 2, self.y, 1,
                    Align.LEFT, cell_style.foreground,
                )

    @staticmethod
    def _clamp_to_screen(
        screen: Screen, x: int, y: int, width: int, height: int
    ) -> tuple[int, int, int, int]:
        screen_width, screen_height = screen.size()
        if x < 0:
            width += x
            x = 0
        if x + width >= screen_width:
            width = screen_width - x
        if y + height >= screen_height:
            height = screen_height - y
        if y < 0:
            height += y
            y = 0
        return x, y, max(width, 0), max(height, 0)

    def focus(self, delegate: FocusDelegate) -> None:
        self._has_focus = True

    def blur(self) -> None:
        self._has_focus = False

    def has_focus(self) -> bool:
        return self._has_focus

    def focusable(self) -> Focusable:
        return self