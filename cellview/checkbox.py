"""A one-cell checkbox for boolean values."""

from __future__ import annotations

from typing import Callable, Optional

from .box import Box
from .screen import (
    Align,
    Color,
    FocusDelegate,
    InputHandler,
    Key,
    KeyEvent,
    Screen,
    Style,
    print_text,
)

DEFAULT_LABEL_COLOR = Color.YELLOW
DEFAULT_FIELD_BACKGROUND = Color.BLUE
DEFAULT_FIELD_TEXT_COLOR = Color.WHITE


class Checkbox(Box):
    """A labelled box that can be checked and unchecked.

    ``on_changed`` receives the new state after the user toggled it;
    ``on_done`` receives the key (Tab, Backtab or Escape) used to leave it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.checked = False
        self.label = ""
        self.label_width = 0
        self.label_color: Color = DEFAULT_LABEL_COLOR
        self.field_background_color: Color = DEFAULT_FIELD_BACKGROUND
        self.field_text_color: Color = DEFAULT_FIELD_TEXT_COLOR
        self.on_changed: Optional[Callable[[bool], None]] = None
        self.on_done: Optional[Callable[[Key], None]] = None
        self._finished: Optional[Callable[[Key], None]] = None

    def set_form_attributes(
        self,
        label_width: int,
        label_color: Color,
        bg_color: Color,
        field_text_color: Color,
        field_bg_color: Color,
    ) -> "Checkbox":
        """Apply the attributes a form shares between its items."""
        self.label_width = label_width
        self.label_color = label_color
        self.background_color = bg_color
        self.field_text_color = field_text_color
        self.field_background_color = field_bg_color
        return self

    def field_width(self) -> int:
        """The checkbox field always takes one cell."""
        return 1

    def set_finished_func(self, handler: Optional[Callable[[Key], None]]) -> "Checkbox":
        """Install the callback invoked when the user leaves this item."""
        self._finished = handler
        return self

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, y, width, height = self.inner_rect()
        right_limit = x + width
        if height < 1 or right_limit <= x:
            return

        if self.label_width > 0:
            label_width = min(self.label_width, right_limit - x)
            print_text(screen, self.label, x, y, label_width, Align.LEFT, self.label_color)
            x += label_width
        else:
            _, drawn = print_text(
                screen, self.label, x, y, right_limit - x, Align.LEFT, self.label_color
            )
            x += drawn

        style = Style(self.field_text_color, self.field_background_color)
        if self.has_focus():
            style = Style(self.field_background_color, self.field_text_color)
        screen.set_content(x, y, "X" if self.checked else " ", style)

    def input_handler(self) -> Optional[InputHandler]:
        def handle(event: KeyEvent, set_focus: FocusDelegate) -> None:
            key = event.key
            if key in (Key.RUNE, Key.ENTER):
                if key == Key.RUNE and event.rune != " ":
                    return
                self.checked = not self.checked
                if self.on_changed is not None:
                    self.on_changed(self.checked)
            elif key in (Key.TAB, Key.BACKTAB, Key.ESCAPE):
                if self.on_done is not None:
                    self.on_done(key)
                if self._finished is not None:
                    self._finished(key)

        return self.wrap_input_handler(handle)