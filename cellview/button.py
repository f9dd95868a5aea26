"""A labelled button that triggers an action when selected."""

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
    tagged_string_width,
)

DEFAULT_BUTTON_BACKGROUND = Color.BLUE
DEFAULT_LABEL_COLOR = Color.WHITE
DEFAULT_LABEL_COLOR_ACTIVATED = Color.BLUE
DEFAULT_BACKGROUND_ACTIVATED = Color.WHITE


class Button(Box):
    """A one-line button.

    ``on_selected`` is called when Enter is pressed; ``on_blur`` receives the
    key (Tab, Backtab or Escape) that was used to leave the button.
    """

    def __init__(self, label: str) -> None:
        super().__init__()
        self.background_color = DEFAULT_BUTTON_BACKGROUND
        self.set_rect(0, 0, tagged_string_width(label) + 4, 1)
        self.label = label
        self.label_color: Color = DEFAULT_LABEL_COLOR
        self.label_color_activated: Color = DEFAULT_LABEL_COLOR_ACTIVATED
        self.background_color_activated: Color = DEFAULT_BACKGROUND_ACTIVATED
        self.on_selected: Optional[Callable[[], None]] = None
        self.on_blur: Optional[Callable[[Key], None]] = None

    def draw(self, screen: Screen) -> None:
        focused = self.has_focus()
        border_color, background_color = self.border_color, self.background_color
        if focused:
            self.background_color = self.background_color_activated
            self.border_color = self.label_color_activated
        try:
            super().draw(screen)
        finally:
            self.background_color = background_color
            self.border_color = border_color

        x, y, width, height = self.inner_rect()
        if width > 0 and height > 0:
            color = self.label_color_activated if focused else self.label_color
            print_y = y + height // 2
            from .screen import print_text

            print_text(screen, self.label, x, print_y, width, Align.CENTER, color)

    def input_handler(self) -> Optional[InputHandler]:
        def handle(event: KeyEvent, set_focus: FocusDelegate) -> None:
            if event.key == Key.ENTER:
                if self.on_selected is not None:
                    self.on_selected()
            elif event.key in (Key.BACKTAB, Key.TAB, Key.ESCAPE):
                if self.on_blur is not None:
                    self.on_blur(event.key)

        return self.wrap_input_handler(handle)