"""A grid-based layout with proportional and fixed rows and columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .box import Box
from .screen import (
    BORDERS,
    Color,
    FocusDelegate,
    InputHandler,
    Key,
    KeyEvent,
    Primitive,
    Screen,
    print_joined_semigraphics,
)

DEFAULT_BORDERS_COLOR = Color.WHITE

_MAX_OFFSET = 2**31 - 1


@dataclass
class _GridItem:
    item: Optional[Primitive]
    row: int
    column: int
    width: int
    height: int
    min_grid_width: int
    min_grid_height: int
    focus: bool
    visible: bool = False
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _track_sizes(
    definitions: Sequence[int], count: int, available: int, spacing: int, minimum: int
) -> list[int]:
    """Resolve row heights or column widths from their definitions."""
    sizes = [0] * count
    remaining = available - spacing
    proportional = 0
    for index, size in enumerate(definitions):
        if size > 0:
            size = max(size, minimum)
            remaining -= size
            sizes[index] = size
        else:
            proportional += -size if size < 0 else 1
    proportional += max(count - len(definitions), 0)

    for index in range(count):
        size = definitions[index] if index < len(definitions) else 0
        if size > 0:
            continue
        weight = -size if size < 0 else 1
        absolute = _trunc_div(weight * remaining, proportional)
        remaining -= absolute
        proportional -= weight
        sizes[index] = max(absolute, minimum)
    return sizes


def _track_positions(sizes: Sequence[int], start: int, gap: int) -> list[int]:
    positions = []
    pos = start
    for size in sizes:
        positions.append(pos)
        pos += size + gap
    return positions


def _offset_bounds(positions: Sequence[int], offset: int, extent: int) -> tuple[int, int]:
    first = last = 0
    for index, pos in enumerate(positions):
        if pos - offset < 0:
            first = index + 1
        if pos - offset < extent:
            last = index
    return first, last


class Grid(Box):
    """Places primitives into cells of a grid of rows and columns.

    Positive row/column sizes are absolute; zero or negative sizes are
    proportional weights of the remaining space (0 counts as -1). When the
    grid exceeds its area it can be scrolled by rows and columns.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: list[_GridItem] = []
        self.rows: list[int] = []
        self.columns: list[int] = []
        self.min_width = 0
        self.min_height = 0
        self.gap_rows = 0
        self.gap_columns = 0
        self.row_offset = 0
        self.column_offset = 0
        self.borders = False
        self.borders_color: Color = DEFAULT_BORDERS_COLOR

    def set_columns(self, *args: int) -> "Grid":
        """Define the column widths, leftmost first."""
        self.columns = list(args)
        return self

    def set_rows(self, *args: int) -> "Grid":
        """Define the row heights, topmost first."""
        self.rows = list(args)
        return self

    def set_size(
        self, num_rows: int, num_columns: int, row_size: int, column_size: int
    ) -> "Grid":
        """Define ``num_rows`` rows and ``num_columns`` columns of equal size."""
        self.rows = [row_size] * num_rows
        self.columns = [column_size] * num_columns
        return self

    def set_min_size(self, row: int, column: int) -> "Grid":
        """Set the minimum row height and column width."""
        if row < 0 or column < 0:
            raise ValueError("Invalid minimum row/column size")
        self.min_height, self.min_width = row, column
        return self

    def set_gap(self, row: int, column: int) -> "Grid":
        """Set the gaps between neighbouring rows and columns."""
        if row < 0 or column < 0:
            raise ValueError("Invalid gap size")
        self.gap_rows, self.gap_columns = row, column
        return self

    def add_item(
        self,
        item: Optional[Primitive],
        row: int,
        column: int,
        row_span: int,
        col_span: int,
        min_grid_height: int,
        min_grid_width: int,
        focus: bool,
    ) -> "Grid":
        """Place ``item`` at a cell, spanning rows and columns.

        The same primitive may be added several times; the entry whose minimum
        grid size applies (and is highest) is used.
        """
        self._items.append(
            _GridItem(
                item=item,
                row=row,
                column=column,
                width=col_span,
                height=row_span,
                min_grid_width=min_grid_width,
                min_grid_height=min_grid_height,
                focus=focus,
            )
        )
        return self

    def remove_item(self, item: Primitive) -> "Grid":
        """Remove every entry for ``item``, keeping the others in order."""
        self._items = [entry for entry in self._items if entry.item is not item]
        return self

    def clear(self) -> "Grid":
        """Remove all items."""
        self._items = []
        return self

    def set_offset(self, rows: int, columns: int) -> "Grid":
        """Set how many rows and columns are skipped at the top-left."""
        self.row_offset, self.column_offset = rows, columns
        return self

    def offset(self) -> tuple[int, int]:
        """Return the current (row, column) offset."""
        return self.row_offset, self.column_offset

    def focus(self, delegate: FocusDelegate) -> None:
        for entry in self._items:
            if entry.focus:
                delegate(entry.item)
                return
        self._has_focus = True

    def blur(self) -> None:
        self._has_focus = False

    def has_focus(self) -> bool:
        for entry in self._items:
            if entry.visible and entry.item is not None and entry.item.focusable().has_focus():
                return True
        return self._has_focus

    def input_handler(self) -> Optional[InputHandler]:
        def handle(event: KeyEvent, set_focus: FocusDelegate) -> None:
            key = event.key
            if key == Key.RUNE:
                rune = event.rune
                if rune == "g":
                    self.row_offset, self.column_offset = 0, 0
                elif rune == "G":
                    self.row_offset = _MAX_OFFSET
                elif rune == "j":
                    self.row_offset += 1
                elif rune == "k":
                    self.row_offset -= 1
                elif rune == "h":
                    self.column_offset -= 1
                elif rune == "l":
                    self.column_offset += 1
            elif key == Key.HOME:
                self.row_offset, self.column_offset = 0, 0
            elif key == Key.END:
                self.row_offset = _MAX_OFFSET
            elif key == Key.UP:
                self.row_offset -= 1
            elif key == Key.DOWN:
                self.row_offset += 1
            elif key == Key.LEFT:
                self.column_offset -= 1
            elif key == Key.RIGHT:
                self.column_offset += 1

        return self.wrap_input_handler(handle)

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        x, y, width, height = self.inner_rect()
        screen_width, screen_height = screen.size()

        # Pick the applicable entry for each primitive.
        items: dict[Optional[Primitive], _GridItem] = {}
        for entry in self._items:
            entry.visible = False
            if (
                entry.width <= 0
                or entry.height <= 0
                or width < entry.min_grid_width
                or height < entry.min_grid_height
            ):
                continue
            previous = items.get(entry.item)
            if (
                previous is not None
                and entry.min_grid_width < previous.min_grid_width
                and entry.min_grid_height < previous.min_grid_height
            ):
                continue
            items[entry.item] = entry

        rows = max([len(self.rows)] + [e.row + e.height for e in items.values()])
        columns = max([len(self.columns)] + [e.column + e.width for e in items.values()])
        if rows == 0 or columns == 0:
            return

        if self.borders:
            row_spacing, column_spacing = rows + 1, columns + 1
        else:
            row_spacing = (rows - 1) * self.gap_rows
            column_spacing = (columns - 1) * self.gap_columns
        row_height = _track_sizes(self.rows, rows, height, row_spacing, self.min_height)
        column_width = _track_sizes(
            self.columns, columns, width, column_spacing, self.min_width
        )

        start = 1 if self.borders else 0
        row_gap = 1 if self.borders else self.gap_rows
        column_gap = 1 if self.borders else self.gap_columns
        row_pos = _track_positions(row_height, start, row_gap)
        column_pos = _track_positions(column_width, start, column_gap)

        focused: Optional[_GridItem] = None
        for primitive, entry in items.items():
            pw = sum(column_width[entry.column:entry.column + entry.width])
            ph = sum(row_height[entry.row:entry.row + entry.height])
            pw += (entry.width - 1) * column_gap
            ph += (entry.height - 1) * row_gap
            entry.x, entry.y = column_pos[entry.column], row_pos[entry.row]
            entry.w, entry.h = pw, ph
            entry.visible = True
            if primitive is not None and primitive.focusable().has_focus():
                focused = entry

        offset_y = sum(h + row_gap for h in row_height[:max(self.row_offset, 0)])
        offset_x = sum(w + column_gap for w in column_width[:max(self.column_offset, 0)])

        # Line up the last row/column with the end of the available area.
        border = 1 if self.borders else 0
        if row_pos[-1] + row_height[-1] + border - offset_y < height:
            offset_y = row_pos[-1] - height + row_height[-1] + border
        if column_pos[-1] + column_width[-1] + border - offset_x < width:
            offset_x = column_pos[-1] - width + column_width[-1] + border

        # Keep the focused item visible.
        if focused is not None:
            if focused.y + focused.h - offset_y >= height:
                offset_y = focused.y - height + focused.h
            if focused.y - offset_y < 0:
                offset_y = focused.y
            if focused.x + focused.w - offset_x >= width:
                offset_x = focused.x - width + focused.w
            if focused.x - offset_x < 0:
                offset_x = focused.x

        first, last = _offset_bounds(row_pos, offset_y, height)
        self.row_offset = min(max(self.row_offset, first), last)
        first, last = _offset_bounds(column_pos, offset_x, width)
        self.column_offset = min(max(self.column_offset, first), last)

        deferred: Optional[Primitive] = None
        for primitive, entry in items.items():
            if not entry.visible:
                continue
            entry.x -= offset_x
            entry.y -= offset_y
            if (
                entry.x >= width
                or entry.x + entry.w <= 0
                or entry.y >= height
                or entry.y + entry.h <= 0
            ):
                entry.visible = False
                continue
            if entry.x + entry.w > width:
                entry.w = width - entry.x
            if entry.y + entry.h > height:
                entry.h = height - entry.y
            if entry.x < 0:
                entry.w += entry.x
                entry.x = 0
            if entry.y < 0:
                entry.h += entry.y
                entry.y = 0
            if entry.w <= 0 or entry.h <= 0:
                entry.visible = False
                continue
            entry.x += x
            entry.y += y

            if primitive is not None:
                primitive.set_rect(entry.x, entry.y, entry.w, entry.h)
                if entry is focused:
                    deferred = primitive
                else:
                    primitive.draw(screen)

            if self.borders:
                self._draw_item_border(screen, entry, screen_width, screen_height)

        if deferred is not None:
            deferred.draw(screen)

    def _draw_item_border(
        self, screen: Screen, entry: _GridItem, screen_width: int, screen_height: int
    ) -> None:
        def on_screen(bx: int, by: int) -> bool:
            return 0 <= bx < screen_width and 0 <= by < screen_height

        color = self.borders_color
        for bx in range(entry.x, entry.x + entry.w):
            for by in (entry.y - 1, entry.y + entry.h):
                if on_screen(bx, by):
                    print_joined_semigraphics(screen, bx, by, BORDERS.horizontal, color)
        for by in range(entry.y, entry.y + entry.h):
            for bx in (entry.x - 1, entry.x + entry.w):
                if on_screen(bx, by):
                    print_joined_semigraphics(screen, bx, by, BORDERS.vertical, color)
        corners = (
            (entry.x - 1, entry.y - 1, BORDERS.top_left),
            (entry.x + entry.w, entry.y - 1, BORDERS.top_right),
            (entry.x - 1, entry.y + entry.h, BORDERS.bottom_left),
            (entry.x + entry.w, entry.y + entry.h, BORDERS.bottom_right),
        )
        for bx, by, ch in corners:
            if on_screen(bx, by):
                print_joined_semigraphics(screen, bx, by, ch, color)