import pytest

from cellview.box import Box
from cellview.grid import Grid
from cellview.screen import BORDERS, Key, KeyEvent, Screen


def _column_grid(columns, extra=()):
    grid = Grid().set_columns(*columns)
    grid.set_rect(0, 0, 100, 10)
    boxes = []
    for index in range(len(columns)):
        box = Box()
        grid.add_item(box, 0, index, 1, 1, 0, 0, False)
        boxes.append(box)
    for column, span in extra:
        box = Box()
        grid.add_item(box, 0, column, 1, span, 0, 0, False)
        boxes.append(box)
    return grid, boxes


def test_documented_column_widths():
    grid, boxes = _column_grid([30, 10, -1, -1, -2])
    grid.draw(Screen(100, 10))
    assert [b.rect[2] for b in boxes] == [30, 10, 15, 15, 30]


def test_columns_are_contiguous_and_fill_width():
    grid, boxes = _column_grid([30, 10, -1, -1, -2])
    grid.draw(Screen(100, 10))
    rects = [b.rect for b in boxes]
    for left, right in zip(rects, rects[1:]):
        assert right[0] == left[0] + left[2]
    assert sum(r[2] for r in rects) == 100
    assert all(r[3] == 10 for r in rects)


def test_items_beyond_defined_columns():
    grid, boxes = _column_grid([30, 10, -1, -1, -2], extra=[(5, 2)])
    grid.draw(Screen(100, 10))
    widths = [b.rect[2] for b in boxes[:5]]
    assert widths[:2] == [30, 10]
    assert widths[2] == widths[3]
    assert widths[4] == 2 * widths[2]
    spanning = boxes[5].rect
    assert spanning[0] + spanning[2] == 100
    assert spanning[0] == boxes[4].rect[0] + boxes[4].rect[2]


def test_gap_between_columns():
    grid, boxes = _column_grid([-1, -1, -1])
    grid.set_gap(0, 1)
    grid.draw(Screen(100, 10))
    rects = [b.rect for b in boxes]
    for left, right in zip(rects, rects[1:]):
        assert right[0] == left[0] + left[2] + 1


def test_negative_min_size_raises():
    with pytest.raises(ValueError):
        Grid().set_min_size(-1, 0)


def test_negative_gap_raises():
    with pytest.raises(ValueError):
        Grid().set_gap(0, -1)


def test_set_size_repeats_sizes():
    grid = Grid().set_size(2, 3, 4, 5)
    assert grid.rows == [4, 4]
    assert grid.columns == [5, 5, 5]


def test_offset_round_trip():
    grid = Grid().set_offset(3, 4)
    assert grid.offset() == (3, 4)


def test_input_handler_moves_offset():
    grid = Grid()
    handler = grid.input_handler()
    handler(KeyEvent(Key.RUNE, "j"), lambda p: None)
    handler(KeyEvent(Key.DOWN), lambda p: None)
    handler(KeyEvent(Key.RUNE, "l"), lambda p: None)
    assert grid.offset() == (2, 1)
    handler(KeyEvent(Key.RUNE, "k"), lambda p: None)
    handler(KeyEvent(Key.LEFT), lambda p: None)
    assert grid.offset() == (1, 0)
    handler(KeyEvent(Key.RUNE, "g"), lambda p: None)
    assert grid.offset() == (0, 0)
    handler(KeyEvent(Key.END), lambda p: None)
    assert grid.offset()[0] == 2**31 - 1


def _tall_grid():
    grid = Grid().set_size(10, 1, 3, 0)
    grid.set_rect(0, 0, 20, 9)
    boxes = []
    for row in range(10):
        box = Box()
        grid.add_item(box, row, 0, 1, 1, 0, 0, False)
        boxes.append(box)
    return grid, boxes


def test_scrolled_row_starts_at_top():
    grid, boxes = _tall_grid()
    grid.set_offset(2, 0)
    grid.draw(Screen(20, 9))
    assert grid.offset() == (2, 0)
    assert boxes[2].rect[1] == 0
    assert boxes[3].rect[1] == boxes[2].rect[1] + 3


def test_negative_offset_is_clamped():
    grid, _ = _tall_grid()
    grid.set_offset(-5, -5)
    grid.draw(Screen(20, 9))
    assert grid.offset() == (0, 0)


def test_end_aligns_last_row_with_bottom():
    grid, boxes = _tall_grid()
    grid.input_handler()(KeyEvent(Key.END), lambda p: None)
    grid.draw(Screen(20, 9))
    x, y, width, height = boxes[-1].rect
    assert y + height == 9
    assert grid.offset()[0] < 2**31 - 1


def test_zero_span_item_not_drawn():
    grid = Grid()
    grid.set_rect(0, 0, 20, 10)
    hidden = Box()
    shown = Box()
    grid.add_item(hidden, 0, 0, 0, 0, 0, 0, False)
    grid.add_item(shown, 0, 0, 1, 1, 0, 0, False)
    before = hidden.rect
    grid.draw(Screen(20, 10))
    assert hidden.rect == before
    assert shown.rect == (0, 0, 20, 10)


def test_min_grid_width_selects_layout():
    grid = Grid()
    grid.set_rect(0, 0, 50, 10)
    main = Box()
    grid.add_item(main, 0, 0, 1, 2, 0, 0, False)
    grid.add_item(main, 0, 1, 1, 1, 0, 100, False)
    grid.draw(Screen(50, 10))
    assert main.rect == (0, 0, 50, 10)


def test_remove_and_clear():
    grid = Grid()
    grid.set_rect(0, 0, 20, 10)
    box = Box()
    grid.add_item(box, 0, 0, 1, 1, 0, 0, True)
    grid.remove_item(box)
    delegated = []
    grid.focus(delegated.append)
    assert delegated == []
    assert grid.has_focus() is True
    grid.blur()
    assert grid.has_focus() is False
    grid.add_item(box, 0, 0, 1, 1, 0, 0, True).clear()
    grid.focus(delegated.append)
    assert delegated == []


def test_focus_delegates_to_item_and_reports_when_visible():
    grid = Grid()
    grid.set_rect(0, 0, 20, 10)
    box = Box()
    grid.add_item(box, 0, 0, 1, 1, 0, 0, True)
    delegated = []
    grid.focus(delegated.append)
    assert delegated == [box]
    box.focus(lambda p: None)
    assert grid.has_focus() is False
    grid.draw(Screen(20, 10))
    assert grid.has_focus() is True


def test_borders_join_between_items():
    grid = Grid().set_columns(-1, -1)
    grid.borders = True
    grid.set_rect(0, 0, 11, 5)
    left, right = Box(), Box()
    grid.add_item(left, 0, 0, 1, 1, 0, 0, False)
    grid.add_item(right, 0, 1, 1, 1, 0, 0, False)
    screen = Screen(11, 5)
    grid.draw(screen)
    assert screen.get_content(0, 0)[0] == BORDERS.top_left
    assert screen.get_content(10, 4)[0] == BORDERS.bottom_right
    between = left.rect[0] + left.rect[2]
    assert right.rect[0] == between + 1
    assert screen.get_content(between, 0)[0] == BORDERS.top_t
    assert screen.get_content(between, 4)[0] == BORDERS.bottom_t
    assert screen.get_content(between, 2)[0] == BORDERS.vertical