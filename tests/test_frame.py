from cellview.box import Box
from cellview.frame import Frame
from cellview.screen import Align, Color, Screen


def _drawn(frame, width, height):
    frame.set_rect(0, 0, width, height)
    screen = Screen(width, height)
    frame.draw(screen)
    return screen


def test_zero_borders_give_primitive_whole_area():
    inner = Box()
    frame = Frame(inner).set_borders(0, 0, 0, 0, 0, 0)
    _drawn(frame, 20, 10)
    assert inner.rect == (0, 0, 20, 10)


def test_default_borders_shrink_primitive_symmetrically():
    inner = Box()
    frame = Frame(inner)
    _drawn(frame, 20, 10)
    x, y, width, height = inner.rect
    assert x == frame.left
    assert y == frame.top
    assert x + width == 20 - frame.right
    assert y + height == 10 - frame.bottom


def test_header_text_pushes_primitive_down():
    inner = Box()
    inner.background_color = Color.DEFAULT
    frame = Frame(inner).set_borders(0, 0, 0, 0, 0, 0)
    frame.add_text("Head", True, Align.LEFT, Color.WHITE)
    screen = _drawn(frame, 20, 10)
    assert screen.row_text(0).startswith("Head")
    assert inner.y == 1
    assert inner.y + inner.height == 10


def test_footer_text_pulls_primitive_up():
    inner = Box()
    inner.background_color = Color.DEFAULT
    frame = Frame(inner).set_borders(0, 0, 0, 0, 0, 0)
    frame.add_text("Foot", False, Align.RIGHT, Color.WHITE)
    screen = _drawn(frame, 20, 10)
    assert screen.row_text(9).endswith("Foot")
    assert inner.y == 0
    assert inner.y + inner.height == 9


def test_header_spacing_applies():
    inner = Box()
    frame = Frame(inner).set_borders(0, 0, 2, 0, 0, 0)
    frame.add_text("Head", True, Align.CENTER, Color.WHITE)
    _drawn(frame, 20, 10)
    assert inner.y == 1 + frame.header


def test_clear_removes_text():
    inner = Box()
    frame = Frame(inner).set_borders(0, 0, 0, 0, 0, 0)
    frame.add_text("Head", True, Align.LEFT, Color.WHITE)
    assert frame.clear() is frame
    _drawn(frame, 20, 10)
    assert inner.rect == (0, 0, 20, 10)


def test_no_space_leaves_primitive_untouched():
    inner = Box()
    before = inner.rect
    frame = Frame(inner)
    _drawn(frame, 2, 10)
    assert inner.rect == before


def test_focus_delegates_to_primitive():
    inner = Box()
    frame = Frame(inner)
    delegated = []
    frame.focus(delegated.append)
    assert delegated == [inner]


def test_has_focus_reflects_primitive():
    inner = Box()
    frame = Frame(inner)
    assert frame.has_focus() is False
    inner.focus(lambda p: None)
    assert frame.has_focus() is True