from cellview.checkbox import Checkbox
from cellview.screen import Color, Key, KeyEvent, Screen


def _press(checkbox, event):
    checkbox.input_handler()(event, lambda p: None)


def test_enter_toggles_and_reports_state():
    checkbox = Checkbox()
    states = []
    checkbox.on_changed = states.append
    _press(checkbox, KeyEvent(Key.ENTER))
    _press(checkbox, KeyEvent(Key.ENTER))
    assert states == [True, False]
    assert checkbox.checked is False


def test_space_toggles_other_runes_do_not():
    checkbox = Checkbox()
    _press(checkbox, KeyEvent(Key.RUNE, "a"))
    assert checkbox.checked is False
    _press(checkbox, KeyEvent(Key.RUNE, " "))
    assert checkbox.checked is True


def test_leaving_keys_call_done_and_finished():
    checkbox = Checkbox()
    done, finished = [], []
    checkbox.on_done = done.append
    result = checkbox.set_finished_func(finished.append)
    assert result is checkbox
    for key in (Key.TAB, Key.BACKTAB, Key.ESCAPE):
        _press(checkbox, KeyEvent(key))
    assert done == [Key.TAB, Key.BACKTAB, Key.ESCAPE]
    assert finished == done
    assert checkbox.checked is False


def test_input_capture_can_swallow_events():
    checkbox = Checkbox()
    checkbox.input_capture = lambda event: None
    _press(checkbox, KeyEvent(Key.ENTER))
    assert checkbox.checked is False


def test_field_width_is_one():
    assert Checkbox().field_width() == 1


def test_set_form_attributes():
    checkbox = Checkbox()
    result = checkbox.set_form_attributes(
        7, Color.RED, Color.GREEN, Color.BLACK, Color.WHITE
    )
    assert result is checkbox
    assert checkbox.label_width == 7
    assert checkbox.label_color == Color.RED
    assert checkbox.background_color == Color.GREEN
    assert checkbox.field_text_color == Color.BLACK
    assert checkbox.field_background_color == Color.WHITE


def test_draw_places_mark_after_label():
    screen = Screen(20, 3)
    checkbox = Checkbox()
    checkbox.label = "Ok"
    checkbox.checked = True
    checkbox.set_rect(0, 0, 20, 1)
    checkbox.draw(screen)
    assert screen.row_text(0).startswith("OkX")
    mark, style = screen.get_content(len("Ok"), 0)
    assert mark == "X"
    assert style.background == checkbox.field_background_color
    assert style.foreground == checkbox.field_text_color


def test_draw_with_fixed_label_width_and_focus():
    screen = Screen(20, 3)
    checkbox = Checkbox()
    checkbox.label = "Ok"
    checkbox.label_width = 6
    checkbox.set_rect(0, 0, 20, 1)
    checkbox.focus(lambda p: None)
    checkbox.draw(screen)
    mark, style = screen.get_content(6, 0)
    assert mark == " "
    assert style.background == checkbox.field_text_color
    assert style.foreground == checkbox.field_background_color