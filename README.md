# cellview

Widgets and layout containers for terminal user interfaces. Everything is
drawn onto a screen made of character cells. Each cell holds a character and
a `Style`: a foreground `Color`, a background `Color` and `Attr` flags.

## What is included

- `cellview.screen`
  - `Screen`: an in-memory grid of cells with an event queue.
  - `Color`, `Attr`, `Style`, `Align`: colours, text attributes and styles.
  - `Key`, `KeyEvent` and `ResizeEvent`: keys and events.
  - `BorderSet`: the characters used to draw borders.
  - `Primitive` and `Focusable`: the interfaces that widgets implement.
  - `string_width` and `tagged_string_width`: measure text in screen cells.
  - `print_text`: prints colour-tagged text within a given width.
  - `print_joined_semigraphics`: draws line characters that merge with
    lines already on the screen.
- `cellview.box.Box`: the base widget. It can have a background, a border,
  a title, padding, an input capture function and a custom draw function.
- `cellview.button.Button`: a one-line button. It calls `on_selected` when
  Enter is pressed and `on_blur` when Tab, Backtab or Escape is pressed.
- `cellview.checkbox.Checkbox`: a labelled checkbox. Space or Enter toggles
  it and calls `on_changed`. Tab, Backtab and Escape call `on_done`.
- `cellview.frame.Frame`: wraps another primitive and adds header and
  footer text lines.
- `cellview.grid.Grid`: places primitives in rows and columns. It supports
  gaps, borders, minimum sizes, layouts that depend on the grid's size, and
  scrolling with the arrow keys or `g`, `G`, `j`, `k`, `h`, `l`.
- `cellview.ansi`: `translate_ansi` and `AnsiWriter` turn ANSI escape
  sequences into colour tags.

## Colour tags

Most displayed strings may contain tags of the form
`[foreground:background:flags]`, for example `[red]`, `[yellow:blue:b]` or
`[-:-:-]`. The flags are `b` (bold), `d` (dim), `l` (blink), `r` (reverse)
and `u` (underline). A `-` resets a field. An escaped tag such as `[red[]`
is printed as `[red]`.

## Drawing a box

```python
from cellview.box import Box
from cellview.screen import Screen

screen = Screen(20, 5)
box = Box()
box.border = True
box.title = "Hi"
box.set_rect(0, 0, 10, 3)
box.draw(screen)
print(screen.row_text(0).rstrip())   # ┌───Hi───┐
```

`Screen.get_content(x, y)` returns the character and `Style` of one cell.

## Handling keys

```python
from cellview.button import Button
from cellview.screen import Key, KeyEvent

button = Button("OK")
button.on_selected = lambda: print("pressed")
handler = button.input_handler()
handler(KeyEvent(Key.ENTER), lambda primitive: None)   # prints "pressed"
```

## Grids

```python
from cellview.box import Box
from cellview.grid import Grid
from cellview.screen import Screen

grid = Grid()
grid.set_rows(3, 0, 3)
grid.set_columns(30, 0, 30)
grid.borders = True
grid.add_item(Box(), 0, 0, 1, 3, 0, 0, False)    # header
grid.add_item(Box(), 1, 0, 1, 3, 0, 0, False)    # main area
grid.add_item(Box(), 2, 0, 1, 3, 0, 0, False)    # footer
grid.set_rect(0, 0, 100, 30)
grid.draw(Screen(100, 30))
```

- Positive sizes are absolute.
- Zero and negative sizes share the remaining space in proportion, and 0
  counts as -1.
- If the same primitive is added more than once, the entry with the
  highest minimum grid size that still fits is the one used.
- `set_min_size` and `set_gap` raise `ValueError` for negative values.

## Frames

```python
from cellview.box import Box
from cellview.frame import Frame
from cellview.screen import Align, Color

frame = Frame(Box())
frame.set_borders(2, 2, 2, 2, 4, 4)
frame.add_text("Header", True, Align.CENTER, Color.WHITE)
frame.add_text("Footer", False, Align.CENTER, Color.GREEN)
```

## Converting ANSI output

```python
from cellview.ansi import translate_ansi

translate_ansi("\x1b[31mred\x1b[0m plain")
# '[red:]red[-:-:-] plain'
```

`AnsiWriter(target)` does the same for a stream of text. It translates
whatever is passed to its `write` method and writes the result to `target`.
The parser state carries over from one write to the next.

## What the package does not do

- There is no event loop or application object. Nothing reads keys from a
  terminal or draws to one. `Screen` only holds cells in memory, so the
  calling code must draw primitives onto it and pass key events to their
  input handlers.
- There is no row/column flex layout and no form container. `Checkbox`
  provides `set_form_attributes`, `field_width` and `set_finished_func`
  for use by such a container, but the package does not include one.