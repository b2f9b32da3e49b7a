# tuikit

Building blocks for terminal user interfaces. Primitives draw themselves into
an in-memory character screen. A flex container lays them out. Buttons and
checkboxes react to key and mouse events. An application object runs the
event loop, routes input and redraws the root primitive.

## Installation

```
pip install tuikit
```

To run the test suite, install the test extra and run pytest:

```
pip install "tuikit[test]"
pytest
```

## Modules

- `tuikit.screen`
  - `Screen(width, height)` is a grid of `(char, Style)` cells with a thread-safe
    event queue. It has `set_content`, `get_content`, `clear`, `show`, `sync`,
    `post_event` and `poll_event`, and mode switches for mouse, paste, cursor
    and suspend/resume. `row_text(y)` returns one row as a string.
  - `Style` is an immutable foreground/background/attributes triple, with
    `with_foreground`, `with_background` and `with_attributes`.
  - `AttrMask` holds the text attributes and `Align` the text alignments.
  - `string_width(text)` counts screen cells using `wcwidth`.
  - `print_text(screen, text, x, y, width, align, style)` writes plain text
    into at most `width` cells. It cuts text that does not fit according to the
    alignment, and returns the number of characters printed and the width they
    cover.
  - `STYLES` holds the default colours that new primitives take. You may change
    it.
- `tuikit.box` has `Box`, the base primitive. It has a rectangle (`set_rect`,
  `rect`, `inner_rect`), an optional border, a title with alignment, padding
  and a background colour. It tracks focus with `focus`, `blur`, `has_focus`
  and the optional `focus_func` and `blur_func`. It provides input, paste and
  mouse handlers that pass events through the `input_capture` and
  `mouse_capture` functions first. A `draw_func` can take over the inner
  rectangle.
- `tuikit.flex` has `Flex`, which places items side by side (`FLEX_COLUMN`,
  the default) or stacked (`FLEX_ROW`). Each item has a fixed size or a
  proportion of the remaining space. `Flex` supports `len()` and indexing. It
  sends key and paste events to the focused item and mouse events to the first
  item that consumes them.
- `tuikit.button` has `Button(label)`. It calls `selected_func` on Enter or on
  a left click. It reports Tab, Backtab and Escape to `exit_func`.
- `tuikit.checkbox` has `Checkbox(label)`. Space, Enter or a left click on its
  row toggles it, and the change goes to `changed_func`. Tab, Backtab and
  Escape go to `done_func` and `finished_func`. `set_form_attributes` and
  `set_disabled` support use inside a form.
- `tuikit.application` has `Application(screen=None)`. `run()` blocks until
  `stop()` is called, Ctrl-C is pressed, or an `ErrorEvent` arrives; in the
  last case `run()` raises the carried error. Other threads should use
  `queue_update`, `queue_update_draw`, `draw` or `queue_event`. From inside the
  loop, `queue_update` runs the function at once. `force_draw()` redraws
  immediately. `set_root`, `set_focus`, `enable_mouse`, `enable_paste`,
  `suspend` and `sync` do what their names say. The `before_draw`,
  `after_draw`, `input_capture` and `mouse_capture` attributes hook into
  drawing and input. The application turns raw mouse events into moves,
  presses, releases, clicks, double clicks and scrolls.
- `tuikit.events` has `KeyEvent`, `MouseEvent`, `PasteEvent`, `ResizeEvent`,
  `ErrorEvent` and the enums `Key`, `ButtonMask` and `MouseAction`.
- `tuikit.borders` has `BorderSet`. Its `for_focus(focused)` returns the six
  frame characters for a focused (double-line) or unfocused (single-line)
  frame. `BORDERS` is the set in use.
- `tuikit.ansi` has `AnsiWriter(stream)` and `translate_ansi(text)`. They turn
  ANSI colour and attribute sequences into `[fg:bg:flags]` style tags, turn
  `ESC c` into a reset tag, and drop all other escape sequences.

## Translating ANSI output

```python
from tuikit.ansi import translate_ansi

print(translate_ansi("\x1b[1;31mError\x1b[0m"))
# [red::b]Error[-:-:-]
```

## A small layout

```python
from tuikit.application import Application
from tuikit.box import Box
from tuikit.button import Button
from tuikit.events import Key, KeyEvent
from tuikit.flex import FLEX_COLUMN, Flex
from tuikit.screen import Screen

screen = Screen(80, 24)
app = Application(screen)

quit_button = Button("Quit")
quit_button.selected_func = lambda: print("selected")

flex = Flex(FLEX_COLUMN)
flex.add_item(Box(), 0, 1, False)
flex.add_item(quit_button, 10, 1, True)

app.set_root(flex, True)      # focus goes to the button
app.force_draw()
print(screen.row_text(0))

# Deliver a key press the way the event loop would.
flex.input_handler()(KeyEvent(Key.ENTER), app.set_focus)   # prints "selected"
```

## What the package does not do

- It does not drive a real terminal. `Screen` exists only in memory. Nothing
  is written to or read from a TTY, so events must be posted to the screen
  with `post_event` or sent with `Application.queue_event`.
- Style tags are not interpreted when drawing. `print_text` prints tag text
  as it is. `translate_ansi` produces tags, but nothing in the package renders
  them as colours.
- The only widgets are `Box`, `Flex`, `Button` and `Checkbox`. There are no
  text views, lists, tables, input fields, forms or pages.