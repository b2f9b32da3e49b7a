import pytest

from tuikit.borders import BORDERS, HORIZONTAL_ELLIPSIS
from tuikit.box import Box
from tuikit.events import Key, KeyEvent, MouseAction, MouseEvent
from tuikit.screen import Align, AttrMask, Screen, Style


def _focus_recorder():
    focused = []
    return focused, focused.append


def test_default_rect_and_inner_rect():
    box = Box()
    assert box.rect == (0, 0, 15, 10)
    assert box.inner_rect() == box.rect


def test_inner_rect_with_border_and_padding():
    box = Box()
    box.border = True
    box.set_rect(3, 4, 20, 10)
    box.set_border_padding(1, 2, 3, 4)
    x, y, width, height = box.inner_rect()
    assert (x, y) == (3 + 1 + 3, 4 + 1 + 1)
    assert (width, height) == (20 - 2 - 3 - 4, 10 - 2 - 1 - 2)


def test_inner_rect_never_negative():
    box = Box()
    box.border = True
    box.set_rect(0, 0, 1, 1)
    box.set_border_padding(2, 2, 2, 2)
    _, _, width, height = box.inner_rect()
    assert width == 0 and height == 0


def test_in_rect_boundaries():
    box = Box()
    box.set_rect(2, 3, 4, 5)
    assert box.in_rect(2, 3)
    assert box.in_rect(5, 7)
    assert not box.in_rect(6, 3)
    assert not box.in_rect(2, 8)
    assert not box.in_rect(1, 3)


def test_in_inner_rect_excludes_border():
    box = Box()
    box.border = True
    box.set_rect(0, 0, 5, 5)
    assert not box.in_inner_rect(0, 0)
    assert box.in_inner_rect(1, 1)


def test_input_capture_can_swallow_and_replace():
    box = Box()
    received = []
    handler = box.wrap_input_handler(lambda event, set_focus: received.append(event))
    box.input_capture = lambda event: None
    handler(KeyEvent(Key.ENTER), lambda p: None)
    assert received == []
    replacement = KeyEvent(Key.TAB)
    box.input_capture = lambda event: replacement
    handler(KeyEvent(Key.ENTER), lambda p: None)
    assert received == [replacement]


def test_paste_handler_forwards_text():
    box = Box()
    received = []
    handler = box.wrap_paste_handler(lambda text, set_focus: received.append(text))
    handler("pasted", lambda p: None)
    assert received == ["pasted"]


def test_default_mouse_handler_takes_focus():
    box = Box()
    box.set_rect(0, 0, 5, 5)
    focused, set_focus = _focus_recorder()
    consumed, capture = box.mouse_handler()(MouseAction.LEFT_DOWN, MouseEvent(1, 1), set_focus)
    assert consumed is True and capture is None
    assert focused == [box]


def test_default_mouse_handler_ignores_outside_and_other_actions():
    box = Box()
    box.set_rect(0, 0, 5, 5)
    focused, set_focus = _focus_recorder()
    assert box.mouse_handler()(MouseAction.LEFT_DOWN, MouseEvent(9, 9), set_focus) == (False, None)
    assert box.mouse_handler()(MouseAction.MOVE, MouseEvent(1, 1), set_focus) == (False, None)
    assert focused == []


def test_mouse_capture_consumed():
    box = Box()
    box.mouse_capture = lambda action, event: (MouseAction.CONSUMED, None)
    handler = box.mouse_handler()
    assert handler(MouseAction.LEFT_DOWN, MouseEvent(0, 0), lambda p: None) == (True, None)
    box.mouse_capture = lambda action, event: (MouseAction.MOVE, None)
    assert handler(MouseAction.LEFT_DOWN, MouseEvent(0, 0), lambda p: None) == (False, None)


def test_background_color_updates_border_style():
    box = Box().set_background_color("red")
    assert box.background_color == "red"
    assert box.border_style.background == "red"


def test_border_color_and_attributes():
    box = Box().set_border_color("green").set_border_attributes(AttrMask.BOLD)
    assert box.border_color == "green"
    assert box.border_attributes == AttrMask.BOLD


def test_focus_and_blur_callbacks():
    box = Box()
    calls = []
    box.focus_func = lambda: calls.append("focus")
    box.blur_func = lambda: calls.append("blur")
    box.focus(lambda p: None)
    assert box.has_focus() is True
    box.blur()
    assert box.has_focus() is False
    assert calls == ["focus", "blur"]


def test_draw_fills_background():
    screen = Screen(10, 5)
    box = Box().set_background_color("red")
    box.set_rect(1, 1, 3, 2)
    box.draw(screen)
    assert screen.get_content(1, 1)[1].background == "red"
    assert screen.get_content(0, 0) == (" ", Style())


def test_draw_without_clear_keeps_content():
    screen = Screen(10, 5)
    screen.set_content(1, 1, "z", Style())
    box = Box()
    box.dont_clear = True
    box.set_rect(0, 0, 5, 5)
    box.draw(screen)
    assert screen.get_content(1, 1)[0] == "z"


def test_draw_border_characters():
    screen = Screen(10, 5)
    box = Box()
    box.border = True
    box.set_rect(0, 0, 4, 3)
    box.draw(screen)
    assert screen.get_content(0, 0)[0] == BORDERS.top_left
    assert screen.get_content(3, 2)[0] == BORDERS.bottom_right
    assert screen.get_content(1, 0)[0] == BORDERS.horizontal
    assert screen.get_content(0, 1)[0] == BORDERS.vertical


def test_draw_border_when_focused():
    screen = Screen(10, 5)
    box = Box()
    box.border = True
    box.set_rect(0, 0, 4, 3)
    box.focus(lambda p: None)
    box.draw(screen)
    assert screen.get_content(0, 0)[0] == BORDERS.top_left_focus
    assert screen.get_content(1, 0)[0] == BORDERS.horizontal_focus


def test_draw_title():
    screen = Screen(20, 3)
    box = Box()
    box.border = True
    box.title = "Hi"
    box.title_align = Align.LEFT
    box.set_rect(0, 0, 20, 3)
    box.draw(screen)
    assert screen.row_text(0)[1:1 + len("Hi")] == "Hi"


def test_long_title_gets_ellipsis():
    screen = Screen(20, 3)
    box = Box()
    box.border = True
    box.title = "A very long title"
    box.title_align = Align.LEFT
    box.set_rect(0, 0, 8, 3)
    box.draw(screen)
    assert screen.get_content(8 - 2, 0)[0] == HORIZONTAL_ELLIPSIS


def test_draw_func_sets_inner_rect():
    screen = Screen(10, 5)
    box = Box()
    box.set_rect(0, 0, 6, 4)
    seen = []

    def custom(scr, x, y, width, height):
        seen.append((x, y, width, height))
        return (x + 1, y + 1, width - 2, height - 2)

    box.draw_func = custom
    box.draw(screen)
    assert seen == [box.rect]
    assert box.inner_rect() == (1, 1, 6 - 2, 4 - 2)


def test_zero_size_draws_nothing():
    screen = Screen(5, 5)
    box = Box().set_background_color("red")
    box.set_rect(0, 0, 0, 3)
    box.draw(screen)
    assert screen.get_content(0, 0) == (" ", Style())


@pytest.mark.parametrize("action", [MouseAction.LEFT_UP, MouseAction.RIGHT_DOWN])
def test_mouse_handler_only_left_down_focuses(action):
    box = Box()
    focused, set_focus = _focus_recorder()
    assert box.mouse_handler()(action, MouseEvent(0, 0), set_focus) == (False, None)
    assert focused == []