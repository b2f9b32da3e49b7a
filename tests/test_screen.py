import pytest

from tuikit.events import Key, KeyEvent
from tuikit.screen import (
    Align,
    AttrMask,
    Screen,
    Style,
    print_text,
    string_width,
)


def test_style_copies_leave_original_untouched():
    base = Style()
    red = base.with_foreground("red")
    assert red.foreground == "red"
    assert base.foreground is None
    both = red.with_background("blue")
    assert (both.foreground, both.background) == ("red", "blue")


def test_style_attributes_combine():
    style = Style().with_attributes(AttrMask.BOLD | AttrMask.UNDERLINE)
    assert style.attributes == AttrMask.BOLD | AttrMask.UNDERLINE
    assert style.attributes & AttrMask.ITALIC == AttrMask(0)
    assert Style().with_attributes(AttrMask.ITALIC).attributes == AttrMask.ITALIC


def test_screen_size_and_negative_dimensions():
    assert Screen(12, 4).size() == (12, 4)
    with pytest.raises(ValueError):
        Screen(-1, 4)


def test_set_and_get_content_round_trip():
    screen = Screen(10, 3)
    style = Style(foreground="red")
    screen.set_content(2, 1, "x", style)
    assert screen.get_content(2, 1) == ("x", style)


def test_content_off_screen_is_ignored():
    screen = Screen(10, 3)
    screen.set_content(10, 0, "x", Style())
    screen.set_content(-1, 0, "x", Style())
    assert screen.row_text(0) == " " * 10
    assert screen.get_content(50, 50) == (" ", Style())


def test_clear_blanks_cells():
    screen = Screen(10, 3)
    screen.set_content(0, 0, "a", Style(foreground="red"))
    screen.clear()
    assert screen.get_content(0, 0) == (" ", Style())


def test_row_text_out_of_range():
    with pytest.raises(IndexError):
        Screen(10, 3).row_text(3)


def test_events_are_polled_in_order():
    screen = Screen()
    screen.init()
    first = KeyEvent(Key.ENTER)
    second = KeyEvent(Key.RUNE, "a")
    screen.post_event(first)
    screen.post_event(second)
    assert screen.poll_event(timeout=1) == first
    assert screen.poll_event(timeout=1) == second


def test_poll_times_out_with_none():
    screen = Screen()
    screen.init()
    assert screen.poll_event(timeout=0.01) is None


def test_fini_releases_poll():
    screen = Screen()
    screen.init()
    screen.fini()
    assert screen.initialized is False
    assert screen.poll_event(timeout=1) is None


def test_mouse_paste_and_cursor_flags():
    screen = Screen()
    screen.enable_mouse()
    screen.enable_paste()
    screen.hide_cursor()
    assert (screen.mouse_enabled, screen.paste_enabled, screen.cursor_visible) == (True, True, False)
    screen.disable_mouse()
    screen.disable_paste()
    assert (screen.mouse_enabled, screen.paste_enabled) == (False, False)


def test_suspend_and_resume():
    screen = Screen()
    with pytest.raises(RuntimeError):
        screen.suspend()
    screen.init()
    screen.suspend()
    assert screen.suspended is True
    with pytest.raises(RuntimeError):
        screen.suspend()
    screen.resume()
    assert screen.suspended is False
    with pytest.raises(RuntimeError):
        screen.resume()


def test_show_and_sync_count():
    screen = Screen()
    screen.show()
    screen.sync()
    assert screen.show_count == 2


def test_string_width():
    assert string_width("abc") == len("abc")
    assert string_width("世") == 2
    assert string_width("ab世") == string_width("ab") + string_width("世")


def test_print_left():
    screen = Screen(10, 1)
    text = "hello"
    assert print_text(screen, text, 0, 0, 10, Align.LEFT, Style()) == (len(text), len(text))
    assert screen.row_text(0).startswith(text)


def test_print_truncates_on_right_when_left_aligned():
    screen = Screen(20, 1)
    printed, drawn = print_text(screen, "hello world", 0, 0, 5, Align.LEFT, Style())
    assert (printed, drawn) == (5, 5)
    assert screen.row_text(0).strip() == "hello world"[:5]


def test_print_right_aligned():
    screen = Screen(6, 1)
    print_text(screen, "ab", 0, 0, 6, Align.RIGHT, Style())
    row = screen.row_text(0)
    assert row.endswith("ab")
    assert row.index("ab") == 6 - len("ab")


def test_print_right_aligned_keeps_suffix():
    screen = Screen(10, 1)
    printed, _ = print_text(screen, "abcdef", 0, 0, 3, Align.RIGHT, Style())
    assert printed == 3
    assert screen.row_text(0).strip() == "abcdef"[-3:]


def test_print_centered_is_balanced():
    screen = Screen(8, 1)
    print_text(screen, "ab", 0, 0, 8, Align.CENTER, Style())
    row = screen.row_text(0)
    assert row.strip() == "ab"
    assert len(row) - len(row.lstrip()) == len(row) - len(row.rstrip())


def test_print_nothing_without_width():
    screen = Screen(5, 1)
    assert print_text(screen, "abc", 0, 0, 0, Align.LEFT, Style()) == (0, 0)
    assert screen.row_text(0) == " " * 5


def test_print_applies_style():
    screen = Screen(5, 1)
    style = Style(foreground="yellow", background="blue")
    print_text(screen, "a", 1, 0, 3, Align.LEFT, style)
    assert screen.get_content(1, 0) == ("a", style)


def test_print_wide_characters():
    screen = Screen(10, 1)
    assert print_text(screen, "世界", 0, 0, 10, Align.LEFT, Style()) == (2, string_width("世界"))
    assert screen.row_text(0).startswith("世界")
    other = Screen(10, 1)
    printed, drawn = print_text(other, "世界", 0, 0, 3, Align.LEFT, Style())
    assert printed == 1
    assert drawn == string_width("世")