import dataclasses
import unicodedata

from tuikit.borders import BORDERS, BorderSet, Frame


def test_unfocused_frame_uses_light_lines():
    frame = BorderSet().for_focus(False)
    assert unicodedata.name(frame.horizontal) == "BOX DRAWINGS LIGHT HORIZONTAL"
    assert unicodedata.name(frame.top_left) == "BOX DRAWINGS LIGHT DOWN AND RIGHT"
    assert unicodedata.name(frame.bottom_right) == "BOX DRAWINGS LIGHT UP AND LEFT"


def test_focused_frame_uses_double_lines():
    frame = BorderSet().for_focus(True)
    assert unicodedata.name(frame.vertical) == "BOX DRAWINGS DOUBLE VERTICAL"
    assert unicodedata.name(frame.top_right) == "BOX DRAWINGS DOUBLE DOWN AND LEFT"
    assert unicodedata.name(frame.bottom_left) == "BOX DRAWINGS DOUBLE UP AND RIGHT"


def test_frames_reflect_fields_in_order():
    borders = BorderSet()
    assert borders.for_focus(False) == Frame(
        borders.horizontal,
        borders.vertical,
        borders.top_left,
        borders.top_right,
        borders.bottom_left,
        borders.bottom_right,
    )
    assert borders.for_focus(True) == Frame(
        borders.horizontal_focus,
        borders.vertical_focus,
        borders.top_left_focus,
        borders.top_right_focus,
        borders.bottom_left_focus,
        borders.bottom_right_focus,
    )


def test_customised_set_is_used():
    ascii_borders = BorderSet(
        horizontal="-", vertical="|", top_left="+", horizontal_focus="="
    )
    frame = ascii_borders.for_focus(False)
    assert frame.horizontal == "-"
    assert frame.vertical == "|"
    assert frame.top_left == "+"
    assert frame.top_right == BorderSet().top_right
    assert ascii_borders.for_focus(True).horizontal == "="
    assert BORDERS.for_focus(False).horizontal == BorderSet().for_focus(False).horizontal
    assert BORDERS.for_focus(False).horizontal != "-"


def test_default_characters_are_distinct_single_chars():
    values = list(dataclasses.asdict(BorderSet()).values())
    assert all(len(value) == 1 for value in values)
    assert len(set(values)) == len(values)


def test_focused_and_unfocused_frames_differ_everywhere():
    borders = BorderSet()
    for plain, focused in zip(borders.for_focus(False), borders.for_focus(True)):
        assert plain != focused