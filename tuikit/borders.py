"""Characters used to draw frames around primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

HORIZONTAL_ELLIPSIS = "\N{HORIZONTAL ELLIPSIS}"


class Frame(NamedTuple):
    """The six characters needed to draw one rectangular frame."""

    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


@dataclass
class BorderSet:
    """Border characters, with a separate set for focused primitives."""

    horizontal: str = "\N{BOX DRAWINGS LIGHT HORIZONTAL}"
    vertical: str = "\N{BOX DRAWINGS LIGHT VERTICAL}"
    top_left: str = "\N{BOX DRAWINGS LIGHT DOWN AND RIGHT}"
    top_right: str = "\N{BOX DRAWINGS LIGHT DOWN AND LEFT}"
    bottom_left: str = "\N{BOX DRAWINGS LIGHT UP AND RIGHT}"
    bottom_right: str = "\N{BOX DRAWINGS LIGHT UP AND LEFT}"

    left_t: str = "\N{BOX DRAWINGS LIGHT VERTICAL AND RIGHT}"
    right_t: str = "\N{BOX DRAWINGS LIGHT VERTICAL AND LEFT}"
    top_t: str = "\N{BOX DRAWINGS LIGHT DOWN AND HORIZONTAL}"
    bottom_t: str = "\N{BOX DRAWINGS LIGHT UP AND HORIZONTAL}"
    cross: str = "\N{BOX DRAWINGS LIGHT VERTICAL AND HORIZONTAL}"

    horizontal_focus: str = "\N{BOX DRAWINGS DOUBLE HORIZONTAL}"
    vertical_focus: str = "\N{BOX DRAWINGS DOUBLE VERTICAL}"
    top_left_focus: str = "\N{BOX DRAWINGS DOUBLE DOWN AND RIGHT}"
    top_right_focus: str = "\N{BOX DRAWINGS DOUBLE DOWN AND LEFT}"
    bottom_left_focus: str = "\N{BOX DRAWINGS DOUBLE UP AND RIGHT}"
    bottom_right_focus: str = "\N{BOX DRAWINGS DOUBLE UP AND LEFT}"

    def for_focus(self, focused: bool) -> Frame:
        """Return the frame characters for a focused or unfocused primitive."""
        if focused:
            return Frame(
                self.horizontal_focus,
                self.vertical_focus,
                self.top_left_focus,
                self.top_right_focus,
                self.bottom_left_focus,
                self.bottom_right_focus,
            )
        return Frame(
            self.horizontal,
            self.vertical,
            self.top_left,
            self.top_right,
            self.bottom_left,
            self.bottom_right,
        )


BORDERS = BorderSet()