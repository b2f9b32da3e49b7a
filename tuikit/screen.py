"""An in-memory character screen, text styles and text printing helpers."""

from __future__ import annotations

import enum
import queue
import threading
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from wcwidth import wcwidth

Color = Optional[str]
"""A colour name or ``#rrggbb`` string; ``None`` is the terminal default."""


class Align(enum.IntEnum):
    """Horizontal alignment of text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class AttrMask(enum.IntFlag):
    """Text attributes that can be combined."""

    NONE = 0
    BOLD = 1 << 0
    BLINK = 1 << 1
    REVERSE = 1 << 2
    UNDERLINE = 1 << 3
    DIM = 1 << 4
    ITALIC = 1 << 5
    STRIKETHROUGH = 1 << 6


@dataclass(frozen=True)
class Style:
    """Foreground colour, background colour and attributes of a cell."""

    foreground: Color = None
    background: Color = None
    attributes: AttrMask = AttrMask.NONE

    def with_foreground(self, color: Color) -> "Style":
        """Return a copy with a different foreground colour."""
        return replace(self, foreground=color)

    def with_background(self, color: Color) -> "Style":
        """Return a copy with a different background colour."""
        return replace(self, background=color)

    def with_attributes(self, attributes: AttrMask) -> "Style":
        """Return a copy with the attributes replaced."""
        return replace(self, attributes=AttrMask(attributes))


DEFAULT_STYLE = Style()


@dataclass
class _Theme:
    primitive_background: Color = "black"
    contrast_background: Color = "blue"
    more_contrast_background: Color = "green"
    border: Color = "white"
    title: Color = "white"
    graphics: Color = "white"
    primary_text: Color = "white"
    secondary_text: Color = "yellow"
    tertiary_text: Color = "green"
    inverse_text: Color = "blue"
    contrast_secondary_text: Color = "navy"


STYLES = _Theme()
"""Colours given to newly created primitives. May be changed freely."""

_BLANK: Tuple[str, Style] = (" ", DEFAULT_STYLE)


class Screen:
    """A grid of styled character cells together with an event queue."""

    def __init__(self, width: int = 80, height: int = 25) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen dimensions cannot be negative")
        self._width = width
        self._height = height
        self._cells: List[List[Tuple[str, Style]]] = self._blank_rows()
        self._events: "queue.Queue[Any]" = queue.Queue()
        self._lock = threading.Lock()
        self.initialized = False
        self.mouse_enabled = False
        self.paste_enabled = False
        self.cursor_visible = True
        self.suspended = False
        self.show_count = 0

    def _blank_rows(self) -> List[List[Tuple[str, Style]]]:
        return [[_BLANK] * self._width for _ in range(self._height)]

    def init(self) -> None:
        """Prepare the screen for use."""
        with self._lock:
            self.initialized = True
            self.suspended = False
            self._cells = self._blank_rows()

    def fini(self) -> None:
        """Finalise the screen; a pending poll then returns ``None``."""
        with self._lock:
            if not self.initialized:
                return
            self.initialized = False
        self._events.put(None)

    def size(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self._width, self._height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_content(self, x: int, y: int, char: str, style: Style = DEFAULT_STYLE) -> None:
        """Put a character into a cell; positions off the screen are ignored."""
        if self._inside(x, y):
            with self._lock:
                self._cells[y][x] = (char, style)

    def get_content(self, x: int, y: int) -> Tuple[str, Style]:
        """Return ``(char, style)`` of a cell, a blank for positions off screen."""
        if not self._inside(x, y):
            return _BLANK
        with self._lock:
            return self._cells[y][x]

    def clear(self) -> None:
        """Blank every cell."""
        with self._lock:
            self._cells = self._blank_rows()

    def show(self) -> None:
        """Make the drawn content visible."""
        with self._lock:
            self.show_count += 1

    def sync(self) -> None:
        """Redraw everything, as after a corrupted display."""
        self.show()

    def post_event(self, event: Any) -> None:
        """Add an event to the queue read by :meth:`poll_event`."""
        self._events.put(event)

    def poll_event(self, timeout: Optional[float] = None) -> Any:
        """Wait for the next event; ``None`` on timeout or once finalised."""
        if not self.initialized:
            try:
                return self._events.get_nowait()
            except queue.Empty:
                return None
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def enable_mouse(self) -> None:
        self.mouse_enabled = True

    def disable_mouse(self) -> None:
        self.mouse_enabled = False

    def enable_paste(self) -> None:
        self.paste_enabled = True

    def disable_paste(self) -> None:
        self.paste_enabled = False

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def suspend(self) -> None:
        """Leave screen mode temporarily."""
        if not self.initialized:
            raise RuntimeError("screen is not initialised")
        if self.suspended:
            raise RuntimeError("screen is already suspended")
        self.suspended = True

    def resume(self) -> None:
        """Return to screen mode after :meth:`suspend`."""
        if not self.suspended:
            raise RuntimeError("screen is not suspended")
        self.suspended = False

    def row_text(self, y: int) -> str:
        """Return the characters of one row joined together."""
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} is outside the screen")
        with self._lock:
            return "".join(char for char, _ in self._cells[y])


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def string_width(text: str) -> int:
    """Return the number of screen cells ``text`` occupies."""
    return sum(_char_width(char) for char in text)


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    width: int,
    align: Align = Align.LEFT,
    style: Style = DEFAULT_STYLE,
) -> Tuple[int, int]:
    """Print ``text`` into at most ``width`` cells starting at ``(x, y)``.

    Text that does not fit is cut on the right for left alignment, on the
    left for right alignment and on both sides when centred. Returns the
    number of characters printed and the number of cells they cover.
    """
    if width <= 0 or not text:
        return 0, 0
    align = Align(align)
    chars = list(text)
    widths = [_char_width(char) for char in chars]
    start, end = 0, len(chars)
    total = sum(widths)
    chop_end = True
    while total > width:
        if align is Align.RIGHT or (align is Align.CENTER and not chop_end):
            total -= widths[start]
            start += 1
        else:
            end -= 1
            total -= widths[end]
        chop_end = not chop_end

    if align is Align.CENTER:
        position = x + (width - total) // 2
    elif align is Align.RIGHT:
        position = x + width - total
    else:
        position = x

    for char, char_width in zip(chars[start:end], widths[start:end]):
        if char_width == 0:
            continue
        screen.set_content(position, y, char, style)
        for extra in range(1, char_width):
            screen.set_content(position + extra, y, "", style)
        position += char_width
    return end - start, total