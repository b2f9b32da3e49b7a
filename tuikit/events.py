"""Input events delivered to the application and its primitives."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class MouseAction(enum.IntEnum):
    """What the mouse is logically doing."""

    MOVE = 0
    LEFT_DOWN = 1
    LEFT_UP = 2
    LEFT_CLICK = 3
    LEFT_DOUBLE_CLICK = 4
    MIDDLE_DOWN = 5
    MIDDLE_UP = 6
    MIDDLE_CLICK = 7
    MIDDLE_DOUBLE_CLICK = 8
    RIGHT_DOWN = 9
    RIGHT_UP = 10
    RIGHT_CLICK = 11
    RIGHT_DOUBLE_CLICK = 12
    SCROLL_UP = 13
    SCROLL_DOWN = 14
    SCROLL_LEFT = 15
    SCROLL_RIGHT = 16
    # Never reported by the application; a mouse capture function returns it
    # to say that it consumed the event.
    CONSUMED = 17


class Key(enum.IntEnum):
    """Keys reported by key events."""

    NONE = -1
    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    BACKSPACE = 8
    TAB = 9
    CTRL_K = 11
    CTRL_L = 12
    ENTER = 13
    CTRL_N = 14
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESCAPE = 27
    BACKSPACE2 = 127
    RUNE = 256
    UP = 257
    DOWN = 258
    RIGHT = 259
    LEFT = 260
    PAGE_UP = 261
    PAGE_DOWN = 262
    HOME = 263
    END = 264
    INSERT = 265
    DELETE = 266
    BACKTAB = 267
    F1 = 268
    F2 = 269
    F3 = 270
    F4 = 271
    F5 = 272
    F6 = 273
    F7 = 274
    F8 = 275
    F9 = 276
    F10 = 277
    F11 = 278
    F12 = 279


class ButtonMask(enum.IntFlag):
    """The mouse buttons and wheel directions held in a mouse event."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    MIDDLE = 1 << 2
    WHEEL_UP = 1 << 8
    WHEEL_DOWN = 1 << 9
    WHEEL_LEFT = 1 << 10
    WHEEL_RIGHT = 1 << 11


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``char`` holds the typed character for ``Key.RUNE``."""

    key: Key
    char: str = ""
    modifiers: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", Key(self.key))
        if self.key is Key.RUNE and len(self.char) != 1:
            raise ValueError("a rune key event needs exactly one character")


@dataclass(frozen=True)
class MouseEvent:
    """The mouse position together with the buttons currently held."""

    x: int
    y: int
    buttons: ButtonMask = ButtonMask.NONE
    modifiers: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "buttons", ButtonMask(self.buttons))


@dataclass(frozen=True)
class PasteEvent:
    """Marks the start (``start=True``) or the end of pasted input."""

    start: bool


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed to a new size."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("screen dimensions cannot be negative")


@dataclass(frozen=True)
class ErrorEvent:
    """The screen reported an error; the application stops with it."""

    error: BaseException


Event = Union[KeyEvent, MouseEvent, PasteEvent, ResizeEvent, ErrorEvent]