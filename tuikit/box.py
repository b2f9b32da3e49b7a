"""The base primitive: a rectangle with optional border and title."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Tuple

from .borders import BORDERS, HORIZONTAL_ELLIPSIS
from .events import KeyEvent, MouseAction, MouseEvent
from .screen import (
    DEFAULT_STYLE,
    STYLES,
    Align,
    AttrMask,
    Color,
    Screen,
    Style,
    print_text,
)

Rect = Tuple[int, int, int, int]
SetFocus = Callable[[Any], None]
InputHandler = Callable[[KeyEvent, SetFocus], None]
PasteHandler = Callable[[str, SetFocus], None]
MouseResult = Tuple[bool, Any]
MouseHandler = Callable[[MouseAction, MouseEvent, SetFocus], MouseResult]


class _Focusable(Protocol):
    def has_focus(self) -> bool: ...


class Box:
    """A rectangle with a background, an optional border and a title.

    All other primitives build on it. Handlers returned by the ``*_handler``
    methods pass events through the optional capture functions first.
    """

    def __init__(self) -> None:
        self._x = 0
        self._y = 0
        self._width = 15
        self._height = 10
        self._inner: Optional[Rect] = None
        self._padding = (0, 0, 0, 0)
        self._background_color: Color = STYLES.primitive_background
        self.border_style: Style = Style(
            foreground=STYLES.border, background=STYLES.primitive_background
        )
        self.border = False
        self.title = ""
        self.title_color: Color = STYLES.title
        self.title_align = Align.CENTER
        self.dont_clear = False
        self._has_focus = False
        self.focus_func: Optional[Callable[[], None]] = None
        self.blur_func: Optional[Callable[[], None]] = None
        self.input_capture: Optional[Callable[[KeyEvent], Optional[KeyEvent]]] = None
        self.mouse_capture: Optional[
            Callable[[MouseAction, Optional[MouseEvent]], Tuple[MouseAction, Optional[MouseEvent]]]
        ] = None
        self.draw_func: Optional[Callable[[Screen, int, int, int, int], Rect]] = None

    def set_border_padding(self, top: int, bottom: int, left: int, right: int) -> "Box":
        """Set the space between the border and the content."""
        self._padding = (top, bottom, left, right)
        return self

    @property
    def rect(self) -> Rect:
        """The position and size ``(x, y, width, height)``."""
        return self._x, self._y, self._width, self._height

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Move and resize the primitive."""
        self._x, self._y, self._width, self._height = x, y, width, height
        self._inner = None

    def inner_rect(self) -> Rect:
        """Return the content area inside border and padding, never negative."""
        if self._inner is not None:
            return self._inner
        x, y, width, height = self.rect
        if self.border:
            x, y, width, height = x + 1, y + 1, width - 2, height - 2
        top, bottom, left, right = self._padding
        return (
            x + left,
            y + top,
            max(width - left - right, 0),
            max(height - top - bottom, 0),
        )

    def wrap_input_handler(self, handler: Optional[InputHandler]) -> InputHandler:
        """Put the input capture function in front of ``handler``."""

        def wrapped(event: KeyEvent, set_focus: SetFocus) -> None:
            if self.input_capture is not None:
                event = self.input_capture(event)
            if event is not None and handler is not None:
                handler(event, set_focus)

        return wrapped

    def input_handler(self) -> InputHandler:
        """Return the key handler; a plain box does nothing with keys."""
        return self.wrap_input_handler(None)

    def wrap_paste_handler(self, handler: Optional[PasteHandler]) -> PasteHandler:
        """Return a paste handler calling ``handler`` if there is one."""

        def wrapped(text: str, set_focus: SetFocus) -> None:
            if handler is not None:
                handler(text, set_focus)

        return wrapped

    def paste_handler(self) -> PasteHandler:
        """Return the paste handler; a plain box ignores pasted text."""
        return self.wrap_paste_handler(None)

    def wrap_mouse_handler(self, handler: Optional[MouseHandler]) -> MouseHandler:
        """Put the mouse capture function in front of ``handler``."""

        def wrapped(action: MouseAction, event: Optional[MouseEvent], set_focus: SetFocus) -> MouseResult:
            if self.mouse_capture is not None:
                action, event = self.mouse_capture(action, event)
            if event is None:
                return action == MouseAction.CONSUMED, None
            if handler is not None:
                return handler(action, event, set_focus)
            return False, None

        return wrapped

    def mouse_handler(self) -> MouseHandler:
        """Return the mouse handler, which takes focus on a left button press."""

        def handle(action: MouseAction, event: MouseEvent, set_focus: SetFocus) -> MouseResult:
            if action == MouseAction.LEFT_DOWN and self.in_rect(event.x, event.y):
                set_focus(self)
                return True, None
            return False, None

        return self.wrap_mouse_handler(handle)

    def in_rect(self, x: int, y: int) -> bool:
        """Whether the point lies within the outer rectangle."""
        rect_x, rect_y, width, height = self.rect
        return rect_x <= x < rect_x + width and rect_y <= y < rect_y + height

    def in_inner_rect(self, x: int, y: int) -> bool:
        """Whether the point lies within the content area."""
        rect_x, rect_y, width, height = self.inner_rect()
        return rect_x <= x < rect_x + width and rect_y <= y < rect_y + height

    @property
    def background_color(self) -> Color:
        return self._background_color

    def set_background_color(self, color: Color) -> "Box":
        """Set the background colour, also behind the border."""
        self._background_color = color
        self.border_style = self.border_style.with_background(color)
        return self

    @property
    def border_color(self) -> Color:
        return self.border_style.foreground

    def set_border_color(self, color: Color) -> "Box":
        self.border_style = self.border_style.with_foreground(color)
        return self

    @property
    def border_attributes(self) -> AttrMask:
        return self.border_style.attributes

    def set_border_attributes(self, attributes: AttrMask) -> "Box":
        self.border_style = self.border_style.with_attributes(attributes)
        return self

    def draw(self, screen: Screen) -> None:
        """Draw the box onto the screen."""
        self.draw_for_subclass(screen, self)

    def draw_for_subclass(self, screen: Screen, primitive: _Focusable) -> None:
        """Draw the box, using ``primitive``'s focus to pick the border."""
        x, y, width, height = self.rect
        if width <= 0 or height <= 0:
            return

        if not self.dont_clear:
            background = DEFAULT_STYLE.with_background(self._background_color)
            for row in range(y, y + height):
                for column in range(x, x + width):
                    screen.set_content(column, row, " ", background)

        if self.border and width >= 2 and height >= 2:
            self._draw_border(screen, primitive.has_focus())

        if self.draw_func is not None:
            self._inner = self.draw_func(screen, x, y, width, height)
        else:
            self._inner = None
            self._inner = self.inner_rect()

    def _draw_border(self, screen: Screen, focused: bool) -> None:
        x, y, width, height = self.rect
        frame = BORDERS.for_focus(focused)
        style = self.border_style
        right, bottom = x + width - 1, y + height - 1
        for column in range(x + 1, right):
            screen.set_content(column, y, frame.horizontal, style)
            screen.set_content(column, bottom, frame.horizontal, style)
        for row in range(y + 1, bottom):
            screen.set_content(x, row, frame.vertical, style)
            screen.set_content(right, row, frame.vertical, style)
        screen.set_content(x, y, frame.top_left, style)
        screen.set_content(right, y, frame.top_right, style)
        screen.set_content(x, bottom, frame.bottom_left, style)
        screen.set_content(right, bottom, frame.bottom_right, style)

        if not self.title or width < 4:
            return
        title_style = Style(foreground=self.title_color, background=self._background_color)
        printed, _ = print_text(screen, self.title, x + 1, y, width - 2, self.title_align, title_style)
        if 0 < printed < len(self.title):
            x_ellipsis = x + 1 if self.title_align == Align.RIGHT else x + width - 2
            _, existing = screen.get_content(x_ellipsis, y)
            ellipsis_style = Style(foreground=existing.foreground, background=self._background_color)
            print_text(screen, HORIZONTAL_ELLIPSIS, x_ellipsis, y, 1, Align.LEFT, ellipsis_style)

    def focus(self, delegate: SetFocus) -> None:
        """Called when the primitive receives focus."""
        self._has_focus = True
        if self.focus_func is not None:
            self.focus_func()

    def blur(self) -> None:
        """Called when the primitive loses focus."""
        if self.blur_func is not None:
            self.blur_func()
        self._has_focus = False

    def has_focus(self) -> bool:
        return self._has_focus