"""A labelled box that triggers an action when selected."""

from __future__ import annotations

from typing import Callable, Optional

from .box import Box, InputHandler, MouseHandler, MouseResult, SetFocus
from .events import Key, KeyEvent, MouseAction, MouseEvent
from .screen import STYLES, Align, Color, Screen, Style, print_text, string_width


class Button(Box):
    """A button activated with Enter or a left mouse click."""

    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.set_rect(0, 0, string_width(label) + 4, 1)
        self.label = label
        self.disabled = False
        self.style = Style(
            foreground=STYLES.primary_text, background=STYLES.contrast_background
        )
        self.activated_style = Style(
            foreground=STYLES.inverse_text, background=STYLES.primary_text
        )
        self.disabled_style = Style(
            foreground=STYLES.contrast_secondary_text,
            background=STYLES.contrast_background,
        )
        self.selected_func: Optional[Callable[[], None]] = None
        self.exit_func: Optional[Callable[[Key], None]] = None

    def set_label_color(self, color: Color) -> "Button":
        self.style = self.style.with_foreground(color)
        return self

    def set_label_color_activated(self, color: Color) -> "Button":
        self.activated_style = self.activated_style.with_foreground(color)
        return self

    def set_background_color_activated(self, color: Color) -> "Button":
        self.activated_style = self.activated_style.with_background(color)
        return self

    def _current_style(self) -> Style:
        if self.disabled:
            return self.disabled_style
        if self.has_focus():
            return self.activated_style
        return self.style

    def draw(self, screen: Screen) -> None:
        """Draw the button with its label centred."""
        style = self._current_style()
        self.set_background_color(style.background)
        self.draw_for_subclass(screen, self)

        x, y, width, height = self.inner_rect()
        if width > 0 and height > 0:
            print_text(screen, self.label, x, y + height // 2, width, Align.CENTER, style)

    def input_handler(self) -> InputHandler:
        """Select on Enter; report Tab, Backtab and Escape to the exit function."""

        def handle(event: KeyEvent, set_focus: SetFocus) -> None:
            if self.disabled:
                return
            if event.key is Key.ENTER:
                if self.selected_func is not None:
                    self.selected_func()
            elif event.key in (Key.BACKTAB, Key.TAB, Key.ESCAPE):
                if self.exit_func is not None:
                    self.exit_func(event.key)

        return self.wrap_input_handler(handle)

    def mouse_handler(self) -> MouseHandler:
        """Take focus on a button press, select on a click."""

        def handle(action: MouseAction, event: MouseEvent, set_focus: SetFocus) -> MouseResult:
            if self.disabled or not self.in_rect(event.x, event.y):
                return False, None
            if action == MouseAction.LEFT_DOWN:
                set_focus(self)
                return True, None
            if action == MouseAction.LEFT_CLICK:
                if self.selected_func is not None:
                    self.selected_func()
                return True, None
            return False, None

        return self.wrap_mouse_handler(handle)