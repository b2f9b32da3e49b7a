"""A box for boolean values which can be checked and unchecked."""

from __future__ import annotations

from typing import Callable, Optional

from .box import Box, InputHandler, MouseHandler, MouseResult, SetFocus
from .events import Key, KeyEvent, MouseAction, MouseEvent
from .screen import STYLES, Align, Color, Screen, Style, print_text


class Checkbox(Box):
    """A label followed by a one-cell field showing the checked state.

    Space, Enter or a left click toggles the state. Tab, Backtab and Escape
    are reported to the done and finished functions.
    """

    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.label = label
        self.label_width = 0
        self.disabled = False
        self._checked = False
        self.label_style = Style(foreground=STYLES.secondary_text)
        self.unchecked_style = Style(
            foreground=STYLES.primary_text, background=STYLES.contrast_background
        )
        self.checked_style = Style(
            foreground=STYLES.primary_text, background=STYLES.contrast_background
        )
        self.focus_style = Style(
            foreground=STYLES.contrast_background, background=STYLES.primary_text
        )
        self.unchecked_string = " "
        self.checked_string = "X"
        self.changed_func: Optional[Callable[[bool], None]] = None
        self.done_func: Optional[Callable[[Key], None]] = None
        self.finished_func: Optional[Callable[[Key], None]] = None

    @property
    def checked(self) -> bool:
        """Whether the box is checked."""
        return self._checked

    def set_checked(self, checked: bool) -> "Checkbox":
        """Set the state, calling the changed function if it changes."""
        if self._checked != checked:
            if self.changed_func is not None:
                self.changed_func(checked)
            self._checked = checked
        return self

    def _toggle(self) -> None:
        self._checked = not self._checked
        if self.changed_func is not None:
            self.changed_func(self._checked)

    def set_label_color(self, color: Color) -> "Checkbox":
        self.label_style = self.label_style.with_foreground(color)
        return self

    def set_field_background_color(self, color: Color) -> "Checkbox":
        """Set the background of the field; the focused field uses it as text."""
        self.unchecked_style = self.unchecked_style.with_background(color)
        self.checked_style = self.checked_style.with_background(color)
        self.focus_style = self.focus_style.with_foreground(color)
        return self

    def set_field_text_color(self, color: Color) -> "Checkbox":
        """Set the text colour of the field; the focused field uses it as background."""
        self.unchecked_style = self.unchecked_style.with_foreground(color)
        self.checked_style = self.checked_style.with_foreground(color)
        self.focus_style = self.focus_style.with_background(color)
        return self

    def set_form_attributes(
        self,
        label_width: int,
        label_color: Color,
        bg_color: Color,
        field_text_color: Color,
        field_bg_color: Color,
    ) -> "Checkbox":
        """Apply the attributes a form shares between its items."""
        self.label_width = label_width
        self.set_label_color(label_color)
        self._background_color = bg_color
        self.set_field_text_color(field_text_color)
        self.set_field_background_color(field_bg_color)
        return self

    @property
    def field_width(self) -> int:
        return 1

    @property
    def field_height(self) -> int:
        return 1

    def set_disabled(self, disabled: bool) -> "Checkbox":
        """Make the checkbox read-only or editable again."""
        self.disabled = disabled
        if self.finished_func is not None:
            self.finished_func(Key.NONE)
        return self

    def focus(self, delegate: SetFocus) -> None:
        """Take focus, or pass straight on if disabled inside a form."""
        if self.finished_func is not None and self.disabled:
            self.finished_func(Key.NONE)
            return
        super().focus(delegate)

    def draw(self, screen: Screen) -> None:
        """Draw the label followed by the checkbox field."""
        self.draw_for_subclass(screen, self)

        x, y, width, height = self.inner_rect()
        if height < 1 or width <= 0:
            return

        label_style = self.label_style
        if label_style.background is None:
            label_style = label_style.with_background(self.background_color)
        if self.label_width > 0:
            label_width = min(self.label_width, width)
            print_text(screen, self.label, x, y, label_width, Align.LEFT, label_style)
            x += label_width
            width -= label_width
        else:
            _, drawn = print_text(screen, self.label, x, y, width, Align.LEFT, label_style)
            x += drawn
            width -= drawn

        if self._checked:
            text, style = self.checked_string, self.checked_style
        else:
            text, style = self.unchecked_string, self.unchecked_style
        if self.disabled:
            style = style.with_background(self.background_color)
        if self.has_focus():
            style = self.focus_style
        print_text(screen, text, x, y, width, Align.LEFT, style)

    def input_handler(self) -> InputHandler:
        """Toggle on Space or Enter; report leaving keys."""

        def handle(event: KeyEvent, set_focus: SetFocus) -> None:
            if self.disabled:
                return
            key = event.key
            if key is Key.ENTER or (key is Key.RUNE and event.char == " "):
                self._toggle()
            elif key in (Key.TAB, Key.BACKTAB, Key.ESCAPE):
                if self.done_func is not None:
                    self.done_func(key)
                if self.finished_func is not None:
                    self.finished_func(key)

        return self.wrap_input_handler(handle)

    def mouse_handler(self) -> MouseHandler:
        """Take focus on a button press, toggle on a click in the first row."""

        def handle(action: MouseAction, event: MouseEvent, set_focus: SetFocus) -> MouseResult:
            if self.disabled or not self.in_rect(event.x, event.y):
                return False, None
            _, rect_y, _, _ = self.inner_rect()
            if event.y != rect_y:
                return False, None
            if action == MouseAction.LEFT_DOWN:
                set_focus(self)
                return True, None
            if action == MouseAction.LEFT_CLICK:
                self._toggle()
                return True, None
            return False, None

        return self.wrap_mouse_handler(handle)