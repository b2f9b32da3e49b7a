"""A layout container arranging primitives in a row or a column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .box import Box, InputHandler, MouseHandler, MouseResult, PasteHandler, SetFocus
from .events import KeyEvent, MouseAction, MouseEvent
from .screen import Screen

FLEX_ROW = 0
"""One item per row: items are stacked vertically."""
FLEX_COLUMN = 1
"""One item per column: items are placed side by side."""
FLEX_ROW_CSS = 1
"""As in CSS, items distributed along a row."""
FLEX_COLUMN_CSS = 0
"""As in CSS, items distributed within a column."""


@dataclass
class _FlexItem:
    item: Optional[Any]
    fixed_size: int
    proportion: int
    focus: bool


def _div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


class Flex(Box):
    """Arranges primitives along one direction with fixed or proportional sizes.

    The background is not cleared, so empty (``None``) items leave whatever
    was drawn beneath them.
    """

    def __init__(self, direction: int = FLEX_COLUMN) -> None:
        super().__init__()
        self.dont_clear = True
        self.direction = direction
        self.full_screen = False
        self._items: List[_FlexItem] = []

    def add_item(
        self,
        item: Optional[Any],
        fixed_size: int = 0,
        proportion: int = 1,
        focus: bool = False,
    ) -> "Flex":
        """Append an item.

        ``fixed_size`` greater than zero gives the item that exact size;
        otherwise it shares the remaining space by ``proportion``. ``None``
        takes up space but draws nothing. The first item with ``focus`` set
        receives focus when the container does.
        """
        self._items.append(_FlexItem(item, fixed_size, proportion, focus))
        return self

    def remove_item(self, item: Any) -> "Flex":
        """Remove every entry holding ``item``, keeping the others in order."""
        self._items = [entry for entry in self._items if entry.item is not item]
        return self

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Optional[Any]:
        return self._items[index].item

    def clear(self) -> "Flex":
        """Remove all items."""
        self._items = []
        return self

    def resize_item(self, item: Any, fixed_size: int, proportion: int) -> "Flex":
        """Change the size settings of every entry holding ``item``."""
        for entry in self._items:
            if entry.item is item:
                entry.fixed_size = fixed_size
                entry.proportion = proportion
        return self

    def draw(self, screen: Screen) -> None:
        """Lay out the items and draw them, the focused ones last."""
        self.draw_for_subclass(screen, self)

        if self.full_screen:
            width, height = screen.size()
            self.set_rect(0, 0, width, height)

        x, y, width, height = self.inner_rect()
        vertical = self.direction == FLEX_ROW
        dist_size = height if vertical else width
        proportion_sum = 0
        for entry in self._items:
            if entry.fixed_size > 0:
                dist_size -= entry.fixed_size
            else:
                proportion_sum += entry.proportion

        position = y if vertical else x
        deferred: List[Any] = []
        for entry in self._items:
            size = entry.fixed_size
            if size <= 0:
                if proportion_sum > 0:
                    size = _div_trunc(dist_size * entry.proportion, proportion_sum)
                    dist_size -= size
                    proportion_sum -= entry.proportion
                else:
                    size = 0
            primitive = entry.item
            if primitive is not None:
                if self.direction == FLEX_COLUMN:
                    primitive.set_rect(position, y, size, height)
                else:
                    primitive.set_rect(x, position, width, size)
            position += size

            if primitive is not None:
                if primitive.has_focus():
                    deferred.append(primitive)
                else:
                    primitive.draw(screen)

        for primitive in reversed(deferred):
            primitive.draw(screen)

    def focus(self, delegate: SetFocus) -> None:
        """Hand focus to the first item marked for it, or keep it."""
        for entry in self._items:
            if entry.item is not None and entry.focus:
                delegate(entry.item)
                return
        super().focus(delegate)

    def has_focus(self) -> bool:
        """Whether the container or any of its items has focus."""
        if any(entry.item is not None and entry.item.has_focus() for entry in self._items):
            return True
        return super().has_focus()

    def mouse_handler(self) -> MouseHandler:
        """Pass mouse events to the first item that consumes them."""

        def handle(action: MouseAction, event: MouseEvent, set_focus: SetFocus) -> MouseResult:
            if not self.in_rect(event.x, event.y):
                return False, None
            consumed, capture = False, None
            for entry in self._items:
                if entry.item is None:
                    continue
                consumed, capture = entry.item.mouse_handler()(action, event, set_focus)
                if consumed:
                    break
            return consumed, capture

        return self.wrap_mouse_handler(handle)

    def input_handler(self) -> InputHandler:
        """Pass key events to the focused item."""

        def handle(event: KeyEvent, set_focus: SetFocus) -> None:
            for entry in self._items:
                if entry.item is not None and entry.item.has_focus():
                    handler = entry.item.input_handler()
                    if handler is not None:
                        handler(event, set_focus)
                        return

        return self.wrap_input_handler(handle)

    def paste_handler(self) -> PasteHandler:
        """Pass pasted text to the focused item."""

        def handle(text: str, set_focus: SetFocus) -> None:
            for entry in self._items:
                if entry.item is not None and entry.item.has_focus():
                    handler = entry.item.paste_handler()
                    if handler is not None:
                        handler(text, set_focus)
                        return

        return self.wrap_paste_handler(handle)