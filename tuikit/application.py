"""The top-level object that runs the event loop and draws the root primitive."""

from __future__ import annotations

import contextlib
import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple, Union

from .events import (
    ButtonMask,
    ErrorEvent,
    Event,
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    PasteEvent,
    ResizeEvent,
)
from .screen import Screen

REDRAW_PAUSE = 0.05
"""The minimum time in seconds between two redraws caused by resizing."""

DOUBLE_CLICK_INTERVAL = 0.5
"""The longest time in seconds between two clicks that form a double click."""

MouseCapture = Callable[
    [Optional[MouseEvent], MouseAction], Tuple[Optional[MouseEvent], MouseAction]
]

_BUTTON_ACTIONS = (
    (
        ButtonMask.PRIMARY,
        MouseAction.LEFT_DOWN,
        MouseAction.LEFT_UP,
        MouseAction.LEFT_CLICK,
        MouseAction.LEFT_DOUBLE_CLICK,
    ),
    (
        ButtonMask.MIDDLE,
        MouseAction.MIDDLE_DOWN,
        MouseAction.MIDDLE_UP,
        MouseAction.MIDDLE_CLICK,
        MouseAction.MIDDLE_DOUBLE_CLICK,
    ),
    (
        ButtonMask.SECONDARY,
        MouseAction.RIGHT_DOWN,
        MouseAction.RIGHT_UP,
        MouseAction.RIGHT_CLICK,
        MouseAction.RIGHT_DOUBLE_CLICK,
    ),
)

_WHEEL_ACTIONS = (
    (ButtonMask.WHEEL_UP, MouseAction.SCROLL_UP),
    (ButtonMask.WHEEL_DOWN, MouseAction.SCROLL_DOWN),
    (ButtonMask.WHEEL_LEFT, MouseAction.SCROLL_LEFT),
    (ButtonMask.WHEEL_RIGHT, MouseAction.SCROLL_RIGHT),
)

_DOWN_ACTIONS = frozenset(
    {MouseAction.LEFT_DOWN, MouseAction.MIDDLE_DOWN, MouseAction.RIGHT_DOWN}
)


@dataclass
class _QueuedUpdate:
    func: Callable[[], Any]
    done: Optional[threading.Event] = field(default=None)


_QueueItem = Union[Event, _QueuedUpdate, None]


class Application:
    """Runs the event loop, routes input to the root primitive and draws it.

    Key events go to ``input_capture`` first (if set), mouse events to
    ``mouse_capture``. Ctrl-C stops the application unless the capture
    function returns a different event object.
    """

    def __init__(self, screen: Optional[Screen] = None) -> None:
        self._lock = threading.RLock()
        self._screen: Optional[Screen] = None
        self._focus: Optional[Any] = None
        self._root: Optional[Any] = None
        self._root_fullscreen = False
        self._enable_mouse = False
        self._enable_paste = False
        self._queue: "queue.Queue[_QueueItem]" = queue.Queue()
        self._screen_replacement: "queue.Queue[Optional[Screen]]" = queue.Queue()
        self._loop_thread: Optional[threading.Thread] = None

        self.input_capture: Optional[Callable[[KeyEvent], Optional[KeyEvent]]] = None
        self.mouse_capture: Optional[MouseCapture] = None
        self.before_draw: Optional[Callable[[Screen], bool]] = None
        self.after_draw: Optional[Callable[[Screen], None]] = None

        self._mouse_capturing_primitive: Optional[Any] = None
        self._last_mouse = (0, 0)
        self._mouse_down = (0, 0)
        self._last_mouse_click: Optional[float] = None
        self._last_mouse_buttons = ButtonMask.NONE

        if screen is not None:
            self.set_screen(screen)

    @property
    def screen(self) -> Optional[Screen]:
        """The screen in use, ``None`` before running or after stopping."""
        with self._lock:
            return self._screen

    @property
    def root(self) -> Optional[Any]:
        return self._root

    @property
    def focus(self) -> Optional[Any]:
        """The primitive that currently has the keyboard focus."""
        with self._lock:
            return self._focus

    def set_screen(self, screen: Screen) -> "Application":
        """Use ``screen``; while running, the current screen is replaced."""
        if screen is None:
            return self
        with self._lock:
            old = self._screen
            if old is None:
                self._screen = screen
        if old is None:
            screen.init()
            return self
        old.fini()
        self._screen_replacement.put(screen)
        return self

    def enable_mouse(self, enable: bool = True) -> "Application":
        """Turn mouse events on or off."""
        with self._lock:
            if enable != self._enable_mouse and self._screen is not None:
                if enable:
                    self._screen.enable_mouse()
                else:
                    self._screen.disable_mouse()
            self._enable_mouse = enable
        return self

    def enable_paste(self, enable: bool = True) -> "Application":
        """Turn the capturing of paste events on or off."""
        with self._lock:
            if enable != self._enable_paste and self._screen is not None:
                if enable:
                    self._screen.enable_paste()
                else:
                    self._screen.disable_paste()
            self._enable_paste = enable
        return self

    def _apply_input_modes(self, screen: Screen, mouse: bool, paste: bool) -> None:
        if mouse:
            screen.enable_mouse()
        else:
            screen.disable_mouse()
        if paste:
            screen.enable_paste()
        else:
            screen.disable_paste()

    def run(self) -> None:
        """Run the event loop until :meth:`stop` is called.

        Raises the error carried by an :class:`ErrorEvent`, which also stops
        the application.
        """
        with self._lock:
            if self._screen is None:
                screen = Screen()
                screen.init()
                self._apply_input_modes(screen, self._enable_mouse, self._enable_paste)
                self._screen = screen
            self._loop_thread = threading.current_thread()

        poller = threading.Thread(target=self._poll_events, name="screen-events", daemon=True)
        timer: Optional[threading.Timer] = None
        try:
            self._draw()
            poller.start()
            app_error, timer = self._event_loop()
        except BaseException:
            self.stop()
            raise
        finally:
            if timer is not None:
                timer.cancel()
            with self._lock:
                self._loop_thread = None

        poller.join()
        with self._lock:
            self._screen = None
        if app_error is not None:
            raise app_error

    def _poll_events(self) -> None:
        while True:
            with self._lock:
                screen = self._screen
            if screen is None:
                self.queue_event(None)
                return

            event = screen.poll_event()
            if event is not None:
                self.queue_event(event)
                continue

            # The screen was finalised: wait for its replacement.
            replacement = self._screen_replacement.get()
            if replacement is None:
                self.queue_event(None)
                return
            with self._lock:
                self._screen = replacement
                mouse, paste = self._enable_mouse, self._enable_paste
            replacement.init()
            self._apply_input_modes(replacement, mouse, paste)
            self._draw()

    def _event_loop(self) -> Tuple[Optional[BaseException], Optional[threading.Timer]]:
        app_error: Optional[BaseException] = None
        last_redraw: Optional[float] = None
        redraw_timer: Optional[threading.Timer] = None
        paste_buffer: List[str] = []
        pasting = False

        while True:
            item = self._queue.get()
            if item is None:
                break

            if isinstance(item, _QueuedUpdate):
                try:
                    item.func()
                finally:
                    if item.done is not None:
                        item.done.set()
                continue

            event = item
            if isinstance(event, KeyEvent):
                if pasting:
                    if event.key is Key.RUNE:
                        paste_buffer.append(event.char)
                    elif event.key is Key.ENTER:
                        paste_buffer.append("\n")
                    elif event.key is Key.TAB:
                        paste_buffer.append("\t")
                    continue
                self._handle_key(event)

            elif isinstance(event, PasteEvent):
                if not self._enable_paste:
                    continue
                if event.start:
                    pasting = True
                    paste_buffer.clear()
                else:
                    pasting = False
                    root = self._root
                    if root is not None and root.has_focus() and paste_buffer:
                        handler = root.paste_handler()
                        if handler is not None:
                            handler("".join(paste_buffer), self.set_focus)
                        self._draw()

            elif isinstance(event, ResizeEvent):
                now = time.monotonic()
                if last_redraw is not None and now - last_redraw < REDRAW_PAUSE:
                    if redraw_timer is not None:
                        redraw_timer.cancel()
                    redraw_timer = threading.Timer(REDRAW_PAUSE, self._queue.put, args=(event,))
                    redraw_timer.daemon = True
                    redraw_timer.start()
                with self._lock:
                    screen = self._screen
                if screen is None:
                    continue
                last_redraw = now
                screen.clear()
                self._draw()

            elif isinstance(event, MouseEvent):
                consumed, is_down = self._fire_mouse_actions(event)
                if consumed:
                    self._draw()
                self._last_mouse_buttons = event.buttons
                if is_down:
                    self._mouse_down = (event.x, event.y)

            elif isinstance(event, ErrorEvent):
                app_error = event.error
                self.stop()

        return app_error, redraw_timer

    def _handle_key(self, event: KeyEvent) -> None:
        with self._lock:
            root = self._root
            capture = self.input_capture

        draw = False
        original = event
        if capture is not None:
            captured = capture(event)
            if captured is None:
                self._draw()
                return
            event = captured
            draw = True

        if event is original and event.key is Key.CTRL_C:
            self.stop()
            return

        if root is not None and root.has_focus():
            handler = root.input_handler()
            if handler is not None:
                handler(event, self.set_focus)
                draw = True

        if draw:
            self._draw()

    def _fire_mouse_actions(self, event: MouseEvent) -> Tuple[bool, bool]:
        """Derive mouse actions from ``event`` and send them to the primitives."""
        consumed = False
        is_down = False
        target: Optional[Any] = None
        current: Optional[MouseEvent] = event

        def fire(action: MouseAction) -> None:
            nonlocal consumed, is_down, target, current
            if action in _DOWN_ACTIONS:
                is_down = True

            if self.mouse_capture is not None:
                current, action = self.mouse_capture(current, action)
                if current is None:
                    consumed = True
                    return

            if self._mouse_capturing_primitive is not None:
                primitive = self._mouse_capturing_primitive
                target = primitive
            elif target is not None:
                primitive = target
            else:
                primitive = self._root

            capturing = None
            if primitive is not None:
                handler = primitive.mouse_handler()
                if handler is not None:
                    was_consumed, capturing = handler(action, current, self.set_focus)
                    if was_consumed:
                        consumed = True
            self._mouse_capturing_primitive = capturing

        position = (event.x, event.y)
        buttons = event.buttons
        click_moved = position != self._mouse_down
        changes = buttons ^ self._last_mouse_buttons

        if position != self._last_mouse:
            fire(MouseAction.MOVE)
            self._last_mouse = position

        for button, down, up, click, double_click in _BUTTON_ACTIONS:
            if not changes & button:
                continue
            if buttons & button:
                fire(down)
                continue
            fire(up)
            if not click_moved and current is not None:
                now = time.monotonic()
                last = self._last_mouse_click
                if last is None or last + DOUBLE_CLICK_INTERVAL < now:
                    fire(click)
                    self._last_mouse_click = time.monotonic()
                else:
                    fire(double_click)
                    self._last_mouse_click = None

        for button, action in _WHEEL_ACTIONS:
            if buttons & button:
                fire(action)

        return consumed, is_down

    def stop(self) -> None:
        """Stop the application, making :meth:`run` return."""
        with self._lock:
            screen = self._screen
            if screen is None:
                return
            self._screen = None
            screen.fini()
            self._screen_replacement.put(None)

    def suspend(self, f: Callable[[], Any]) -> bool:
        """Leave screen mode, call ``f``, then resume.

        Returns ``False`` without calling ``f`` if there is no screen or it
        could not be suspended.
        """
        with self._lock:
            screen = self._screen
        if screen is None:
            return False
        try:
            screen.suspend()
        except RuntimeError:
            return False

        f()

        with self._lock:
            if self._screen is not screen:
                screen.fini()
                if self._screen is None:
                    return True
            else:
                with contextlib.suppress(RuntimeError):
                    screen.resume()
        return True

    def _in_loop_thread(self) -> bool:
        with self._lock:
            return self._loop_thread is threading.current_thread()

    def draw(self) -> "Application":
        """Redraw the screen as part of the event loop."""
        return self.queue_update(self._draw)

    def force_draw(self) -> "Application":
        """Redraw the screen immediately."""
        return self._draw()

    def _draw(self) -> "Application":
        with self._lock:
            screen = self._screen
            root = self._root
            if screen is None or root is None:
                return self

            if self._root_fullscreen:
                width, height = screen.size()
                root.set_rect(0, 0, width, height)

            screen.clear()

            before = self.before_draw
            if before is not None and before(screen):
                screen.show()
                return self

            root.draw(screen)

            after = self.after_draw
            if after is not None:
                after(screen)

            screen.show()
        return self

    def sync(self) -> "Application":
        """Fully redraw the screen during the next event cycle."""

        def resync() -> None:
            with self._lock:
                screen = self._screen
            if screen is not None:
                screen.sync()

        self._queue.put(_QueuedUpdate(resync))
        return self

    def set_root(self, root: Any, fullscreen: bool = False) -> "Application":
        """Set the root primitive and give it focus.

        With ``fullscreen`` the root is resized to fill the screen on each draw.
        """
        with self._lock:
            self._root = root
            self._root_fullscreen = fullscreen
            if self._screen is not None:
                self._screen.clear()
        self.set_focus(root)
        return self

    def resize_to_full_screen(self, primitive: Any) -> "Application":
        """Resize ``primitive`` to cover the whole screen."""
        with self._lock:
            screen = self._screen
        if screen is None:
            raise RuntimeError("the application has no screen")
        width, height = screen.size()
        primitive.set_rect(0, 0, width, height)
        return self

    def set_focus(self, primitive: Optional[Any]) -> "Application":
        """Move the focus, blurring the previous primitive and focusing the new one."""
        with self._lock:
            if self._focus is not None:
                self._focus.blur()
            self._focus = primitive
            if self._screen is not None:
                self._screen.hide_cursor()
        if primitive is not None:
            primitive.focus(self.set_focus)
        return self

    def queue_update(self, f: Callable[[], Any]) -> "Application":
        """Run ``f`` in the event loop and return once it has run.

        Called from the event loop itself, ``f`` runs immediately.
        """
        if self._in_loop_thread():
            f()
            return self
        done = threading.Event()
        self._queue.put(_QueuedUpdate(f, done))
        done.wait()
        return self

    def queue_update_draw(self, f: Callable[[], Any]) -> "Application":
        """Like :meth:`queue_update`, redrawing the screen after ``f``."""

        def update() -> None:
            f()
            self._draw()

        return self.queue_update(update)

    def queue_event(self, event: Optional[Event]) -> "Application":
        """Send an event to the event loop; ``None`` ends the loop."""
        self._queue.put(event)
        return self