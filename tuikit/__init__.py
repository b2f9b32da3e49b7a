"""Primitives, a flex layout, buttons, checkboxes and an event loop drawn into an in-memory screen."""

__version__ = "0.1.0"

__all__ = [
    "ansi",
    "application",
    "borders",
    "box",
    "button",
    "checkbox",
    "events",
    "flex",
    "screen",
]