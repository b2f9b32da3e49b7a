"""Translation of ANSI escape sequences into style tags."""

from __future__ import annotations

import enum
import io
from typing import Protocol, Union


class _TextStream(Protocol):
    def write(self, text: str) -> object: ...


class _State(enum.Enum):
    TEXT = enum.auto()
    ESCAPE = enum.auto()
    SUBSTRING = enum.auto()
    CONTROL_SEQUENCE = enum.auto()


_ESC = "\x1b"
_RESET_TAG = "[-:-:-]"

_PALETTE = (
    "black",
    "maroon",
    "green",
    "olive",
    "navy",
    "purple",
    "teal",
    "silver",
    "gray",
    "red",
    "lime",
    "yellow",
    "blue",
    "fuchsia",
    "aqua",
    "white",
)

_ATTRIBUTE_ON = {
    "1": "b", "01": "b",
    "2": "d", "02": "d",
    "3": "i", "03": "i",
    "4": "u", "04": "u",
    "5": "l", "05": "l",
    "7": "r", "07": "r",
    "9": "s", "09": "s",
}

_ATTRIBUTE_OFF = {
    "22": "bd",
    "23": "i",
    "24": "u",
    "25": "l",
    "27": "r",
    "29": "s",
}

_FOREGROUND = {
    **{str(30 + n): n for n in range(8)},
    **{str(90 + n): 8 + n for n in range(8)},
}
_BACKGROUND = {
    **{str(40 + n): n for n in range(8)},
    **{str(100 + n): 8 + n for n in range(8)},
}


def _lookup_color(number: int) -> str:
    if 0 <= number < len(_PALETTE):
        return _PALETTE[number]
    return "black"


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _hex_color(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def _extended_color(fields: list[str], index: int) -> str:
    """Decode an 8-bit or 24-bit colour following a 38 or 48 field."""
    if len(fields) <= index + 1:
        return ""
    mode = fields[index + 1]
    if mode == "5" and len(fields) > index + 2:
        number = _to_int(fields[index + 2])
        if number <= 15:
            return _lookup_color(number)
        if number <= 231:
            red = (number - 16) // 36
            green = ((number - 16) // 6) % 6
            blue = (number - 16) % 6
            return _hex_color(255 * red // 5, 255 * green // 5, 255 * blue // 5)
        if number <= 255:
            grey = 255 * (number - 232) // 23
            return _hex_color(grey, grey, grey)
        return ""
    if mode == "2" and len(fields) > index + 4:
        red, green, blue = (_to_int(field) for field in fields[index + 2:index + 5])
        return _hex_color(red, green, blue)
    return ""


class AnsiWriter:
    """Writes text to a stream, turning ANSI escape codes into style tags.

    Colour and attribute sequences become style tags; every other escape
    sequence is removed. Parser state carries over between writes.
    """

    def __init__(self, stream: _TextStream) -> None:
        self._stream = stream
        self._state = _State.TEXT
        self._parameters: list[str] = []
        self._intermediates: list[str] = []
        self._attributes = ""

    def write(self, text: Union[str, bytes, bytearray]) -> int:
        """Translate ``text`` and write the result; return the input length."""
        if isinstance(text, (bytes, bytearray)):
            chars = bytes(text).decode("utf-8", errors="replace")
        else:
            chars = text
        output: list[str] = []
        for char in chars:
            if self._state is _State.ESCAPE:
                self._on_escape(char, output)
            elif self._state is _State.CONTROL_SEQUENCE:
                self._on_control_sequence(char, output)
            elif self._state is _State.SUBSTRING:
                if char == _ESC:
                    self._state = _State.ESCAPE
            elif char == _ESC:
                self._state = _State.ESCAPE
            else:
                output.append(char)
        self._stream.write("".join(output))
        return len(text)

    def _on_escape(self, char: str, output: list[str]) -> None:
        if char == "[":
            self._parameters.clear()
            self._intermediates.clear()
            self._state = _State.CONTROL_SEQUENCE
        elif char == "c":
            output.append(_RESET_TAG)
            self._state = _State.TEXT
        elif char in "P]X^_":
            self._state = _State.SUBSTRING
        else:
            self._state = _State.TEXT

    def _on_control_sequence(self, char: str, output: list[str]) -> None:
        code = ord(char)
        if 0x30 <= code <= 0x3F:
            self._parameters.append(char)
            return
        if 0x20 <= code <= 0x2F:
            self._intermediates.append(char)
            return
        if 0x40 <= code <= 0x7E:
            parameters = "".join(self._parameters)
            if char == "E":
                output.append("\n" * (_to_int(parameters) or 1))
            elif char == "m":
                output.append(self._select_graphic_rendition(parameters))
        self._state = _State.TEXT

    def _select_graphic_rendition(self, parameters: str) -> str:
        fields = parameters.split(";")
        if not parameters or fields[0] in ("", "0"):
            self._attributes = ""
            return _RESET_TAG

        foreground = background = ""
        for index, field in enumerate(fields):
            if field in _ATTRIBUTE_ON:
                flag = _ATTRIBUTE_ON[field]
                if flag not in self._attributes:
                    self._attributes += flag
            elif field in _ATTRIBUTE_OFF:
                for flag in _ATTRIBUTE_OFF[field]:
                    self._attributes = self._attributes.replace(flag, "", 1)
            elif field in _FOREGROUND:
                foreground = _lookup_color(_FOREGROUND[field])
            elif field == "39":
                foreground = "-"
            elif field in _BACKGROUND:
                background = _lookup_color(_BACKGROUND[field])
            elif field == "49":
                background = "-"
            elif field in ("38", "48"):
                color = _extended_color(fields, index)
                if color:
                    if field == "38":
                        foreground = color
                    else:
                        background = color
                break

        if not (foreground or background or self._attributes):
            return ""
        colon = ":" if self._attributes else ""
        return f"[{foreground}:{background}{colon}{self._attributes}]"


def translate_ansi(text: str) -> str:
    """Return ``text`` with its ANSI escape sequences replaced by style tags."""
    buffer = io.StringIO()
    AnsiWriter(buffer).write(text)
    return buffer.getvalue()