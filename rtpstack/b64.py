"""Base-64 encoding with optional line wrapping and lenient decoding."""

from __future__ import annotations

import base64
import string
from typing import Optional, Union

_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
_INDEXES = {ch: i for i, ch in enumerate(_ALPHABET)}

_PLAIN_CHUNK = 3
_ENCODED_CHUNK = 4
_UNEXPECTED_WS = frozenset(" \t\b\v")
_LINE_BREAKS = frozenset("\r\n")


class B64Error(ValueError):
    """Raised when base-64 input holds a character it may not contain."""

    def __init__(self, position: int, char: str) -> None:
        super().__init__(f"Invalid data: unexpected {char!r} at position {position}")
        self.position = position
        self.char = char


def _check_line_length(line_length: Optional[int]) -> int:
    if not line_length:
        return 0
    if line_length < 0:
        raise ValueError("line length must not be negative")
    if line_length % _ENCODED_CHUNK:
        raise ValueError("line length must be a multiple of 4")
    return line_length


def encoded_length(size: int, line_length: Optional[int] = 0) -> int:
    """Return the length of the encoding of ``size`` bytes, line breaks included."""
    if size < 0:
        raise ValueError("size must not be negative")
    line_length = _check_line_length(line_length)
    total = (size + _PLAIN_CHUNK - 1) // _PLAIN_CHUNK * _ENCODED_CHUNK
    if line_length and total:
        lines = (total + line_length - 1) // line_length
        total += 2 * (lines - 1)
    return total


def encode(data: Union[bytes, bytearray, memoryview], line_length: Optional[int] = 0) -> str:
    """Encode ``data`` to base-64, breaking lines with CRLF every ``line_length`` characters.

    A line length of 0 (or None) produces a single unbroken line.
    """
    line_length = _check_line_length(line_length)
    text = base64.b64encode(bytes(data)).decode("ascii")
    if not line_length:
        return text
    return "\r\n".join(
        text[start:start + line_length] for start in range(0, len(text), line_length)
    )


def decode(
    text: Union[str, bytes, bytearray],
    stop_on_unknown_char: bool = False,
    stop_on_unexpected_ws: bool = False,
) -> bytes:
    """Decode base-64 ``text``.

    CR and LF are always skipped. Spaces, tabs, backspaces and vertical tabs
    are skipped unless ``stop_on_unexpected_ws`` is set; other characters
    outside the alphabet are skipped unless ``stop_on_unknown_char`` is set.
    Decoding stops after the first chunk holding padding, and a trailing
    incomplete chunk is ignored.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    out = bytearray()
    indexes: list[int] = []
    pads = 0
    for position, ch in enumerate(text):
        if ch == "=":
            indexes.append(0)
            pads += 1
        elif ch in _INDEXES:
            pads = 0
            indexes.append(_INDEXES[ch])
        elif ch in _UNEXPECTED_WS:
            if stop_on_unexpected_ws:
                raise B64Error(position, ch)
            continue
        elif ch in _LINE_BREAKS:
            continue
        else:
            if stop_on_unknown_char:
                raise B64Error(position, ch)
            continue

        if len(indexes) == _ENCODED_CHUNK:
            i0, i1, i2, i3 = indexes
            indexes = []
            out.append(((i0 << 2) + ((i1 & 0x30) >> 4)) & 0xFF)
            if pads != 2:
                out.append((((i1 & 0x0F) << 4) + ((i2 & 0x3C) >> 2)) & 0xFF)
                if pads != 1:
                    out.append((((i2 & 0x03) << 6) + i3) & 0xFF)
            if pads:
                break
    return bytes(out)