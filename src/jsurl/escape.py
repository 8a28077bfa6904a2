"""Character escaping shared by string bodies and object keys.

Plain characters (ASCII letters, digits, ``.``, ``_``, ``-``) pass through,
``$`` becomes ``!``, code points below 0x100 become ``*XX`` and everything
else becomes one or two ``**XXXX`` units. Structural punctuation (``~``,
``(``, ``)``, ``'``) is never produced by the encoder because it is always
escaped.
"""

from __future__ import annotations

import string

from jsurl.cursor import Cursor
from jsurl.exceptions import InvalidEscapeSequence, TrailingInput

_PLAIN_CHARS = frozenset(string.ascii_letters + string.digits + "._-")
_HEX_DIGITS = frozenset(string.hexdigits)

RUN_TERMINATORS = frozenset("~)")

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def encode_char(char: str) -> str:
    if char in _PLAIN_CHARS:
        return char
    if char == "$":
        return "!"
    code = ord(char)
    if code < 0x100:
        return f"*{code:02x}"
    if code <= 0xFFFF:
        return f"**{code:04x}"
    # Astral code points are written as a UTF-16 surrogate pair so every
    # escape unit stays four hex digits wide.
    code -= 0x10000
    high = 0xD800 | (code >> 10)
    low = 0xDC00 | (code & 0x3FF)
    return f"**{high:04x}**{low:04x}"


def encode_text(text: str) -> str:
    return "".join(encode_char(char) for char in text)


def decode_run(cursor: Cursor) -> str:
    """Decode escaped text up to the next ``~``, ``)`` or the end of input.

    The terminator is left unconsumed for the caller.
    """
    out: list[str] = []
    while True:
        char = cursor.peek()
        if char is None or char in RUN_TERMINATORS:
            return "".join(out)
        if char == "*":
            out.append(_decode_escape(cursor))
        elif char == "!":
            cursor.advance()
            out.append("$")
        else:
            cursor.advance()
            out.append(char)


def decode_text(text: str) -> str:
    """Decode a complete escaped run, rejecting anything after its terminator."""
    cursor = Cursor(text)
    decoded = decode_run(cursor)
    if not cursor.at_end():
        raise TrailingInput(cursor.remainder(), position=cursor.pos)
    return decoded


def _decode_escape(cursor: Cursor) -> str:
    start = cursor.pos
    cursor.advance()
    if cursor.peek() != "*":
        return chr(_read_hex(cursor, 2, start=start))
    cursor.advance()
    code = _read_hex(cursor, 4, start=start)
    if code in _LOW_SURROGATES:
        raise InvalidEscapeSequence(
            cursor.text[start : cursor.pos],
            position=start,
            detail="unpaired low surrogate",
        )
    if code in _HIGH_SURROGATES:
        low = _read_low_surrogate(cursor, start=start)
        code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
    return chr(code)


def _read_low_surrogate(cursor: Cursor, *, start: int) -> int:
    if cursor.peek() != "*" or cursor.peek(1) != "*":
        raise InvalidEscapeSequence(
            cursor.text[start : cursor.pos],
            position=start,
            detail="unpaired high surrogate",
        )
    cursor.advance(2)
    low = _read_hex(cursor, 4, start=start)
    if low not in _LOW_SURROGATES:
        raise InvalidEscapeSequence(
            cursor.text[start : cursor.pos],
            position=start,
            detail="unpaired high surrogate",
        )
    return low


def _read_hex(cursor: Cursor, width: int, *, start: int) -> int:
    digits: list[str] = []
    for _ in range(width):
        char = cursor.take(expected=("hex digit",))
        if char not in _HEX_DIGITS:
            raise InvalidEscapeSequence(
                cursor.text[start : cursor.pos],
                position=start,
                detail=f"{char!r} is not a hex digit",
            )
        digits.append(char)
    return int("".join(digits), 16)
