"""Decimal text for integers of any size.

CPython refuses ``str(int)`` and ``int(str)`` past
``sys.get_int_max_str_digits()`` (4300 digits by default), so long integers
are converted in fixed-width chunks that stay under that limit.
"""

from __future__ import annotations

_CHUNK_DIGITS = 4000
_CHUNK = 10**_CHUNK_DIGITS


def int_to_text(value: int) -> str:
    if -_CHUNK < value < _CHUNK:
        return int.__repr__(value)
    sign = "-" if value < 0 else ""
    remaining = abs(int(value))
    chunks: list[str] = []
    while remaining >= _CHUNK:
        remaining, low = divmod(remaining, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(int.__repr__(remaining))
    return sign + "".join(reversed(chunks))


def text_to_int(text: str) -> int:
    """Parse ``-?[0-9]+``; the caller has already checked the grammar."""
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if len(digits) <= _CHUNK_DIGITS:
        return int(text)
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value
