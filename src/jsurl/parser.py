"""Text -> value.

Recursive descent over the code points of the input with at most two
characters of lookahead. Each production starts by consuming the ``~`` that
prefixes every value. The first failure is raised as a
``jsurl.exceptions.DeserializeError`` subclass; there is no recovery.
"""

from __future__ import annotations

import logging
import math
import re

from jsurl.cursor import Cursor
from jsurl.escape import RUN_TERMINATORS, decode_run
from jsurl.exceptions import (
    DepthLimitExceeded,
    DeserializeError,
    InvalidValue,
    TrailingInput,
    UnexpectedCharacter,
)
from jsurl.integers import text_to_int
from jsurl.json_types import JSONArray, JSONObject, JSONValue
from jsurl.options import CodecOptions, resolve_codec_options

logger = logging.getLogger(__name__)

_KEYWORDS: dict[str, JSONValue] = {"null": None, "true": True, "false": False}
_NUMBER_RE = re.compile(
    r"-?(?:0|[1-9][0-9]*)(?P<fraction>\.[0-9]+)?(?P<exponent>[eE][+-]?[0-9]+)?"
)
_PAIR_END = ("~", ")")


def deserialize(text: str, *, options: CodecOptions | None = None) -> JSONValue:
    resolved = resolve_codec_options(options)
    cursor = Cursor(text)
    try:
        value = _Parser(cursor, max_depth=resolved.max_depth).parse_value(depth=0)
        if not cursor.at_end():
            raise TrailingInput(cursor.remainder(), position=cursor.pos)
    except RecursionError:
        # Only reachable when max_depth is set above what the interpreter stack
        # can hold.
        error = DepthLimitExceeded(resolved.max_depth, position=cursor.pos)
        logger.debug("deserialize failed: %s: %s", type(error).__name__, error)
        raise error from None
    except DeserializeError as exc:
        logger.debug("deserialize failed: %s: %s", type(exc).__name__, exc)
        raise
    return value


def try_deserialize(
    text: str,
    default: JSONValue = None,
    *,
    options: CodecOptions | None = None,
) -> JSONValue:
    """Like ``deserialize`` but return ``default`` for undecodable text."""
    try:
        return deserialize(text, options=options)
    except DeserializeError:
        return default


class _Parser:
    def __init__(self, cursor: Cursor, *, max_depth: int) -> None:
        self.cursor = cursor
        self.max_depth = max_depth

    def parse_value(self, *, depth: int) -> JSONValue:
        cursor = self.cursor
        cursor.eat("~")
        char = cursor.take(expected=("(", "'", "literal"))
        match char:
            case "(":
                if depth >= self.max_depth:
                    raise DepthLimitExceeded(self.max_depth, position=cursor.pos - 1)
                if cursor.peek() == "~":
                    return self._parse_array(depth=depth + 1)
                return self._parse_object(depth=depth + 1)
            case "'":
                return decode_run(cursor)
            case "~" | ")":
                raise UnexpectedCharacter(char, position=cursor.pos - 1)
            case _:
                return self._parse_literal(start=cursor.pos - 1)

    def _parse_array(self, *, depth: int) -> JSONArray:
        cursor = self.cursor
        if cursor.peek(1) == ")":
            # "~(~)" is the empty array.
            cursor.advance(2)
            return []
        items: JSONArray = []
        while cursor.peek() != ")":
            items.append(self.parse_value(depth=depth))
        cursor.advance()
        return items

    def _parse_object(self, *, depth: int) -> JSONObject:
        cursor = self.cursor
        result: JSONObject = {}
        if cursor.peek() == ")":
            cursor.advance()
            return result
        while True:
            key = decode_run(cursor)
            result[key] = self.parse_value(depth=depth)
            char = cursor.take(expected=_PAIR_END)
            if char == ")":
                return result
            if char != "~":
                raise UnexpectedCharacter(
                    char,
                    position=cursor.pos - 1,
                    expected=_PAIR_END,
                )

    def _parse_literal(self, *, start: int) -> JSONValue:
        cursor = self.cursor
        while True:
            char = cursor.peek()
            if char is None or char in RUN_TERMINATORS:
                break
            cursor.advance()
        literal = cursor.text[start : cursor.pos]
        if literal in _KEYWORDS:
            return _KEYWORDS[literal]
        return _parse_number(literal, start=start)


def _parse_number(literal: str, *, start: int) -> int | float:
    match = _NUMBER_RE.fullmatch(literal)
    if match is None:
        raise InvalidValue(literal, position=start)
    if match["fraction"] is None and match["exponent"] is None:
        return text_to_int(literal)
    number = float(literal)
    if not math.isfinite(number):
        raise InvalidValue(literal, position=start)
    return number
