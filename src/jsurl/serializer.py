"""Value -> text.

Every value is written with a leading ``~``. Arrays and objects share the
``~( ... )`` brackets; an array is recognised by the ``~`` that follows the
opening parenthesis, which is why an empty array is ``~(~)`` while an empty
object is ``~()``.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import math

from jsurl.escape import encode_text
from jsurl.integers import int_to_text
from jsurl.json_types import JSONInput

logger = logging.getLogger(__name__)


def serialize(value: JSONInput) -> str:
    out: list[str] = []
    _write_value(value, out, path="$")
    return "".join(out)


def _write_value(value: object, out: list[str], *, path: str) -> None:
    match value:
        case None:
            out.append("~null")
        case bool():
            out.append("~true" if value else "~false")
        case int():
            out.append("~" + int_to_text(value))
        case float():
            _write_float(value, out, path=path)
        case str():
            out.append("~'")
            out.append(encode_text(value))
        case list() | tuple():
            _write_array(value, out, path=path)
        case Mapping():
            _write_object(value, out, path=path)
        case _:
            raise TypeError(
                "jsurl cannot serialize value of type "
                f"{type(value).__name__} at {path}"
            )


def _write_float(value: float, out: list[str], *, path: str) -> None:
    if not math.isfinite(value):
        # No wire symbol exists for inf/nan.
        logger.debug("non-finite float %r at %s serialized as null", value, path)
        out.append("~null")
        return
    out.append("~" + float.__repr__(value))


def _write_array(
    items: list[object] | tuple[object, ...],
    out: list[str],
    *,
    path: str,
) -> None:
    out.append("~(")
    if not items:
        out.append("~")
    for index, item in enumerate(items):
        _write_value(item, out, path=f"{path}[{index}]")
    out.append(")")


def _write_object(mapping: Mapping[object, object], out: list[str], *, path: str) -> None:
    out.append("~(")
    for index, (key, item) in enumerate(mapping.items()):
        if index:
            out.append("~")
        key_text = str(key)
        out.append(encode_text(key_text))
        _write_value(item, out, path=f"{path}.{key_text}")
    out.append(")")
