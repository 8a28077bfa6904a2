"""Value types on either side of the codec.

``deserialize`` always produces ``JSONValue`` built from ``list`` and
``dict``. ``serialize`` is more lenient and takes ``JSONInput``: tuples are
written as arrays and any ``Mapping`` is written as an object.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]

JSONInput: TypeAlias = (
    JSONScalar
    | list["JSONInput"]
    | tuple["JSONInput", ...]
    | Mapping[str, "JSONInput"]
)
