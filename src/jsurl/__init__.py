"""URL-safe compact encoding of JSON-like values.

>>> serialize({"name": "John Doe", "age": 42, "children": ["Mary", "Bill"]})
"~(name~'John*20Doe~age~42~children~(~'Mary~'Bill))"
"""

from jsurl.exceptions import (
    DepthLimitExceeded,
    DeserializeError,
    InvalidEscapeSequence,
    InvalidValue,
    TrailingInput,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
)
from jsurl.options import CodecOptions, codec_options_scope
from jsurl.parser import deserialize, try_deserialize
from jsurl.serializer import serialize

__all__ = [
    "__version__",
    "CodecOptions",
    "DepthLimitExceeded",
    "DeserializeError",
    "InvalidEscapeSequence",
    "InvalidValue",
    "TrailingInput",
    "UnexpectedCharacter",
    "UnexpectedEndOfInput",
    "codec_options_scope",
    "deserialize",
    "serialize",
    "try_deserialize",
]

__version__ = "0.1.0"
