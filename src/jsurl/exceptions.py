"""Failures reported by ``jsurl.deserialize``."""

from __future__ import annotations


def _describe_expected(expected: tuple[str, ...]) -> str:
    # Single characters are quoted; longer entries name a category ("hex digit").
    return " or ".join(repr(item) if len(item) == 1 else item for item in expected)


class DeserializeError(ValueError):
    """Base class for every decode failure.

    ``position`` is the index (in code points) into the input text where the
    fault was detected. Errors are terminal: the parser never returns a
    partial value.
    """

    def __init__(self, message: str, *, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.reason = message
        self.position = position


class UnexpectedCharacter(DeserializeError):
    def __init__(
        self,
        found: str,
        *,
        position: int,
        expected: tuple[str, ...] = (),
    ) -> None:
        message = f"unexpected character {found!r}"
        if expected:
            message = f"{message}, expected {_describe_expected(expected)}"
        super().__init__(message, position=position)
        self.found = found
        self.expected = expected


class UnexpectedEndOfInput(DeserializeError):
    def __init__(self, *, position: int, expected: tuple[str, ...] = ()) -> None:
        message = "unexpected end of input"
        if expected:
            message = f"{message}, expected {_describe_expected(expected)}"
        super().__init__(message, position=position)
        self.expected = expected


class InvalidEscapeSequence(DeserializeError):
    """A ``*XX`` / ``**XXXX`` escape that does not name a Unicode scalar value."""

    def __init__(self, sequence: str, *, position: int, detail: str = "") -> None:
        message = f"invalid escape sequence {sequence!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, position=position)
        self.sequence = sequence


class InvalidValue(DeserializeError):
    """A bare literal that is neither ``null``/``true``/``false`` nor a number."""

    def __init__(self, literal: str, *, position: int) -> None:
        super().__init__(f"invalid value {literal!r}", position=position)
        self.literal = literal


class TrailingInput(DeserializeError):
    def __init__(self, remainder: str, *, position: int) -> None:
        super().__init__(
            f"trailing input after value ({len(remainder)} characters)",
            position=position,
        )
        self.remainder = remainder


class DepthLimitExceeded(DeserializeError):
    def __init__(self, limit: int, *, position: int) -> None:
        super().__init__(f"nesting deeper than {limit} containers", position=position)
        self.limit = limit
