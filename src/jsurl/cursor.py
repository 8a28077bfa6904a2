from __future__ import annotations

from dataclasses import dataclass

from jsurl.exceptions import UnexpectedCharacter, UnexpectedEndOfInput


@dataclass
class Cursor:
    """Forward-only index over the code points of an input text.

    Python strings are already random-access sequences of code points, so
    lookahead is a plain index offset and never needs to copy the cursor.
    """

    text: str
    pos: int = 0

    def peek(self, offset: int = 0) -> str | None:
        index = self.pos + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def take(self, *, expected: tuple[str, ...] = ()) -> str:
        char = self.peek()
        if char is None:
            raise UnexpectedEndOfInput(position=self.pos, expected=expected)
        self.pos += 1
        return char

    def eat(self, expected: str) -> None:
        char = self.take(expected=(expected,))
        if char != expected:
            raise UnexpectedCharacter(
                char,
                position=self.pos - 1,
                expected=(expected,),
            )

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def remainder(self) -> str:
        return self.text[self.pos :]
