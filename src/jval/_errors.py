"""Exception types raised by the parser and by value construction."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParseErrorKind(Enum):
    """
    Classifies why a parse failed.

    Each member's value is the fixed message used in the error's text.
    """

    PREMATURE_EOF = "premature end of data"
    UNEXPECTED_CHAR = "unexpected character"
    TOO_BIG_NUMBER = "too big number"
    INVALID_UTF16_SURROGATE_PAIR = "invalid UTF-16 surrogate pair"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseErrorPosition:
    """1-based line and column, the column counted in code points."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"line {self.line} column {self.column}"


class ParseError(ValueError):
    """
    Reports the first grammar violation found in a JSON document.

    Carries the failure kind and the exact position where it was detected,
    so callers get either a complete value tree or one located error.
    """

    def __init__(self, kind: ParseErrorKind, position: ParseErrorPosition):
        if not isinstance(kind, ParseErrorKind):
            raise TypeError("kind must be a ParseErrorKind")
        if not isinstance(position, ParseErrorPosition):
            raise TypeError("position must be a ParseErrorPosition")

        self.kind = kind
        self.position = position

        super().__init__(f"{kind} at {position}")

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.kind, self.position))


class NonFiniteNumberError(ValueError):
    """Raised when a NaN or infinite value is turned into a JSON number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Out of range float values are not JSON compliant: {value!r}"
        )
