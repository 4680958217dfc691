"""Character cursor with line/column tracking for a single parse."""

from jval._errors import ParseError
from jval._errors import ParseErrorKind
from jval._errors import ParseErrorPosition


class ScanState:
    """
    Tracks the next unread character and where it sits in the document.

    Every grammar rule inspects one character with peek() and then either
    consumes it with advance() or reports an error at the current position,
    so parsing never backtracks.
    """

    __slots__ = ("_column", "_length", "_line", "_pos", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._length = len(text)
        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def position(self) -> ParseErrorPosition:
        return ParseErrorPosition(self._line, self._column)

    def at_end(self) -> bool:
        return self._pos >= self._length

    def peek(self) -> str:
        """Returns the next character without consuming it."""
        if self._pos >= self._length:
            raise self.error(ParseErrorKind.PREMATURE_EOF)
        return self._text[self._pos]

    def lookahead(self) -> str | None:
        """Returns the next character, or None at end of input."""
        if self._pos >= self._length:
            return None
        return self._text[self._pos]

    def advance(self, expected: str) -> None:
        """
        Consumes the character most recently returned by peek().

        Callers must peek first, so expected always matches the next
        character. This is checked by a debug assertion only, which -O
        strips; calling advance() at end of input is a caller bug.
        """
        assert self._text[self._pos] == expected, "advance() without peek()"
        self._pos += 1
        if expected == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

    def error(self, kind: ParseErrorKind) -> ParseError:
        """Builds an error stamped with the current position."""
        return ParseError(kind, self.position)
