"""
Recursive-descent JSON parser.

Follows the JSON grammar exactly, with no extensions:

    element := ws value ws
    value   := "null" | "true" | "false" | number | string | array | object
    member  := ws string ws ":" element

Each rule peeks one character, so the first violation is reported where
it occurs and aborts the whole parse.
"""

import math

from jval._errors import ParseError
from jval._errors import ParseErrorKind
from jval._escapes import DIGITS
from jval._escapes import HEX_DIGITS
from jval._escapes import MIN_VALID_STRING_CHAR
from jval._escapes import PARSE_ESCAPE
from jval._escapes import WHITESPACE
from jval._profile import ProfileContext
from jval._scan import ScanState
from jval._value import Array
from jval._value import Boolean
from jval._value import FiniteNumber
from jval._value import Null
from jval._value import Number
from jval._value import Object
from jval._value import String
from jval._value import Value

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


class Parser:
    """
    Builds a value tree from text, driving a ScanState character by character.

    A parser instance is single-use: it owns the cursor for one document.
    """

    def __init__(self, text: str) -> None:
        self.state = ScanState(text)

    def parse(self) -> Value:
        """Parses one element and requires the input to end after it."""
        element = self.parse_element()
        if not self.state.at_end():
            raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)
        return element

    def parse_element(self) -> Value:
        self.skip_ws()
        value = self.parse_value()
        self.skip_ws()
        return value

    def parse_value(self) -> Value:  # noqa: PLR0911
        peeked = self.state.peek()
        if peeked == "n":
            self.expect_str("null")
            return Null()
        elif peeked == "t":
            self.expect_str("true")
            return Boolean(True)
        elif peeked == "f":
            self.expect_str("false")
            return Boolean(False)
        elif peeked == "-" or peeked in DIGITS:
            return Number(self.parse_number())
        elif peeked == '"':
            return String(self.parse_string())
        elif peeked == "[":
            return self.parse_array()
        elif peeked == "{":
            return self.parse_object()
        else:
            raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)

    def expect_str(self, literal: str) -> None:
        for char in literal:
            self.expect_char(char)

    def expect_char(self, expected: str) -> None:
        peeked = self.state.peek()
        if peeked != expected:
            raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)
        self.state.advance(peeked)

    def _consume_digits(self, buf: list[str]) -> None:
        """Consumes zero or more ASCII digits."""
        while (peeked := self.state.lookahead()) is not None and (
            peeked in DIGITS
        ):
            buf.append(peeked)
            self.state.advance(peeked)

    def _require_digits(self, buf: list[str]) -> None:
        """Consumes one or more ASCII digits."""
        peeked = self.state.peek()
        if peeked not in DIGITS:
            raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)
        buf.append(peeked)
        self.state.advance(peeked)
        self._consume_digits(buf)

    def parse_number(self) -> FiniteNumber:
        """
        Parses a number literal into a finite float.

        An overflowing literal is reported at its first character rather
        than where scanning stopped.
        """
        start = self.state.position
        buf: list[str] = []

        # integer: -?(0|[1-9][0-9]*)
        if self.state.lookahead() == "-":
            buf.append("-")
            self.state.advance("-")
        peeked = self.state.peek()
        if peeked == "0":
            buf.append(peeked)
            self.state.advance(peeked)
        elif peeked in DIGITS:
            buf.append(peeked)
            self.state.advance(peeked)
            self._consume_digits(buf)
        else:
            raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)

        # fraction: (.[0-9]+)?
        if self.state.lookahead() == ".":
            buf.append(".")
            self.state.advance(".")
            self._require_digits(buf)

        # exponent: ([eE][+-]?[0-9]+)?
        if (marker := self.state.lookahead()) in ("e", "E"):
            buf.append(marker)
            self.state.advance(marker)
            if (sign := self.state.lookahead()) in ("+", "-"):
                buf.append(sign)
                self.state.advance(sign)
            self._require_digits(buf)

        converted = float("".join(buf))
        # The lexeme grammar rules out NaN; only overflow is possible here.
        if math.isinf(converted):
            raise ParseError(ParseErrorKind.TOO_BIG_NUMBER, start)
        return FiniteNumber(converted)

    def parse_string(self) -> str:
        self.expect_char('"')
        buf: list[str] = []
        while True:
            peeked = self.state.peek()
            if peeked == '"':
                self.state.advance(peeked)
                break
            if peeked == "\\":
                buf.append(self.parse_escape())
            elif peeked >= MIN_VALID_STRING_CHAR:
                buf.append(peeked)
                self.state.advance(peeked)
            else:
                raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)
        return "".join(buf)

    def parse_escape(self) -> str:
        """
        Decodes one backslash escape into a single character.

        A \\u escape naming a UTF-16 surrogate must be followed by a second
        \\u escape; if the two units do not form a high/low pair the error
        points at the backslash of the first one.
        """
        start = self.state.position
        self.expect_char("\\")
        peeked = self.state.peek()
        raw = PARSE_ESCAPE.get(peeked)
        if raw is not None:
            self.state.advance(peeked)
            return raw
        if peeked != "u":
            raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)

        self.state.advance(peeked)
        unit = self.parse_hex_4()
        if unit not in _HIGH_SURROGATES and unit not in _LOW_SURROGATES:
            return chr(unit)

        # second half of a surrogate pair
        self.expect_char("\\")
        self.expect_char("u")
        unit_2 = self.parse_hex_4()
        if unit not in _HIGH_SURROGATES or unit_2 not in _LOW_SURROGATES:
            raise ParseError(
                ParseErrorKind.INVALID_UTF16_SURROGATE_PAIR, start
            )
        return chr(0x10000 + ((unit - 0xD800) << 10) + (unit_2 - 0xDC00))

    def parse_hex_4(self) -> int:
        """Reads exactly four ASCII hex digits as one UTF-16 code unit."""
        unit = 0
        for _ in range(4):
            peeked = self.state.peek()
            digit = HEX_DIGITS.get(peeked)
            if digit is None:
                raise self.state.error(ParseErrorKind.UNEXPECTED_CHAR)
            unit = (unit << 4) | digit
            self.state.advance(peeked)
        return unit

    def parse_array(self) -> Array:
        self.expect_char("[")
        self.skip_ws()
        items: list[Value] = []
        while True:
            peeked = self.state.peek()
            if peeked == "]":
                self.state.advance(peeked)
                break
            if items:
                self.expect_char(",")
            items.append(self.parse_element())
        return Array(items)

    def parse_object(self) -> Object:
        """Parses an object; a repeated key keeps its last value."""
        self.expect_char("{")
        self.skip_ws()
        members: dict[str, Value] = {}
        first = True
        while True:
            peeked = self.state.peek()
            if peeked == "}":
                self.state.advance(peeked)
                break
            if not first:
                self.expect_char(",")
            key, value = self.parse_member()
            members[key] = value
            first = False
        return Object(members)

    def parse_member(self) -> tuple[str, Value]:
        self.skip_ws()
        key = self.parse_string()
        self.skip_ws()
        self.expect_char(":")
        value = self.parse_element()
        return key, value

    def skip_ws(self) -> None:
        while (peeked := self.state.lookahead()) is not None and (
            peeked in WHITESPACE
        ):
            self.state.advance(peeked)


def parse(text: str) -> Value:
    """
    Parses a complete JSON document into a value tree.

    Raises ParseError, located at line and column, on the first violation.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    with ProfileContext("parse", len(text)):
        return Parser(text).parse()
