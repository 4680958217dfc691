"""Fixed escape tables shared by the parser and the serializer."""

from types import MappingProxyType
from typing import Final

# escape letter -> raw character, for the letters both directions share
_SHARED_ESCAPES: Final = (
    ('"', '"'),
    ("\\", "\\"),
    ("b", "\b"),
    ("f", "\f"),
    ("n", "\n"),
    ("r", "\r"),
    ("t", "\t"),
)

# Accepted after a backslash on input but never produced on output.
_PARSE_ONLY_ESCAPES: Final = ("/",)

PARSE_ESCAPE: Final = MappingProxyType(
    dict(_SHARED_ESCAPES) | {char: char for char in _PARSE_ONLY_ESCAPES}
)

STRINGIFY_ESCAPE: Final = MappingProxyType(
    {raw: escape for escape, raw in _SHARED_ESCAPES}
)

# Lowest code point allowed unescaped inside a string.
MIN_VALID_STRING_CHAR: Final = "\x20"

DIGITS: Final = frozenset("0123456789")
HEX_DIGITS: Final = MappingProxyType(
    {char: int(char, 16) for char in "0123456789abcdefABCDEF"}
)
WHITESPACE: Final = frozenset(" \t\n\r")
