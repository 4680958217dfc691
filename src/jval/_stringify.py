"""
Value tree to JSON text.

Output is deterministic: object keys are written in sorted order and
numbers use the shortest representation that reads back to the same float.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from typing import Protocol

from jval._escapes import MIN_VALID_STRING_CHAR
from jval._escapes import STRINGIFY_ESCAPE
from jval._profile import ProfileContext
from jval._value import Array
from jval._value import Boolean
from jval._value import FiniteNumber
from jval._value import Null
from jval._value import Number
from jval._value import Object
from jval._value import String
from jval._value import Value

INDENT = "    "


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> Any: ...


@dataclass(frozen=True)
class StringifyConfig:
    """
    Configures JSON rendering.

    pretty puts each array element and object member on its own line,
    indented four spaces per nesting level.
    """

    pretty: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.pretty, bool):
            raise TypeError("pretty must be a boolean")


def format_number(number: FiniteNumber) -> str:
    """
    Renders a finite float in its shortest round-tripping form.

    Integral values drop their ".0" and exponents are written without a
    "+" sign or leading zeros, e.g. 100, 1e16, -5.6e-77.
    """
    text = repr(number.value)
    mantissa, marker, exponent = text.partition("e")
    if marker:
        return f"{mantissa}e{int(exponent)}"
    return text.removesuffix(".0")


def encode_string(s: str) -> str:
    """Quotes s, escaping only what JSON requires."""
    result = ['"']
    for char in s:
        escape = STRINGIFY_ESCAPE.get(char)
        if escape is not None:
            result.append("\\" + escape)
        elif char < MIN_VALID_STRING_CHAR:
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


class JsonWriter:
    """
    Walks a value tree top-down and emits JSON text through a callback.

    Writing cannot fail for a well-formed tree; recursion depth equals
    tree depth.
    """

    def __init__(self, emit: Callable[[str], Any], config: StringifyConfig):
        self.emit = emit
        self.config = config

    def write_value(self, value: Value, depth: int = 0) -> None:
        if isinstance(value, Null):
            self.emit("null")
        elif isinstance(value, Boolean):
            self.emit("true" if value.value else "false")
        elif isinstance(value, Number):
            self.emit(format_number(value.value))
        elif isinstance(value, String):
            self.emit(encode_string(value.value))
        elif isinstance(value, Array):
            self.write_array(value, depth)
        elif isinstance(value, Object):
            self.write_object(value, depth)
        else:
            msg = f"Object of type {type(value).__name__} is not a JSON value"
            raise TypeError(msg)

    def write_array(self, array: Array, depth: int) -> None:
        self.emit("[")
        if array.items:
            for i, element in enumerate(array.items):
                if i:
                    self.emit(",")
                self._newline(depth + 1)
                self.write_value(element, depth + 1)
            self._newline(depth)
        self.emit("]")

    def write_object(self, obj: Object, depth: int) -> None:
        self.emit("{")
        if obj.members:
            for i, (key, value) in enumerate(obj.items()):
                if i:
                    self.emit(",")
                self._newline(depth + 1)
                self.emit(encode_string(key))
                self.emit(": " if self.config.pretty else ":")
                self.write_value(value, depth + 1)
            self._newline(depth)
        self.emit("}")

    def _newline(self, depth: int) -> None:
        if self.config.pretty:
            self.emit("\n" + INDENT * depth)


def stringify(value: Value, pretty: bool = False) -> str:
    """Renders value as compact JSON, or indented JSON when pretty is set."""
    config = StringifyConfig(pretty=pretty)
    chunks: list[str] = []
    with ProfileContext("stringify"):
        JsonWriter(chunks.append, config).write_value(value)
    return "".join(chunks)


def write(value: Value, sink: SupportsWrite, pretty: bool = False) -> None:
    """Writes the JSON text of value to sink."""
    if not hasattr(sink, "write"):
        raise TypeError("sink must have a write() method")

    config = StringifyConfig(pretty=pretty)
    with ProfileContext("write"):
        JsonWriter(sink.write, config).write_value(value)
