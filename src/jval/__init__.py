"""
Strict JSON value model with a parser and serializer.

Parses text into a tree of typed values (Null, Boolean, Number, String,
Array, Object), reporting the first grammar violation with its line and
column, and renders trees back to compact or pretty-printed JSON.
"""

from __future__ import annotations

from typing import IO
from typing import Any

from jval._errors import NonFiniteNumberError
from jval._errors import ParseError
from jval._errors import ParseErrorKind
from jval._errors import ParseErrorPosition
from jval._parser import Parser
from jval._parser import parse
from jval._profile import HotPathStats
from jval._profile import ProfileContext
from jval._profile import clear_hot_path_stats
from jval._profile import get_hot_path_stats
from jval._scan import ScanState
from jval._stringify import JsonWriter
from jval._stringify import StringifyConfig
from jval._stringify import stringify
from jval._stringify import write
from jval._value import Array
from jval._value import Boolean
from jval._value import FiniteNumber
from jval._value import Null
from jval._value import Number
from jval._value import Object
from jval._value import PythonJson
from jval._value import String
from jval._value import Value
from jval._value import from_python

__version__ = "0.1.0"


def loads(s: str) -> Any:
    """
    Parses a JSON string into native Python objects.

    Numbers come back as floats and objects as dicts in sorted key order.
    """
    return parse(s).to_python()


def dumps(obj: PythonJson | Value, pretty: bool = False) -> str:
    """Serializes native Python objects (or a value tree) to a JSON string."""
    return stringify(from_python(obj), pretty=pretty)


def load(fp: IO[str]) -> Any:
    """Parses JSON read from a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read())


def dump(obj: PythonJson | Value, fp: IO[str], pretty: bool = False) -> None:
    """Serializes obj as JSON to a file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    write(from_python(obj), fp, pretty=pretty)


__all__ = [
    "Array",
    "Boolean",
    "FiniteNumber",
    "HotPathStats",
    "JsonWriter",
    "NonFiniteNumberError",
    "Null",
    "Number",
    "Object",
    "ParseError",
    "ParseErrorKind",
    "ParseErrorPosition",
    "Parser",
    "ProfileContext",
    "PythonJson",
    "ScanState",
    "String",
    "StringifyConfig",
    "Value",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "from_python",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "stringify",
    "write",
]
