"""
JSON value tree and the finite number wrapper it stores.

Every JSON document maps onto exactly one of six variants. Objects keep
unique keys and always iterate in sorted key order, so rendering a tree
is deterministic regardless of how it was built.
"""

from __future__ import annotations

import math
from abc import ABC
from abc import abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from operator import itemgetter
from typing import Any
from typing import Self
from typing import TypeAlias

from jval._errors import NonFiniteNumberError

# Native Python shapes accepted by from_python() and produced by to_python()
PythonJson: TypeAlias = (
    None
    | bool
    | int
    | float
    | str
    | list["PythonJson"]
    | tuple["PythonJson", ...]
    | dict[str, "PythonJson"]
)


@dataclass(frozen=True, order=True)
class FiniteNumber:
    """
    A float guaranteed to be neither NaN nor infinite.

    Integers are accepted and stored as floats; any input whose float
    value is not finite raises NonFiniteNumberError.
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(
            self.value, int | float
        ):
            raise TypeError(
                f"value must be int or float, not {type(self.value).__name__}"
            )
        try:
            as_float = float(self.value)
        except OverflowError as e:
            raise NonFiniteNumberError(self.value) from e
        if not math.isfinite(as_float):
            raise NonFiniteNumberError(self.value)
        object.__setattr__(self, "value", as_float)

    @classmethod
    def of(cls, value: float) -> Self | None:
        """Returns the wrapped number, or None if value is not finite."""
        try:
            return cls(value)
        except NonFiniteNumberError:
            return None

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)


class Value(ABC):
    """
    Base class of the JSON value variants.

    str() renders compact JSON; format(value, "#") renders it pretty-printed.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Converts the tree to native Python objects."""

    def __str__(self) -> str:
        from jval._stringify import stringify

        return stringify(self)

    def __format__(self, format_spec: str) -> str:
        from jval._stringify import stringify

        if format_spec == "":
            return stringify(self)
        if format_spec == "#":
            return stringify(self, pretty=True)
        raise ValueError(
            f"Unknown format code {format_spec!r} for {type(self).__name__}"
        )


@dataclass(frozen=True)
class Null(Value):
    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Boolean(Value):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(
                f"value must be bool, not {type(self.value).__name__}"
            )

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number(Value):
    value: FiniteNumber

    def __post_init__(self) -> None:
        if not isinstance(self.value, FiniteNumber):
            raise TypeError(
                "value must be FiniteNumber, "
                f"not {type(self.value).__name__}"
            )

    @classmethod
    def from_float(cls, value: float) -> Self:
        return cls(FiniteNumber(value))

    def to_python(self) -> float:
        return self.value.value


@dataclass(frozen=True)
class String(Value):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"value must be str, not {type(self.value).__name__}"
            )

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Array(Value):
    """Ordered sequence of values."""

    items: list[Value] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.items, list):
            raise TypeError(
                f"items must be a list, not {type(self.items).__name__}"
            )
        for item in self.items:
            if not isinstance(item, Value):
                raise TypeError(
                    f"items must be Values, not {type(item).__name__}"
                )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Object(Value):
    """
    Mapping from unique string keys to values.

    Iteration follows sorted key order, never insertion order.
    """

    members: dict[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.members, dict):
            raise TypeError(
                "members must be a dict, "
                f"not {type(self.members).__name__}"
            )
        for key, value in self.members.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"keys must be strings, not {type(key).__name__}"
                )
            if not isinstance(value, Value):
                raise TypeError(
                    f"members must be Values, not {type(value).__name__}"
                )

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> list[str]:
        return sorted(self.members)

    def items(self) -> list[tuple[str, Value]]:
        return sorted(self.members.items(), key=itemgetter(0))

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.items()}


def from_python(obj: PythonJson | Value) -> Value:  # noqa: PLR0911
    """
    Builds a value tree from native Python literals.

    Accepts None, bool, int, float, str, list, tuple, dict with str keys,
    and Value instances, which are kept as they are.
    """
    if isinstance(obj, Value):
        return obj
    elif obj is None:
        return Null()
    elif isinstance(obj, bool):
        return Boolean(obj)
    elif isinstance(obj, int | float):
        return Number(FiniteNumber(obj))
    elif isinstance(obj, str):
        return String(obj)
    elif isinstance(obj, list | tuple):
        return Array([from_python(item) for item in obj])
    elif isinstance(obj, dict):
        members: dict[str, Value] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be strings, not {type(key).__name__}"
                raise TypeError(msg)
            members[key] = from_python(value)
        return Object(members)
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)
