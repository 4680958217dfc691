"""
Document generators for the benchmarks.

Each generator returns JSON text built with the standard library, seeded so
every library under comparison sees the same document:
- small/large objects
- arrays of mixed scalars
- deep nesting
- escape-heavy strings, including surrogate pairs
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
)


def generate_test_data(data_type: str) -> str:
    """Generates the JSON document named by data_type."""
    generators: dict[str, Callable[[random.Random], Any]] = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
    }
    rng = random.Random(_SEED)

    if data_type == "string_heavy":
        return _string_heavy(rng)
    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return json.dumps(generators[data_type](rng))


def _small_object(rng: random.Random) -> dict[str, Any]:
    return {
        "id": rng.randint(1, 99999),
        "name": _word(rng, 12),
        "active": rng.choice([True, False]),
        "balance": round(rng.uniform(0, 10000), 2),
        "tags": [_word(rng, 5) for _ in range(3)],
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": None},
    }


def _large_object(rng: random.Random) -> dict[str, Any]:
    return {
        "owner": _small_object(rng),
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "status": rng.choice(["completed", "pending", "failed"]),
                "note": _word(rng, 24),
            }
            for i in range(80)
        ],
        "scores": [rng.random() for _ in range(100)],
    }


def _mixed_array(rng: random.Random) -> list[Any]:
    makers: list[Callable[[], Any]] = [
        lambda: rng.randint(-1000, 1000),
        lambda: rng.uniform(-1e6, 1e6),
        lambda: rng.uniform(-1, 1) * 10.0 ** rng.randint(-300, 300),
        lambda: _word(rng, rng.randint(1, 30)),
        lambda: rng.choice([True, False]),
        lambda: None,
    ]
    return [rng.choice(makers)() for _ in range(400)]


def _nested_structure(rng: random.Random) -> dict[str, Any]:
    def level(depth: int) -> dict[str, Any]:
        if depth == 0:
            return {"leaf": _word(rng, 8)}
        return {
            "depth": depth,
            "children": [level(depth - 1) for _ in range(2)],
            "next": level(depth - 1),
        }

    return level(7)


def _string_heavy(rng: random.Random) -> str:
    """Builds raw JSON text so escapes appear literally in the document."""

    def escaped(length: int) -> str:
        chars = []
        for _ in range(length):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return '"' + "".join(chars) + '"'

    strings = ",".join(escaped(50) for _ in range(100))
    units = ",".join(
        f'"\\u{rng.randint(0x20, 0x7E):04x}\\uD83E\\uDDE1"' for _ in range(50)
    )
    return f'{{"strings":[{strings}],"unicode":[{units}]}}'


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
