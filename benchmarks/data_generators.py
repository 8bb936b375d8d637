"""
Document generators for validation benchmarks.

Every generator returns UTF-8 encoded bytes, the form jcheck consumes:
- Small and large records of mixed scalars
- Wide arrays of numbers in every JSON number shape
- Deep nesting of alternating arrays and objects
- String-heavy content with escapes and raw multi-byte text
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_ESCAPE_PROBABILITY = 0.3
_NON_ASCII_PROBABILITY = 0.1
_NON_ASCII_CHARS = "éßøΩЖ中文€😀"
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]

DATA_TYPES = (
    "small_object",
    "large_object",
    "number_array",
    "deep_nesting",
    "string_heavy",
)


def generate_test_data(data_type: str, seed: int = 0) -> bytes:
    """Generates an encoded JSON document of the given type."""
    generators: dict[str, Callable[[random.Random], bytes]] = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "number_array": _generate_number_array,
        "deep_nesting": _generate_deep_nesting,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(seed))


def _encode(value: Any) -> bytes:
    return json.dumps(value, ensure_ascii=False).encode("utf-8")


def _generate_small_object(rng: random.Random) -> bytes:
    return _encode(
        {
            "id": rng.randint(1, 10_000),
            "name": _random_string(rng, 12),
            "active": rng.choice([True, False]),
            "score": round(rng.uniform(0, 100), 2),
            "tags": [_random_string(rng, 6) for _ in range(3)],
            "parent": None,
        }
    )


def _generate_large_object(rng: random.Random) -> bytes:
    """Generates a record set of roughly 100KB."""
    records = {
        f"record_{i:05d}": {
            "id": i,
            "label": _random_string(rng, 24),
            "balance": round(rng.uniform(-1e6, 1e6), 4),
            "flags": [rng.choice([True, False, None]) for _ in range(4)],
            "history": [rng.randint(0, 1 << 40) for _ in range(5)],
        }
        for i in range(600)
    }
    return _encode({"records": records, "count": len(records)})


def _generate_number_array(rng: random.Random) -> bytes:
    """Generates numbers covering sign, fraction and exponent forms."""
    parts = []
    for _ in range(5000):
        mantissa = str(rng.randint(0, 10**9))
        if rng.random() < 0.5:
            mantissa = "-" + mantissa
        if rng.random() < 0.5:
            mantissa += "." + str(rng.randint(0, 10**6))
        if rng.random() < 0.3:
            exponent = rng.choice(["e", "E"]) + rng.choice(["", "+", "-"])
            mantissa += exponent + str(rng.randint(0, 300))
        parts.append(mantissa)
    return ("[" + ",".join(parts) + "]").encode("ascii")


def _generate_deep_nesting(rng: random.Random) -> bytes:
    """Generates alternating arrays and objects 500 levels deep."""
    depth = 500
    opening = []
    closing = []
    for level in range(depth):
        if level % 2:
            opening.append('{"k%d":' % rng.randint(0, 9))
            closing.append("}")
        else:
            opening.append("[")
            closing.append("]")
    return ("".join(opening) + "0" + "".join(reversed(closing))).encode()


def _generate_string_heavy(rng: random.Random) -> bytes:
    """Generates JSON with many escapes and non-ASCII characters."""

    def create_string() -> str:
        chars = []
        for _ in range(60):
            roll = rng.random()
            if roll < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            elif roll < _ESCAPE_PROBABILITY + _NON_ASCII_PROBABILITY:
                chars.append(rng.choice(_NON_ASCII_CHARS))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return "".join(chars)

    strings = ",".join(f'"{create_string()}"' for _ in range(300))
    unicode = ",".join(
        f'"\\u{rng.randint(0x0020, 0xD7FF):04x}"' for _ in range(300)
    )
    return f'{{"strings":[{strings}],"unicode":[{unicode}]}}'.encode()


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
