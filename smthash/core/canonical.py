"""
Structural canonicalization for JSON-like objects.

Serializes an object tree into one deterministic form, independent of the
insertion order of its mapping keys. Nothing is hashed here.

Formats:
  - json:    sorted keys, no whitespace, UTF-8 text, no NaN/Infinity -> str
  - msgpack: keys sorted recursively, bin type for bytes -> bytes

Supported types: dict (str keys), list, tuple, str, int, float, bool, None.
bytes is accepted by msgpack only.
"""

from __future__ import annotations

import json
import math
from typing import Any, Union

import msgpack

from smthash.exceptions import NormalizationError

CANONICAL_FORMATS = ("json", "msgpack")

_MSGPACK_INT_MIN = -(2 ** 63)
_MSGPACK_INT_MAX = 2 ** 64 - 1


def canonical_serialize(obj: Any, fmt: str = "json") -> Union[str, bytes]:
    if fmt not in CANONICAL_FORMATS:
        raise NormalizationError(f"Unknown canonical format: {fmt!r}")

    # int digit limit, nesting depth and lone surrogates surface from the stdlib
    try:
        _validate(obj, fmt, set())
        if fmt == "json":
            return json.dumps(
                obj,
                sort_keys=True,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        return msgpack.packb(_sorted_tree(obj), use_bin_type=True)
    except (ValueError, RecursionError) as e:
        raise NormalizationError(str(e)) from e


def _sorted_tree(obj: Any) -> Any:
    # msgpack writes maps in iteration order
    if isinstance(obj, dict):
        return {k: _sorted_tree(obj[k]) for k in sorted(obj)}
    if isinstance(obj, (list, tuple)):
        return [_sorted_tree(x) for x in obj]
    return obj


def _validate(obj: Any, fmt: str, path: set) -> None:
    """Recursively check types; `path` holds ids of the enclosing containers."""
    if obj is None or isinstance(obj, (bool, str)):
        return

    if isinstance(obj, int):
        if fmt == "msgpack" and not _MSGPACK_INT_MIN <= obj <= _MSGPACK_INT_MAX:
            raise NormalizationError(f"Integer out of msgpack range: {obj}")
        return

    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise NormalizationError(f"Non-finite float not allowed: {obj}")
        return

    if isinstance(obj, (bytes, bytearray)):
        if fmt != "msgpack":
            raise NormalizationError(f"Unsupported type for {fmt}: {type(obj).__name__}")
        return

    if isinstance(obj, (dict, list, tuple)):
        if id(obj) in path:
            raise NormalizationError("Cyclic structure detected")
        path.add(id(obj))
        if isinstance(obj, dict):
            for key, value in obj.items():
                if not isinstance(key, str):
                    raise NormalizationError(
                        f"Dictionary keys must be strings, got {type(key).__name__}"
                    )
                _validate(value, fmt, path)
        else:
            for item in obj:
                _validate(item, fmt, path)
        path.discard(id(obj))
        return

    raise NormalizationError(f"Unsupported type: {type(obj).__name__}")
