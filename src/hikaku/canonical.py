from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any


def _normalize_float(value: float) -> int | float | str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # 1.0 and 1 are the same JSON number; keep a single spelling.
    if value.is_integer():
        return int(value)
    return value


def normalize_for_json(value: Any) -> Any:
    """Return ``value`` with sorted mapping keys and one spelling per number."""
    if isinstance(value, Mapping):
        return {str(k): normalize_for_json(value[k]) for k in sorted(value.keys(), key=str)}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [normalize_for_json(item) for item in value]
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, bool) or value is None or isinstance(value, (str, int)):
        return value
    if isinstance(value, float):
        return _normalize_float(value)
    return str(value)


def canonical_dumps(value: Any) -> str:
    normalized = normalize_for_json(value)
    return json.dumps(normalized, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def pretty_dumps(value: Any, indent: int = 2) -> str:
    """Indented rendering used for exported files; key order is preserved."""
    return json.dumps(value, indent=indent, ensure_ascii=False) + "\n"


__all__ = ["canonical_dumps", "normalize_for_json", "pretty_dumps"]
