from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from hikaku.constants import DEFAULT_EPSILON

JsonKind = Literal["number", "string", "boolean", "null", "array", "object"]


def json_kind(value: Any) -> JsonKind:
    """Classify a decoded JSON value; ``bool`` is checked before numbers."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return "array"
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


@dataclass(slots=True, frozen=True)
class NumberPolicy:
    """How two JSON numbers are judged equal.

    ``epsilon == 0`` is exact equality. A positive ``epsilon`` accepts any
    pair whose absolute difference is strictly smaller than it.
    """

    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        if math.isnan(self.epsilon) or self.epsilon < 0:
            raise ValueError(f"epsilon must be a non-negative number, got {self.epsilon!r}")

    @property
    def exact(self) -> bool:
        return self.epsilon == 0

    def equal(self, left: int | float, right: int | float) -> bool:
        # inf - inf is nan, so identical values must short-circuit
        if left == right:
            return True
        if self.exact:
            return False
        try:
            return abs(left - right) < self.epsilon
        except OverflowError:
            # int too large for float arithmetic; exact comparison already failed
            return False


EXACT = NumberPolicy()


def format_number(value: int | float) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_value(value: Any) -> str:
    kind = json_kind(value)
    if kind == "null":
        return "null"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return format_number(value)
    if kind == "string":
        return value
    return json.dumps(value, ensure_ascii=False)


__all__ = ["EXACT", "JsonKind", "NumberPolicy", "format_number", "format_value", "json_kind"]
