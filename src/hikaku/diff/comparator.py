"""Structural comparison of two decoded JSON documents.

Arrays are compared as multisets of their canonical encodings, objects key by
key, numbers through a :class:`NumberPolicy`, and everything else by deep
equality. Findings are returned in traversal order and comparison never
stops at the first divergence.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from hikaku.canonical import canonical_dumps
from hikaku.diff.models import Finding
from hikaku.diff.values import EXACT, NumberPolicy, json_kind


def arrays_equal(left: Sequence[Any], right: Sequence[Any]) -> bool:
    if len(left) != len(right):
        return False
    return sorted(canonical_dumps(item) for item in left) == sorted(canonical_dumps(item) for item in right)


def _mismatch(path: str, left: Any, right: Any) -> list[Finding]:
    return [Finding(kind="value_mismatch", path=path, left=left, right=right)]


def compare_objects(
    path: str,
    left: Mapping[str, Any],
    right: Mapping[str, Any],
    policy: NumberPolicy = EXACT,
) -> list[Finding]:
    findings: list[Finding] = []
    for key, left_value in left.items():
        key_path = f"{path}.{key}"
        if key in right:
            findings.extend(compare_values(key_path, left_value, right[key], policy))
        else:
            findings.append(Finding(kind="missing_in_right", path=key_path, left=left_value))

    for key, right_value in right.items():
        if key not in left:
            findings.append(Finding(kind="missing_in_left", path=f"{path}.{key}", right=right_value))
    return findings


def compare_values(path: str, left: Any, right: Any, policy: NumberPolicy = EXACT) -> list[Finding]:
    left_kind = json_kind(left)
    right_kind = json_kind(right)

    if left_kind == "number":
        if right_kind != "number" or not policy.equal(left, right):
            return _mismatch(path, left, right)
        return []

    if left_kind == "array":
        if right_kind != "array" or not arrays_equal(left, right):
            return _mismatch(path, left, right)
        return []

    if left_kind == "object":
        if right_kind != "object":
            return _mismatch(path, left, right)
        return compare_objects(path, left, right, policy)

    # string, boolean, null
    if left_kind != right_kind or left != right:
        return _mismatch(path, left, right)
    return []


def compare_documents(left: Any, right: Any, path: str = "", policy: NumberPolicy = EXACT) -> list[Finding]:
    return compare_values(path, left, right, policy)


def has_differences(left: Any, right: Any, policy: NumberPolicy = EXACT) -> bool:
    return bool(compare_documents(left, right, policy=policy))


__all__ = ["arrays_equal", "compare_documents", "compare_objects", "compare_values", "has_differences"]
