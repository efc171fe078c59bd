"""Structural diff of JSON documents and of directory trees of JSON files."""
from __future__ import annotations

from hikaku.diff.comparator import arrays_equal, compare_documents, compare_objects, compare_values, has_differences
from hikaku.diff.models import FileComparison, Finding, TreeDiffResult
from hikaku.diff.values import EXACT, NumberPolicy, json_kind
from hikaku.diff.walker import compare_json_files, compare_trees, discover_json_files, iter_tree_diff

__all__ = [
    "EXACT",
    "FileComparison",
    "Finding",
    "NumberPolicy",
    "TreeDiffResult",
    "arrays_equal",
    "compare_documents",
    "compare_json_files",
    "compare_objects",
    "compare_trees",
    "compare_values",
    "discover_json_files",
    "has_differences",
    "iter_tree_diff",
    "json_kind",
]
