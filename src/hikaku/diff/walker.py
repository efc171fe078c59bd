from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from hikaku.constants import JSON_SUFFIX, LEFT_LABEL, RIGHT_LABEL
from hikaku.diff.comparator import compare_documents
from hikaku.diff.models import FileComparison, TreeDiffResult
from hikaku.diff.values import EXACT, NumberPolicy
from hikaku.logging import get_logger

logger = get_logger(__name__)


def load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def discover_json_files(root: Path) -> list[Path]:
    """Relative paths of every ``*.json`` file under ``root``, sorted per directory."""
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            if name.endswith(JSON_SUFFIX):
                found.append((Path(dirpath) / name).relative_to(root))
    return found


def compare_json_files(
    left_path: Path,
    right_path: Path,
    relative_path: str,
    policy: NumberPolicy = EXACT,
) -> FileComparison:
    comparison = FileComparison(
        relative_path=relative_path,
        left_path=str(left_path),
        right_path=str(right_path),
        status="identical",
    )
    documents: list[Any] = []
    for label, path in ((LEFT_LABEL, left_path), (RIGHT_LABEL, right_path)):
        try:
            documents.append(load_json(path))
        except (OSError, ValueError, RecursionError) as exc:
            comparison.status = "load_error"
            comparison.error = f"Failed to load {label} JSON file {path}: {exc}"
            logger.debug(comparison.error)
            return comparison

    left_document, right_document = documents
    try:
        comparison.findings = compare_documents(left_document, right_document, path=relative_path, policy=policy)
    except RecursionError:
        comparison.status = "load_error"
        comparison.error = f"Failed to compare {relative_path}: documents nested too deeply"
        logger.debug(comparison.error)
        return comparison
    if comparison.findings:
        comparison.status = "different"
    return comparison


def iter_tree_diff(left_root: Path, right_root: Path, policy: NumberPolicy = EXACT) -> Iterator[FileComparison]:
    """Compare every JSON file under ``left_root`` with its twin under ``right_root``."""
    for relative in discover_json_files(left_root):
        left_path = left_root / relative
        right_path = right_root / relative
        relative_text = relative.as_posix()
        if not right_path.exists():
            logger.debug("No counterpart for %s", relative_text)
            yield FileComparison(
                relative_path=relative_text,
                left_path=str(left_path),
                right_path=str(right_path),
                status="missing_right",
            )
            continue
        logger.debug("Comparing %s", relative_text)
        yield compare_json_files(left_path, right_path, relative_text, policy)


def compare_trees(left_root: Path, right_root: Path, policy: NumberPolicy = EXACT) -> TreeDiffResult:
    return TreeDiffResult(
        left_root=str(left_root),
        right_root=str(right_root),
        epsilon=policy.epsilon,
        files=list(iter_tree_diff(left_root, right_root, policy)),
    )


__all__ = ["compare_json_files", "compare_trees", "discover_json_files", "iter_tree_diff", "load_json"]
