from __future__ import annotations

import json
from pathlib import Path

from hikaku.constants import LEFT_LABEL, RIGHT_LABEL
from hikaku.diff.models import FileComparison, Finding, TreeDiffResult
from hikaku.diff.values import format_value


def render_finding(finding: Finding) -> str:
    if finding.kind == "missing_in_right":
        return f"Key '{finding.path}' is missing in {RIGHT_LABEL}.\n"
    if finding.kind == "missing_in_left":
        return f"Key '{finding.path}' is missing in {LEFT_LABEL}.\n"

    left = format_value(finding.left)
    right = format_value(finding.right)
    return f"Difference in '{finding.path}':\n  {LEFT_LABEL}: {left}\n  {RIGHT_LABEL}: {right}\n"


def render_file_comparison(comparison: FileComparison) -> str:
    """Console text for one file pair; empty when the pair is identical."""
    if comparison.status == "identical":
        return ""
    if comparison.status == "missing_right":
        return f"File does not exist in {RIGHT_LABEL}: {comparison.right_path}\n"
    if comparison.status == "load_error":
        return f"{comparison.error}\n"

    lines = [render_finding(finding) for finding in comparison.findings]
    lines.append(f"Differences found in the file above: {comparison.relative_path}\n")
    return "\n".join(lines)


def render_summary(result: TreeDiffResult) -> str:
    summary = result.summary()
    return (
        f"Compared {summary['files_compared']} file(s): "
        f"{summary['identical']} identical, {summary['different']} different, "
        f"{summary['missing_right']} missing in {RIGHT_LABEL}, {summary['load_errors']} load error(s)"
    )


def write_json_report(result: TreeDiffResult, json_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
