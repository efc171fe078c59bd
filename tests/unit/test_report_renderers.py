from __future__ import annotations

import json
from pathlib import Path

from hikaku.diff.models import FileComparison, Finding, TreeDiffResult
from hikaku.report import render_file_comparison, render_finding, render_summary, write_json_report


def test_render_value_mismatch() -> None:
    text = render_finding(Finding(kind="value_mismatch", path="u.json.a", left=1.0, right="x"))
    assert text == "Difference in 'u.json.a':\n  dirA: 1\n  dirB: x\n"


def test_render_missing_keys() -> None:
    assert render_finding(Finding(kind="missing_in_right", path=".a")) == "Key '.a' is missing in dirB.\n"
    assert render_finding(Finding(kind="missing_in_left", path=".c")) == "Key '.c' is missing in dirA.\n"


def test_render_file_comparison_variants() -> None:
    identical = FileComparison("a.json", "l/a.json", "r/a.json", status="identical")
    assert render_file_comparison(identical) == ""

    missing = FileComparison("a.json", "l/a.json", "r/a.json", status="missing_right")
    assert render_file_comparison(missing) == "File does not exist in dirB: r/a.json\n"

    different = FileComparison(
        "a.json",
        "l/a.json",
        "r/a.json",
        status="different",
        findings=[
            Finding(kind="value_mismatch", path="a.json.a", left=1, right=2),
            Finding(kind="missing_in_left", path="a.json.c", right=3),
        ],
    )
    text = render_file_comparison(different)
    assert text.index("Difference in 'a.json.a'") < text.index("Key 'a.json.c' is missing in dirA.")
    assert text.endswith("Differences found in the file above: a.json\n")


def test_render_summary_and_json_report(tmp_path: Path) -> None:
    result = TreeDiffResult(
        left_root="l",
        right_root="r",
        epsilon=0.0,
        files=[
            FileComparison("a.json", "l/a.json", "r/a.json", status="identical"),
            FileComparison("b.json", "l/b.json", "r/b.json", status="load_error", error="boom"),
        ],
    )
    assert render_summary(result) == (
        "Compared 2 file(s): 1 identical, 0 different, 0 missing in dirB, 1 load error(s)"
    )

    out = tmp_path / "reports" / "diff.json"
    write_json_report(result, out)
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["summary"]["load_errors"] == 1
    assert payload["files"][1]["error"] == "boom"
