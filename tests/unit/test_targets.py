from __future__ import annotations

from pathlib import Path

import pytest

from hikaku.export.targets import (
    build_targets,
    is_safe_path_segment,
    major_targets,
    read_csv_rows,
    university_targets,
)


def test_university_targets(tmp_path: Path) -> None:
    root = tmp_path / "local" / "university"
    targets = university_targets("http://localhost:8081/", [["tokyo"], [], ["kyoto", "extra"], [""]], root)

    assert [t.url for t in targets] == [
        "http://localhost:8081/university/tokyo",
        "http://localhost:8081/university/kyoto",
    ]
    assert [t.output_path for t in targets] == [root / "tokyo.json", root / "kyoto.json"]
    assert targets[0].key == "tokyo"


def test_major_targets_skip_short_rows(tmp_path: Path) -> None:
    root = tmp_path / "local" / "major"
    targets = major_targets("https://api.example.com", [["tokyo", "101"], ["kyoto"], ["osaka", "a b"]], root)

    assert [t.url for t in targets] == [
        "https://api.example.com/university/tokyo/major/101",
        "https://api.example.com/university/osaka/major/a%20b",
    ]
    assert targets[0].output_path == root / "tokyo" / "101.json"
    assert targets[1].output_path == root / "osaka" / "a b.json"
    assert targets[0].key == "tokyo/101"


def test_read_csv_rows_strips_fields_and_bom(tmp_path: Path) -> None:
    csv_path = tmp_path / "rows.csv"
    csv_path.write_text("\ufefftokyo, 101\n\nkyoto,202\n", encoding="utf-8")
    assert read_csv_rows(csv_path) == [["tokyo", "101"], [], ["kyoto", "202"]]


def test_build_targets(tmp_path: Path) -> None:
    csv_path = tmp_path / "rows.csv"
    csv_path.write_text("tokyo,101\n", encoding="utf-8")

    assert len(build_targets("major", "http://h", csv_path, tmp_path)) == 1
    assert build_targets("university", "http://h", csv_path, tmp_path)[0].url == "http://h/university/tokyo"
    with pytest.raises(ValueError, match="Unknown api"):
        build_targets("faculty", "http://h", csv_path, tmp_path)


@pytest.mark.parametrize("value", ["..", ".", "a/b", "a\\b", "/tmp/outside", "../escape"])
def test_unsafe_path_segments(value: str) -> None:
    assert not is_safe_path_segment(value)


def test_rows_with_unsafe_segments_are_skipped(tmp_path: Path) -> None:
    root = tmp_path / "local" / "university"
    targets = university_targets("http://h", [["/tmp/outside"], [".."], ["../up"], ["tokyo"]], root)
    assert [t.university_slug for t in targets] == ["tokyo"]

    major_root = tmp_path / "local" / "major"
    rows = [["tokyo", "../101"], ["..", "101"], ["tokyo", "a/b"], ["kyoto", "201"]]
    majors = major_targets("http://h", rows, major_root)
    assert [t.key for t in majors] == ["kyoto/201"]
    assert all(t.output_path.resolve().is_relative_to(major_root.resolve()) for t in majors)
