from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from hikaku.constants import API_MAJOR, API_UNIVERSITY, JSON_SUFFIX
from hikaku.logging import get_logger

logger = get_logger(__name__)

_SEPARATORS = tuple(sep for sep in ("/", "\\", os.sep, os.altsep) if sep)


@dataclass(slots=True, frozen=True)
class ExportTarget:
    """One API resource and the file it is exported to."""

    url: str
    output_path: Path
    university_slug: str
    major_code: str | None = None

    @property
    def key(self) -> str:
        if self.major_code is None:
            return self.university_slug
        return f"{self.university_slug}/{self.major_code}"


def _segment(value: str) -> str:
    return quote(value, safe="")


def is_safe_path_segment(value: str) -> bool:
    """True when ``value`` names a single entry directly under its parent directory."""
    if value in (".", ".."):
        return False
    if any(sep in value for sep in _SEPARATORS):
        return False
    return not Path(value).is_absolute() and not Path(value).drive


def read_csv_rows(csv_path: Path) -> list[list[str]]:
    with csv_path.open(newline="", encoding="utf-8-sig") as handle:
        return [[field.strip() for field in row] for row in csv.reader(handle)]


def university_targets(api_host: str, rows: list[list[str]], output_root: Path) -> list[ExportTarget]:
    host = api_host.rstrip("/")
    targets: list[ExportTarget] = []
    for row in rows:
        if not row or not row[0]:
            continue
        slug = row[0]
        if not is_safe_path_segment(slug):
            logger.warning("Skipping row with unsafe university slug: %r", slug)
            continue
        targets.append(
            ExportTarget(
                url=f"{host}/{API_UNIVERSITY}/{_segment(slug)}",
                output_path=output_root / f"{slug}{JSON_SUFFIX}",
                university_slug=slug,
            )
        )
    return targets


def major_targets(api_host: str, rows: list[list[str]], output_root: Path) -> list[ExportTarget]:
    host = api_host.rstrip("/")
    targets: list[ExportTarget] = []
    for row in rows:
        if len(row) < 2 or not row[0] or not row[1]:
            continue
        slug, code = row[0], row[1]
        if not (is_safe_path_segment(slug) and is_safe_path_segment(code)):
            logger.warning("Skipping row with unsafe university slug or major code: %r, %r", slug, code)
            continue
        targets.append(
            ExportTarget(
                url=f"{host}/{API_UNIVERSITY}/{_segment(slug)}/{API_MAJOR}/{_segment(code)}",
                output_path=output_root / slug / f"{code}{JSON_SUFFIX}",
                university_slug=slug,
                major_code=code,
            )
        )
    return targets


def build_targets(api: str, api_host: str, csv_path: Path, output_root: Path) -> list[ExportTarget]:
    """Read ``csv_path`` and map each usable row to a URL and output file."""
    rows = read_csv_rows(csv_path)
    if api == API_UNIVERSITY:
        return university_targets(api_host, rows, output_root)
    if api == API_MAJOR:
        return major_targets(api_host, rows, output_root)
    raise ValueError(f"Unknown api: {api}")


__all__ = [
    "ExportTarget",
    "build_targets",
    "is_safe_path_segment",
    "major_targets",
    "read_csv_rows",
    "university_targets",
]
