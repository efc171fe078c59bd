"""Sequential export of API resources listed in a CSV file."""
from __future__ import annotations

import csv
import http.client
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from hikaku.canonical import pretty_dumps
from hikaku.config import ExportConfig
from hikaku.constants import EXIT_FAILURE, EXIT_SUCCESS, JSON_INDENT
from hikaku.export.client import fetch_json
from hikaku.export.targets import ExportTarget, build_targets
from hikaku.logging import get_logger

logger = get_logger(__name__)

Fetcher = Callable[[str, str, float], Any]


@dataclass(slots=True)
class ExportOutcome:
    exit_code: int
    processed: int = 0
    written: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def reset_output_root(output_root: Path) -> None:
    """Delete the subtree of a previous run and recreate it empty.

    ``OSError`` propagates so a partially cleared subtree is never exported into.
    """
    if output_root.exists():
        shutil.rmtree(output_root)
        logger.info("Removed directory %s", output_root)
    output_root.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, value: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(pretty_dumps(value, indent=JSON_INDENT), encoding="utf-8")


def export_target(target: ExportTarget, config: ExportConfig, fetch: Fetcher = fetch_json) -> Path:
    value = fetch(target.url, config.access_token, config.timeout_seconds)
    write_json(target.output_path, value)
    return target.output_path


def run_export(config: ExportConfig, fetch: Fetcher = fetch_json) -> ExportOutcome:
    try:
        targets = build_targets(config.api, config.api_host, config.csv_path, config.output_root)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        message = f"Failed to read CSV {config.csv_path}: {exc}"
        logger.error(message)
        return ExportOutcome(exit_code=EXIT_FAILURE, errors=[message])

    try:
        reset_output_root(config.output_root)
    except OSError as exc:
        message = f"Failed to reset output directory {config.output_root}: {exc}"
        logger.error(message)
        return ExportOutcome(exit_code=EXIT_FAILURE, errors=[message])

    outcome = ExportOutcome(exit_code=EXIT_SUCCESS)
    total = len(targets)
    for index, target in enumerate(targets, start=1):
        logger.info("Fetching URL %d/%d: %s", index, total, target.url)
        outcome.processed += 1
        try:
            written = export_target(target, config, fetch)
        except (OSError, ValueError, http.client.HTTPException) as exc:
            message = f"Error fetching URL {index} ({target.key}): {exc}"
            logger.error(message)
            outcome.errors.append(message)
            continue
        logger.info("Saved JSON to %s", written)
        outcome.written.append(written)
    return outcome


__all__ = ["ExportOutcome", "export_target", "reset_output_root", "run_export", "write_json"]
