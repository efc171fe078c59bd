"""CSV-driven export of university and major JSON from the API."""
from __future__ import annotations

from hikaku.export.client import build_request, fetch_json
from hikaku.export.exporter import ExportOutcome, run_export
from hikaku.export.targets import ExportTarget, build_targets

__all__ = ["ExportOutcome", "ExportTarget", "build_request", "build_targets", "fetch_json", "run_export"]
