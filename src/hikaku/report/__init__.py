from __future__ import annotations

from hikaku.report.renderers import render_file_comparison, render_finding, render_summary, write_json_report

__all__ = ["render_file_comparison", "render_finding", "render_summary", "write_json_report"]
