"""hikaku CLI: Typer commands for the exporter and the differ."""
from __future__ import annotations

_APPS = ("app", "export_app", "diff_app")


def __getattr__(name: str) -> object:
    if name in _APPS:
        from hikaku.cli import commands

        return getattr(commands, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["app", "diff_app", "export_app"]
