"""Explicit run configuration for the exporter and the differ.

Values are merged from CLI options, the environment, and an optional YAML
file, in that order of precedence.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hikaku.constants import (
    ACCESS_TOKEN_ENV,
    API_MAJOR,
    DEFAULT_EPSILON,
    DEFAULT_TIMEOUT_SECONDS,
    SUPPORTED_APIS,
)

EXPORT_KEYS = ("label", "api", "api_host", "csv", "access_token", "export_folder", "timeout_seconds")
DIFF_KEYS = ("dir_a", "dir_b", "epsilon")

# option name shown to users for each config key
OPTION_NAMES = {
    "label": "--label",
    "api": "--api",
    "api_host": "--api-host",
    "csv": "--csv",
    "access_token": "--access-token",
    "export_folder": "--export-folder",
    "dir_a": "--dirA",
    "dir_b": "--dirB",
}


class MissingOptionError(ValueError):
    """Raised when a required value is absent from every config source."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{OPTION_NAMES.get(key, key)} is required")


def load_config_file(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return loaded


def _merge(cli_values: dict[str, Any], file_values: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for key in keys:
        value = cli_values.get(key)
        if value is None or value == "":
            value = file_values.get(key)
        merged[key] = value
    return merged


def _require_text(values: dict[str, Any], key: str) -> str:
    value = values.get(key)
    if value is None or str(value).strip() == "":
        raise MissingOptionError(key)
    return str(value).strip()


def _parse_float(raw: Any, *, field_name: str, default: float) -> float:
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be a number, got {raw!r}") from exc


@dataclass(slots=True, frozen=True)
class ExportConfig:
    label: str
    api: str
    api_host: str
    csv_path: Path
    access_token: str
    export_folder: Path
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.api not in SUPPORTED_APIS:
            supported = ", ".join(SUPPORTED_APIS)
            raise ValueError(f"Unknown api: {self.api}. Supported: {supported}")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

    @property
    def is_major(self) -> bool:
        return self.api == API_MAJOR

    @property
    def output_root(self) -> Path:
        """Subtree owned by one label+api run; cleared before every export."""
        return self.export_folder / self.label / self.api

    def validate_paths(self) -> None:
        if not self.csv_path.is_file():
            raise ValueError(f"CSV file does not exist: {self.csv_path}")
        if not self.export_folder.is_dir():
            raise ValueError(f"Export folder does not exist: {self.export_folder}")

    @classmethod
    def resolve(cls, cli_values: dict[str, Any], file_values: dict[str, Any] | None = None) -> ExportConfig:
        cli_values = dict(cli_values)
        if not cli_values.get("access_token"):
            cli_values["access_token"] = os.getenv(ACCESS_TOKEN_ENV, "").strip() or None
        values = _merge(cli_values, file_values or {}, EXPORT_KEYS)
        return cls(
            label=_require_text(values, "label"),
            api=_require_text(values, "api"),
            api_host=_require_text(values, "api_host"),
            csv_path=Path(_require_text(values, "csv")),
            access_token=_require_text(values, "access_token"),
            export_folder=Path(_require_text(values, "export_folder")),
            timeout_seconds=_parse_float(
                values.get("timeout_seconds"),
                field_name="timeout_seconds",
                default=DEFAULT_TIMEOUT_SECONDS,
            ),
        )


@dataclass(slots=True, frozen=True)
class DiffConfig:
    dir_a: Path
    dir_b: Path
    epsilon: float = DEFAULT_EPSILON

    def validate_paths(self) -> None:
        if not self.dir_a.is_dir():
            raise ValueError(f"Directory '{self.dir_a}' (dirA) does not exist")
        if not self.dir_b.is_dir():
            raise ValueError(f"Directory '{self.dir_b}' (dirB) does not exist")

    @classmethod
    def resolve(cls, cli_values: dict[str, Any], file_values: dict[str, Any] | None = None) -> DiffConfig:
        values = _merge(cli_values, file_values or {}, DIFF_KEYS)
        return cls(
            dir_a=Path(_require_text(values, "dir_a")),
            dir_b=Path(_require_text(values, "dir_b")),
            epsilon=_parse_float(values.get("epsilon"), field_name="epsilon", default=DEFAULT_EPSILON),
        )


__all__ = [
    "DiffConfig",
    "ExportConfig",
    "MissingOptionError",
    "load_config_file",
]
