from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

FindingKind = Literal["value_mismatch", "missing_in_right", "missing_in_left"]
FileStatus = Literal["identical", "different", "missing_right", "load_error"]


@dataclass(slots=True)
class Finding:
    kind: FindingKind
    path: str
    left: Any = None
    right: Any = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class FileComparison:
    relative_path: str
    left_path: str
    right_path: str
    status: FileStatus
    findings: list[Finding] = field(default_factory=list)
    error: str | None = None

    @property
    def has_differences(self) -> bool:
        return self.status != "identical"

    def to_dict(self) -> dict[str, Any]:
        return {
            "relative_path": self.relative_path,
            "left_path": self.left_path,
            "right_path": self.right_path,
            "status": self.status,
            "error": self.error,
            "findings": [finding.to_dict() for finding in self.findings],
        }


@dataclass(slots=True)
class TreeDiffResult:
    left_root: str
    right_root: str
    epsilon: float
    files: list[FileComparison] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return any(item.has_differences for item in self.files)

    def summary(self) -> dict[str, Any]:
        statuses = [item.status for item in self.files]
        return {
            "left_root": self.left_root,
            "right_root": self.right_root,
            "epsilon": self.epsilon,
            "files_compared": len(self.files),
            "identical": statuses.count("identical"),
            "different": statuses.count("different"),
            "missing_right": statuses.count("missing_right"),
            "load_errors": statuses.count("load_error"),
            "finding_count": sum(len(item.findings) for item in self.files),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary(),
            "files": [item.to_dict() for item in self.files],
        }
