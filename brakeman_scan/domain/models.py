from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from hashlib import sha1
from pathlib import Path
from typing import Any, Iterator


class ReportFormat(str, Enum):
    JSON = "json"
    TABS = "tabs"


class Priority(str, Enum):
    HIGH = "High"
    NORMAL = "Normal"
    LOW = "Low"


class Category(str, Enum):
    """Which result set of the report a warning was read from."""

    GENERAL = "General"
    IGNORED = "Ignored"


@dataclass(frozen=True)
class WarningRecord:
    file: str
    start_line: int
    end_line: int
    type: str
    category: Category
    message: str
    priority: Priority
    description: str | None = None

    @property
    def is_extended(self) -> bool:
        # Brakeman Pro reports carry an extended description
        return self.description is not None

    @property
    def id(self) -> str:
        base = (
            f"{self.file}|{self.start_line}|{self.end_line}|{self.type}|"
            f"{self.category.value}|{self.priority.value}|{self.message}|{self.description}"
        )
        return sha1(base.encode("utf-8")).hexdigest()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "file": self.file,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "type": self.type,
            "category": self.category.value,
            "message": self.message,
            "description": self.description,
            "priority": self.priority.value,
        }


@dataclass
class ResultSet:
    """Warnings collected by one scan, in the order they were parsed.

    Identical warnings are kept as separate entries.
    """

    workspace: Path
    warnings: list[WarningRecord] = field(default_factory=list)

    def add(self, warning: WarningRecord) -> None:
        self.warnings.append(warning)

    def extend(self, warnings: list[WarningRecord]) -> None:
        self.warnings.extend(warnings)

    def __iter__(self) -> Iterator[WarningRecord]:
        return iter(self.warnings)

    def __len__(self) -> int:
        return len(self.warnings)

    def summary(self) -> dict[str, Any]:
        by_priority = {p.value: 0 for p in Priority}
        by_category = {c.value: 0 for c in Category}
        for w in self.warnings:
            by_priority[w.priority.value] += 1
            by_category[w.category.value] += 1
        return {
            "total": len(self.warnings),
            "by_priority": by_priority,
            "by_category": by_category,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "workspace": self.workspace.as_posix(),
            "summary": self.summary(),
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass
class ScanReport:
    result_set: ResultSet
    success: bool
    format: ReportFormat | None
    log_lines: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "format": self.format.value if self.format else None,
            "summary": self.result_set.summary(),
            "warnings": [w.to_dict() for w in self.result_set],
            "log": list(self.log_lines),
        }
