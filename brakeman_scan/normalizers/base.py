from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from brakeman_scan.domain.models import WarningRecord


class ReportParseError(ValueError):
    """Raised when a report cannot be turned into warnings."""


class ReportFieldError(ReportParseError):
    """A finding is missing a required field or has one of the wrong type."""


@dataclass
class ScanOutcome:
    """Warnings parsed from one report, plus the error that stopped parsing.

    On failure ``warnings`` still holds everything parsed before the error.
    """

    warnings: list[WarningRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


ReportScanner = Callable[[str], ScanOutcome]
