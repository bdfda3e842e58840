"""Outcome bookkeeping for a single generate run."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Console tag for one report line."""

    INFO = "info"
    COMMENT = "comment"
    ERROR = "error"


@dataclass(frozen=True)
class ReportLine:
    severity: Severity
    message: str


@dataclass
class GenerationReport:
    """Append-only list of outcome lines, in the order operations ran.

    ``aborted`` is set when a precondition stopped the run before any
    artifact was touched.
    """

    lines: list[ReportLine] = field(default_factory=list)
    aborted: bool = False

    def info(self, message: str) -> None:
        self.lines.append(ReportLine(Severity.INFO, message))

    def comment(self, message: str) -> None:
        self.lines.append(ReportLine(Severity.COMMENT, message))

    def error(self, message: str) -> None:
        self.lines.append(ReportLine(Severity.ERROR, message))

    @property
    def has_errors(self) -> bool:
        return any(line.severity is Severity.ERROR for line in self.lines)

    def messages(self, severity: Severity | None = None) -> list[str]:
        """Return line texts, optionally filtered by severity."""
        return [
            line.message
            for line in self.lines
            if severity is None or line.severity is severity
        ]

    def __iter__(self) -> Iterator[ReportLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
