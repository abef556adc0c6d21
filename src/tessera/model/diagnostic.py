"""Diagnostic model: advisory findings produced while composing rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


class DiagnosticKind(Enum):
    """Which check produced a diagnostic."""

    CONFLICT = "conflict"
    CASCADE_HAZARD = "cascade_hazard"


@dataclass(frozen=True)
class Diagnostic:
    """A single conflict finding about the rules passed to one ``cx`` call.

    Attributes:
        kind: The check that fired.
        severity: How serious the issue is.
        message: Human-readable description; also the deduplication key.
        prop: The CSS property written twice.
        positions: Argument positions of the two rules involved.
        values: The two values, in argument order.
    """

    kind: DiagnosticKind
    severity: Severity
    message: str
    prop: str
    positions: tuple[int, int]
    values: tuple[str, str]

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        first, second = self.positions
        return (
            f"{self.severity.value} [{self.kind.value}] "
            f"[args={first},{second}]: {self.message}"
        )
