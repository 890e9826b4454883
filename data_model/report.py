"""
data_model/report.py — zgłoszenia (Issue) i raport z przebiegu budowania.

Issue — pojedynczy błąd lub ostrzeżenie przypisane do dokumentu.
BuildReport — podsumowanie całego przebiegu: liczba dokumentów,
    liczba wyrenderowanych, lista zgłoszeń i wynikowy kod wyjścia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .errors import DocsetError, ErrorCode


class Severity(StrEnum):
    ERROR   = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Issue:
    """
    Pojedyncze zgłoszenie.

    - code:       stały identyfikator klasy problemu (ErrorCode)
    - identifier: identyfikator dokumentu, którego dotyczy
    - message:    czytelny opis
    - severity:   ERROR (dokument nie powstał) | WARNING (powstał, z degradacją)
    """

    code: ErrorCode
    identifier: str
    message: str
    severity: Severity = Severity.ERROR

    @classmethod
    def from_error(cls, error: DocsetError, severity: Severity = Severity.ERROR) -> Issue:
        return cls(
            code=error.code,
            identifier=error.identifier,
            message=error.message,
            severity=severity,
        )


@dataclass(slots=True)
class BuildReport:
    """
    Wynik przebiegu.

    - documents: liczba źródeł wejściowych
    - rendered:  liczba poprawnie wyrenderowanych dokumentów
    - loaded:    liczba poprawnie wczytanych dokumentów
    - issues:    wszystkie zgłoszenia w kolejności wystąpienia
    """

    documents: int = 0
    loaded: int = 0
    rendered: int = 0
    issues: list[Issue] = field(default_factory=list)

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def failure_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def unreadable(self) -> bool:
        """Były źródła, ale żadnego nie udało się wczytać."""
        return self.documents > 0 and self.loaded == 0

    def exit_code(self, warnings_as_errors: bool = False) -> int:
        if self.unreadable:
            return 2
        if self.failure_count:
            return 1
        if warnings_as_errors and self.warning_count:
            return 1
        return 0
