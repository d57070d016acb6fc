"""Diagnosticos y reportes comunes a los analizadores sintactico y semantico."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from .lexer import Token

Reporter = Callable[[str, str], None]

ERRORS_DETECTED = "errors detected"
COMPLETED_WITHOUT_ERRORS = "completed without errors"


@dataclass(frozen=True)
class Diagnostic:
    message: str
    level: str = "error"  # 'error' o 'info'
    token: Optional[Token] = None
    index: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.level == "error"

    def __str__(self) -> str:
        return self.message


@dataclass
class AnalysisReport:
    """Resultado de una pasada: los diagnosticos en orden y el veredicto global.

    Se desempaqueta como ``(messages, ok)``.
    """

    phase: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [diag.message for diag in self.diagnostics]

    @property
    def errors(self) -> List[Diagnostic]:
        return [diag for diag in self.diagnostics if diag.is_error]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def summary(self) -> str:
        return COMPLETED_WITHOUT_ERRORS if self.ok else ERRORS_DETECTED

    def __iter__(self) -> Iterator[Any]:
        yield self.messages
        yield self.ok

    def as_dicts(self) -> List[Dict[str, str]]:
        return [{"level": diag.level, "message": diag.message} for diag in self.diagnostics]


class DiagnosticCollector:
    """Acumula diagnosticos y los reenvia al reporter, si hay uno."""

    def __init__(self, phase: str, reporter: Optional[Reporter] = None) -> None:
        self.report = AnalysisReport(phase)
        self._reporter = reporter

    def _emit(self, diag: Diagnostic) -> None:
        self.report.diagnostics.append(diag)
        if self._reporter is not None:
            self._reporter(diag.level, diag.message)

    def error(self, message: str, token: Optional[Token] = None, index: Optional[int] = None) -> None:
        self._emit(Diagnostic(message, "error", token, index))

    def info(self, message: str, token: Optional[Token] = None, index: Optional[int] = None) -> None:
        self._emit(Diagnostic(message, "info", token, index))

    def finish(self) -> AnalysisReport:
        if self._reporter is not None:
            self._reporter("success" if self.report.ok else "error", self.report.summary)
        return self.report
