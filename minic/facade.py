"""Fachada de alto nivel para las tres fases del analizador."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .diagnostics import COMPLETED_WITHOUT_ERRORS, Reporter
from .lexer import LexerConfig, Token, tokenize
from .semantic import SemanticAnalyzer
from .syntax import SyntaxChecker

MODES = {
    "lexico": "lexical",
    "lexical": "lexical",
    "sintactico": "syntax",
    "syntax": "syntax",
    "semantico": "semantic",
    "semantic": "semantic",
}


def normalize_mode(mode: str) -> str:
    try:
        return MODES[mode.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown analysis mode: {mode!r}") from None


def _collect_tokens(tokens: List[Token]) -> List[Dict[str, str]]:
    return [{"type": tok.kind.name, "value": tok.text} for tok in tokens]


@dataclass
class AnalysisResult:
    mode: str
    ok: bool
    summary: str
    tokens: List[Dict[str, str]]
    messages: List[Dict[str, str]] = field(default_factory=list)
    symbol_table: List[Dict[str, Any]] = field(default_factory=list)
    source_path: Optional[str] = None

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2, ensure_ascii=False)


class AnalyzerFacade:
    """Punto de entrada para analizar codigo desde el CLI u otros adaptadores."""

    def __init__(self, config: LexerConfig | None = None, reporter: Reporter | None = None) -> None:
        self.config = config or LexerConfig()
        self.reporter = reporter

    def lexical(self, code: str, path: str | Path | None = None) -> AnalysisResult:
        tokens = tokenize(code, self.config)
        return AnalysisResult(
            mode="lexical",
            ok=True,
            summary=COMPLETED_WITHOUT_ERRORS,
            tokens=_collect_tokens(tokens),
            source_path=str(path) if path is not None else None,
        )

    def syntax(self, code: str, path: str | Path | None = None) -> AnalysisResult:
        tokens = tokenize(code, self.config)
        report = SyntaxChecker(self.config.keywords, self.reporter).check(tokens)
        return AnalysisResult(
            mode="syntax",
            ok=report.ok,
            summary=report.summary,
            tokens=_collect_tokens(tokens),
            messages=report.as_dicts(),
            source_path=str(path) if path is not None else None,
        )

    def semantic(self, code: str, path: str | Path | None = None) -> AnalysisResult:
        tokens = tokenize(code, self.config)
        analyzer = SemanticAnalyzer(self.reporter)
        report = analyzer.analyze(tokens)
        return AnalysisResult(
            mode="semantic",
            ok=report.ok,
            summary=report.summary,
            tokens=_collect_tokens(tokens),
            messages=report.as_dicts(),
            symbol_table=analyzer.snapshot_data,
            source_path=str(path) if path is not None else None,
        )

    def analyze(self, mode: str, code: str, path: str | Path | None = None) -> AnalysisResult:
        handler = getattr(self, normalize_mode(mode))
        return handler(code, path=path)
