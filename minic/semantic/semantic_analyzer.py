from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..cursor import skip_kinds, skip_whitespace
from ..diagnostics import AnalysisReport, DiagnosticCollector, Reporter
from ..lexer import Token, TokenKind
from .symbol_table import Symbol, SymbolTable

TYPE_KEYWORDS = frozenset({"int", "float"})

ALREADY_DECLARED = "variable already declared"
NOT_DECLARED = "variable not declared"

_INITIALIZER_KINDS = frozenset({TokenKind.NUMBER, TokenKind.WHITESPACE})


def declared_message(name: str, type_name: str) -> str:
    return f"variable declared: {name} of type {type_name}"


def missing_name_message(type_name: str) -> str:
    return f"missing variable name after {type_name}"


class SemanticAnalyzer:
    """Pasada semantica lineal sobre los tokens."""

    def __init__(self, reporter: Optional[Reporter] = None) -> None:
        self.reporter = reporter
        self.symtab = SymbolTable()
        self.snapshot_data: List[Dict[str, object]] = []

    def analyze(self, tokens: Sequence[Token]) -> AnalysisReport:
        """Punto de entrada: cada llamada parte de una tabla vacia."""
        self.symtab = SymbolTable()
        out = DiagnosticCollector("semantic", self.reporter)
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.kind is TokenKind.KEYWORD and token.text in TYPE_KEYWORDS:
                i = self._declaration(tokens, i, out)
                continue
            if token.kind is TokenKind.IDENTIFIER and token.text not in self.symtab:
                out.error(NOT_DECLARED, token, i)
            i += 1
        self.snapshot_data = self.symtab.snapshot()
        return out.finish()

    def _declaration(self, tokens: Sequence[Token], i: int, out: DiagnosticCollector) -> int:
        """Procesa ``tipo nombre [= literal]`` y devuelve el indice siguiente."""
        type_token = tokens[i]
        j, name_token = skip_whitespace(tokens, i + 1)
        if name_token is None or name_token.kind is not TokenKind.IDENTIFIER:
            out.error(missing_name_message(type_token.text), type_token, i)
            return i + 1

        symbol = Symbol(name=name_token.text, type=type_token.text, index=j)
        if self.symtab.declare(symbol.name, symbol):
            out.info(declared_message(symbol.name, symbol.type), name_token, j)
        else:
            out.error(ALREADY_DECLARED, name_token, j)

        j, follow = skip_whitespace(tokens, j + 1)
        if follow is not None and follow.kind is TokenKind.OPERATOR and follow.text == "=":
            # El inicializador solo admite numeros; no se valida la expresion.
            j = skip_kinds(tokens, j + 1, _INITIALIZER_KINDS)
        return j


def check_semantics(tokens: Sequence[Token], reporter: Optional[Reporter] = None) -> AnalysisReport:
    return SemanticAnalyzer(reporter).analyze(tokens)
