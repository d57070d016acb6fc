"""Verificador sintactico superficial: estructura de ``if`` e identificadores fuera de lugar."""
from __future__ import annotations

from typing import AbstractSet, Optional, Sequence

from ..cursor import find_text, skip_whitespace, text_at
from ..diagnostics import AnalysisReport, DiagnosticCollector, Reporter
from ..lexer import KEYWORDS, Token, TokenKind

INVALID_IDENTIFIER = "invalid identifier"
MISSING_LPAREN = "missing '(' after 'if'"
MISSING_RPAREN = "missing ')' in if condition"
MISSING_LBRACE = "missing '{' after if"
VALID_IF = "valid if structure"

# Tipos de token tras los cuales un identificador se considera bien ubicado.
_SEPARATORS = frozenset({TokenKind.KEYWORD, TokenKind.OPERATOR, TokenKind.WHITESPACE})


class SyntaxChecker:
    def __init__(
        self,
        keywords: AbstractSet[str] = KEYWORDS,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.keywords = keywords
        self.reporter = reporter

    def check(self, tokens: Sequence[Token]) -> AnalysisReport:
        out = DiagnosticCollector("syntax", self.reporter)
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.kind is TokenKind.IDENTIFIER:
                self._check_identifier(tokens, i, out)
                i += 1
            elif token.kind is TokenKind.KEYWORD and token.text == "if":
                i = self._check_if(tokens, i, out)
            else:
                i += 1
        return out.finish()

    def _check_identifier(self, tokens: Sequence[Token], i: int, out: DiagnosticCollector) -> None:
        token = tokens[i]
        if token.text in self.keywords or i == 0:
            return
        if tokens[i - 1].kind not in _SEPARATORS:
            out.error(INVALID_IDENTIFIER, token, i)

    def _check_if(self, tokens: Sequence[Token], i: int, out: DiagnosticCollector) -> int:
        """Valida ``if ( ... ) {`` y devuelve el indice desde el que seguir."""
        token = tokens[i]
        j, opener = skip_whitespace(tokens, i + 1)
        if opener is None or opener.text != "(":
            out.error(MISSING_LPAREN, token, i)
            return i + 1

        # Sin conteo de anidamiento: vale el primer ')' encontrado.
        k, closer = find_text(tokens, j + 1, ")")
        if closer is None:
            out.error(MISSING_RPAREN, token, i)
            return i + 1

        if text_at(tokens, k + 1) != "{":
            out.error(MISSING_LBRACE, token, i)
            return i + 1

        out.info(VALID_IF, token, i)
        return k + 2


def check_syntax(
    tokens: Sequence[Token],
    keywords: AbstractSet[str] = KEYWORDS,
    reporter: Optional[Reporter] = None,
) -> AnalysisReport:
    return SyntaxChecker(keywords, reporter).check(tokens)
