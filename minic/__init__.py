"""Analizador lexico, sintactico y semantico para un fragmento tipo C."""

from .diagnostics import AnalysisReport, Diagnostic
from .facade import AnalysisResult, AnalyzerFacade
from .lexer import KEYWORDS, LexerConfig, MiniCLexer, Token, TokenKind, tokenize
from .semantic import SemanticAnalyzer, check_semantics
from .syntax import SyntaxChecker, check_syntax

__all__ = [
    "AnalysisReport",
    "AnalysisResult",
    "AnalyzerFacade",
    "Diagnostic",
    "KEYWORDS",
    "LexerConfig",
    "MiniCLexer",
    "SemanticAnalyzer",
    "SyntaxChecker",
    "Token",
    "TokenKind",
    "check_semantics",
    "check_syntax",
    "tokenize",
]
