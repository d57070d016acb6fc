"""Paquete de analisis semantico."""

from .symbol_table import Symbol, SymbolTable
from .semantic_analyzer import (
    ALREADY_DECLARED,
    NOT_DECLARED,
    TYPE_KEYWORDS,
    SemanticAnalyzer,
    check_semantics,
    declared_message,
    missing_name_message,
)

__all__ = [
    "ALREADY_DECLARED",
    "NOT_DECLARED",
    "TYPE_KEYWORDS",
    "Symbol",
    "SymbolTable",
    "SemanticAnalyzer",
    "check_semantics",
    "declared_message",
    "missing_name_message",
]
