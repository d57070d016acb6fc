"""Paquete de analisis sintactico."""

from .checker import (
    INVALID_IDENTIFIER,
    MISSING_LBRACE,
    MISSING_LPAREN,
    MISSING_RPAREN,
    VALID_IF,
    SyntaxChecker,
    check_syntax,
)

__all__ = [
    "INVALID_IDENTIFIER",
    "MISSING_LBRACE",
    "MISSING_LPAREN",
    "MISSING_RPAREN",
    "VALID_IF",
    "SyntaxChecker",
    "check_syntax",
]
