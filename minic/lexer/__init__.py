"""Puerta de entrada del paquete lexer."""

from .core import (  # re-export principales
    KEYWORDS,
    OPERATORS,
    LexerConfig,
    MiniCLexer,
    Token,
    TokenKind,
    tokenize,
)

__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "LexerConfig",
    "MiniCLexer",
    "Token",
    "TokenKind",
    "tokenize",
]
