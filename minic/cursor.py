"""Recorridos pequenos sobre la secuencia de tokens.

Cada helper recibe un indice de partida y devuelve el indice alcanzado; los
checkers avanzan su cursor con ese valor en lugar de mutarlo por dentro.
"""
from __future__ import annotations

from typing import AbstractSet, Optional, Sequence, Tuple

from .lexer import Token, TokenKind


def skip_kinds(tokens: Sequence[Token], start: int, kinds: AbstractSet[TokenKind]) -> int:
    index = start
    while index < len(tokens) and tokens[index].kind in kinds:
        index += 1
    return index


def skip_whitespace(tokens: Sequence[Token], start: int) -> Tuple[int, Optional[Token]]:
    """Salta espacios; devuelve el indice y el token encontrado (o None al final)."""
    index = skip_kinds(tokens, start, {TokenKind.WHITESPACE})
    if index < len(tokens):
        return index, tokens[index]
    return index, None


def find_text(tokens: Sequence[Token], start: int, text: str) -> Tuple[int, Optional[Token]]:
    """Busca el siguiente token cuyo texto sea ``text``, sin importar su tipo."""
    index = start
    while index < len(tokens):
        if tokens[index].text == text:
            return index, tokens[index]
        index += 1
    return index, None


def text_at(tokens: Sequence[Token], index: int) -> Optional[str]:
    if 0 <= index < len(tokens):
        return tokens[index].text
    return None
