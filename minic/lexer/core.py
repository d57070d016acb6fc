"""Analizador lexico del subconjunto tipo C, construido sobre PLY."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from functools import lru_cache
from typing import ClassVar, FrozenSet, Iterator, List, Optional, Tuple

import ply.lex as lex
from ply.lex import TOKEN


class TokenKind(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    OPERATOR = auto()
    WHITESPACE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


KEYWORDS: FrozenSet[str] = frozenset(
    {"if", "for", "while", "return", "int", "float", "else"}
)
OPERATORS: FrozenSet[str] = frozenset("+-*/=&|!<>")

_OPERATOR_PATTERN = "[" + "".join(re.escape(op) for op in sorted(OPERATORS)) + "]"


@dataclass(frozen=True)
class LexerConfig:
    keywords: FrozenSet[str] = KEYWORDS

    token_kinds: ClassVar[Tuple[str, ...]] = tuple(kind.name for kind in TokenKind)

    def full_token_list(self) -> Tuple[str, ...]:
        return self.token_kinds


@dataclass
class MiniCLexer:
    """Clasifica cada caracter de la entrada; nunca descarta texto."""

    config: LexerConfig = field(default_factory=LexerConfig)
    tokens: Tuple[str, ...] = field(init=False)
    keywords: FrozenSet[str] = field(init=False)
    lexer: lex.Lexer = field(init=False)

    def __post_init__(self) -> None:
        self.keywords = self.config.keywords
        self.tokens = self.config.full_token_list()
        self.lexer = lex.lex(module=self)

    # El orden de definicion de las reglas es el orden de prioridad en PLY.
    def t_WHITESPACE(self, t):
        r'[\ \t\n\r\f\v]'
        return t

    def t_NAME(self, t):
        r'[A-Za-z]+'
        t.type = 'KEYWORD' if t.value in self.keywords else 'IDENTIFIER'
        return t

    def t_NUMBER(self, t):
        r'[0-9]+'
        return t

    @TOKEN(_OPERATOR_PATTERN)
    def t_OPERATOR(self, t):
        return t

    def t_error(self, t):
        # Cualquier otro caracter se conserva como UNKNOWN de longitud 1.
        t.type = 'UNKNOWN'
        t.value = t.value[0]
        t.lexer.skip(1)
        return t

    def iter_raw(self, data: str) -> Iterator[lex.LexToken]:
        lexer = self.lexer.clone()
        lexer.input(data)
        while True:
            token = lexer.token()
            if not token:
                break
            yield token

    def tokenize(self, data: str) -> List[Token]:
        return [Token(TokenKind[tok.type], tok.value) for tok in self.iter_raw(data)]


@lru_cache(maxsize=None)
def _lexer_for(config: LexerConfig) -> MiniCLexer:
    return MiniCLexer(config)


def tokenize(text: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """Convierte ``text`` en tokens; concatenar sus textos reproduce la entrada."""
    return _lexer_for(config or LexerConfig()).tokenize(text)
