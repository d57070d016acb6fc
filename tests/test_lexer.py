import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from minic.lexer import KEYWORDS, LexerConfig, MiniCLexer, Token, TokenKind, tokenize


@pytest.fixture()
def lexer():
    return MiniCLexer()


def pairs(tokens):
    return [(tok.kind, tok.text) for tok in tokens]


def single_token(lexer, text):
    tokens = lexer.tokenize(text)
    assert len(tokens) == 1, f"expected 1 token, got {[t.kind for t in tokens]}"
    return tokens[0]


@pytest.mark.parametrize("word", sorted(KEYWORDS))
def test_reserved_words_are_keywords(lexer, word):
    tok = single_token(lexer, word)
    assert tok == Token(TokenKind.KEYWORD, word)


@pytest.mark.parametrize("word", ["iff", "If", "integer", "x", "floats", "elsewhere"])
def test_near_keywords_are_identifiers(lexer, word):
    tok = single_token(lexer, word)
    assert tok.kind is TokenKind.IDENTIFIER
    assert tok.text == word


@pytest.mark.parametrize("op", list("+-*/=&|!<>"))
def test_operator_symbols(lexer, op):
    assert single_token(lexer, op) == Token(TokenKind.OPERATOR, op)


@pytest.mark.parametrize("char", ["(", ")", "{", "}", ";", "_", ".", ",", "$", "é"])
def test_other_characters_are_unknown(lexer, char):
    assert single_token(lexer, char) == Token(TokenKind.UNKNOWN, char)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\f", "\v"])
def test_each_whitespace_character_is_its_own_token(lexer, char):
    assert single_token(lexer, char) == Token(TokenKind.WHITESPACE, char)


def test_whitespace_runs_are_not_merged(lexer):
    assert pairs(lexer.tokenize("  \n")) == [
        (TokenKind.WHITESPACE, " "),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.WHITESPACE, "\n"),
    ]


def test_multichar_operators_split_into_single_tokens(lexer):
    assert pairs(lexer.tokenize("==&&")) == [(TokenKind.OPERATOR, c) for c in "==&&"]


def test_number_run_has_no_decimal_point(lexer):
    assert pairs(lexer.tokenize("3.14")) == [
        (TokenKind.NUMBER, "3"),
        (TokenKind.UNKNOWN, "."),
        (TokenKind.NUMBER, "14"),
    ]


def test_names_stop_at_digits_and_underscores(lexer):
    assert pairs(lexer.tokenize("abc12_d")) == [
        (TokenKind.IDENTIFIER, "abc"),
        (TokenKind.NUMBER, "12"),
        (TokenKind.UNKNOWN, "_"),
        (TokenKind.IDENTIFIER, "d"),
    ]


def test_digit_then_letters(lexer):
    assert pairs(lexer.tokenize("9if")) == [
        (TokenKind.NUMBER, "9"),
        (TokenKind.KEYWORD, "if"),
    ]


def test_if_statement_tokens():
    assert pairs(tokenize("if(x){")) == [
        (TokenKind.KEYWORD, "if"),
        (TokenKind.UNKNOWN, "("),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.UNKNOWN, ")"),
        (TokenKind.UNKNOWN, "{"),
    ]


def test_declaration_tokens():
    assert pairs(tokenize("int x = 5")) == [
        (TokenKind.KEYWORD, "int"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.OPERATOR, "="),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.NUMBER, "5"),
    ]


def test_empty_input_yields_no_tokens():
    assert tokenize("") == []


@pytest.mark.parametrize(
    "source",
    [
        "",
        "int x = 5;",
        "if (a < b) {\n\treturn a;\n} else { return b; }",
        "while(i!=10){i=i+1;}",
        "float y_2 = 3.5e10 @ # ~ ñ",
        "  \r\n\v\f ",
    ],
)
def test_tokenize_is_lossless(source):
    assert "".join(tok.text for tok in tokenize(source)) == source


def test_tokenize_is_deterministic():
    source = "int a = 1 if (a) { b = a + 2 }"
    assert tokenize(source) == tokenize(source)


def test_tokens_are_immutable():
    tok = tokenize("x")[0]
    with pytest.raises(AttributeError):
        tok.text = "y"


def test_custom_keyword_set():
    config = LexerConfig(keywords=frozenset({"let"}))
    assert pairs(tokenize("let if", config)) == [
        (TokenKind.KEYWORD, "let"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "if"),
    ]
