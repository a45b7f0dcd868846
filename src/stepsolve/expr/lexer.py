from __future__ import annotations

from stepsolve.errors import InvalidCharacter, InvalidLiteral
from stepsolve.expr.tokens import OPERATOR_GLYPHS, Token, Tokens

_DIGITS = "0123456789"
_LITERAL_CHARS = _DIGITS + "."


def tokenize_literal(literal: str) -> Token:
    if literal.count(".") > 1 or not any(ch in _DIGITS for ch in literal):
        raise InvalidLiteral(literal)
    try:
        return Token.number(float(literal))
    except ValueError as exc:
        raise InvalidLiteral(literal) from exc


def tokenize(text: str) -> Tokens:
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in _LITERAL_CHARS:
            j = i + 1
            while j < len(text) and text[j] in _LITERAL_CHARS:
                j += 1
            tokens.append(tokenize_literal(text[i:j]))
            i = j
            continue
        if ch in OPERATOR_GLYPHS:
            tokens.append(Token.operator(ch))
        elif not ch.isspace():
            raise InvalidCharacter(ch)
        i += 1
    return tuple(tokens)
