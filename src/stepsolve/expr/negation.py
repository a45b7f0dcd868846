"""Unary minus handling.

``establish_negatives`` runs once on lexer output and marks every ``-`` that
reads as a sign with the internal ``neg`` symbol. ``resolve_negatives`` folds
each ``neg`` into the number that follows it, or keeps it in place ahead of a
``(`` until that group reduces to a single number.
"""

from __future__ import annotations

from typing import Sequence

from stepsolve.errors import DanglingNegation, InvalidNegationTarget
from stepsolve.expr.tokens import NEG, OPEN_PAREN, Token, Tokens


def _is_sign(tokens: Sequence[Token], i: int) -> bool:
    if i + 1 == len(tokens):
        return False
    nxt = tokens[i + 1]
    if nxt.is_operator and nxt.value != OPEN_PAREN:
        return False
    if i > 0 and tokens[i - 1].is_number:
        return False
    # A following exponent applies before the sign is established.
    if i + 2 < len(tokens) and tokens[i + 2].matches("^"):
        return False
    return True


def establish_negatives(tokens: Sequence[Token]) -> Tokens:
    out: list[Token] = []
    for i, tok in enumerate(tokens):
        if tok.matches("-") and _is_sign(tokens, i):
            out.append(Token.operator(NEG))
        else:
            out.append(tok)
    return tuple(out)


def _negate(value: float) -> float:
    if value == 0:
        return 0.0
    return -value


def resolve_negatives(tokens: Sequence[Token]) -> Tokens:
    out: list[Token] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if not tok.is_neg:
            out.append(tok)
            i += 1
            continue
        if i + 1 >= len(tokens):
            raise DanglingNegation()
        nxt = tokens[i + 1]
        if nxt.matches(OPEN_PAREN):
            out.append(tok)
            i += 1
        elif nxt.is_number:
            out.append(Token.number(_negate(float(nxt.value))))
            i += 2
        else:
            raise InvalidNegationTarget(nxt.value)
    return tuple(out)
