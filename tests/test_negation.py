from __future__ import annotations

import math

import pytest

from stepsolve.errors import DanglingNegation, InternalError, InvalidNegationTarget
from stepsolve.expr.lexer import tokenize
from stepsolve.expr.negation import establish_negatives, resolve_negatives
from stepsolve.expr.tokens import NEG, Token


def _values(tokens) -> list[float | str]:
    return [tok.value for tok in tokens]


def test_leading_minus_becomes_neg() -> None:
    assert _values(establish_negatives(tokenize("-3"))) == [NEG, 3.0]


def test_binary_minus_after_number() -> None:
    assert _values(establish_negatives(tokenize("2 - 3"))) == [2.0, "-", 3.0]


def test_minus_before_minus() -> None:
    assert _values(establish_negatives(tokenize("2 - -3"))) == [2.0, "-", NEG, 3.0]


def test_trailing_minus_stays_binary() -> None:
    assert _values(establish_negatives(tokenize("5 -"))) == [5.0, "-"]


def test_exponent_two_ahead_keeps_minus() -> None:
    assert _values(establish_negatives(tokenize("-2 ^ 2"))) == ["-", 2.0, "^", 2.0]


def test_minus_before_paren_is_neg() -> None:
    assert _values(establish_negatives(tokenize("-(1)"))) == [NEG, "(", 1.0, ")"]


def test_resolve_folds_into_number() -> None:
    assert resolve_negatives((Token.operator(NEG), Token.number(3))) == (Token.number(-3),)


def test_resolve_neg_zero_is_positive_zero() -> None:
    (tok,) = resolve_negatives(establish_negatives(tokenize("-0")))
    assert tok.value == 0
    assert math.copysign(1.0, tok.value) == 1.0


def test_resolve_keeps_deferred_marker() -> None:
    tokens = (Token.operator(NEG), Token.operator("("), Token.number(1), Token.operator(")"))
    assert resolve_negatives(tokens) == tokens


def test_resolve_returns_new_sequence() -> None:
    tokens = (Token.operator(NEG), Token.number(4), Token.operator("+"), Token.number(1))
    out = resolve_negatives(tokens)
    assert out == (Token.number(-4), Token.operator("+"), Token.number(1))
    assert tokens[0].is_neg


def test_dangling_negation() -> None:
    with pytest.raises(DanglingNegation) as info:
        resolve_negatives((Token.number(2), Token.operator(NEG)))
    assert info.value.kind == "internal"


def test_invalid_negation_target() -> None:
    with pytest.raises(InvalidNegationTarget) as info:
        resolve_negatives((Token.operator(NEG), Token.operator("+"), Token.number(1)))
    assert isinstance(info.value, InternalError)
    assert info.value.target == "+"
