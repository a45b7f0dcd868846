from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from stepsolve.errors import (
    EmptyParentheses,
    LeadingOperator,
    LoneOperator,
    MismatchedParentheses,
    NonNumericOperand,
    NoOperatorFound,
    OperatorAlone,
    TrailingOperator,
    UnknownOperator,
)
from stepsolve.expr.lexer import tokenize
from stepsolve.expr.negation import establish_negatives, resolve_negatives
from stepsolve.expr.tokens import CLOSE_PAREN, OPEN_PAREN, OPERATOR_PRIORITY, Token, Tokens, symbols_of

Span = tuple[int, int]

# IEEE-754 results throughout: division by zero gives inf/nan, overflow gives inf.
_APPLY: dict[str, Callable[[np.float64, np.float64], np.float64]] = {
    "^": np.power,
    "*": np.multiply,
    "/": np.divide,
    "+": np.add,
    "-": np.subtract,
}


def apply_operator(symbol: str, left: float, right: float) -> float:
    fn = _APPLY.get(symbol)
    if fn is None:
        raise UnknownOperator(symbol)
    with np.errstate(all="ignore"):
        return float(fn(np.float64(left), np.float64(right)))


def _select_operator(tokens: Sequence[Token]) -> int:
    values = symbols_of(tokens)
    for symbol in OPERATOR_PRIORITY:
        if symbol in values:
            index = values.index(symbol)
            break
    else:
        raise NoOperatorFound()
    if index == 0:
        raise LeadingOperator(symbol)
    if index == len(tokens) - 1:
        raise TrailingOperator(symbol)
    if not (tokens[index - 1].is_number and tokens[index + 1].is_number):
        raise NonNumericOperand(symbol)
    return index


def _math_operation(tokens: Sequence[Token]) -> tuple[Tokens, Span]:
    if len(tokens) == 1:
        only = tokens[0]
        if only.is_operator:
            raise OperatorAlone(str(only.value))
        return (only,), (0, 1)
    index = _select_operator(tokens)
    op = tokens[index]
    left = tokens[index - 1]
    right = tokens[index + 1]
    value = apply_operator(str(op.value), float(left.value), float(right.value))
    out = (*tokens[: index - 1], Token.number(value), *tokens[index + 2 :])
    return out, (index - 1, index + 2)


def perform_math_operation(tokens: Sequence[Token]) -> Tokens:
    """Apply one binary operation to a paren-free sequence."""
    return _math_operation(tokens)[0]


def _find_group(tokens: Sequence[Token]) -> Span | None:
    # Innermost group closed first: a later "(" replaces the remembered start.
    start: int | None = None
    for i, tok in enumerate(tokens):
        if tok.matches(OPEN_PAREN):
            start = i
        elif tok.matches(CLOSE_PAREN):
            if start is None:
                raise MismatchedParentheses()
            return start, i
    if start is not None:
        raise MismatchedParentheses()
    return None


def _reduce(tokens: Sequence[Token]) -> tuple[Tokens, Span]:
    group = _find_group(tokens)
    if group is None:
        return _math_operation(tokens)
    start, end = group
    contents = tokens[start + 1 : end]
    if not contents:
        raise EmptyParentheses()
    inner, (lo, hi) = _math_operation(contents)
    if len(inner) == 1 and inner[0].is_number:
        return (*tokens[:start], *inner, *tokens[end + 1 :]), (start, end + 1)
    offset = start + 1
    return (*tokens[:offset], *inner, *tokens[end:]), (offset + lo, offset + hi)


def perform_operation(tokens: Sequence[Token]) -> Tokens:
    """Perform the next reduction and re-resolve pending negations."""
    reduced, _ = _reduce(tokens)
    return resolve_negatives(reduced)


def locate_operation(tokens: Sequence[Token]) -> Span:
    """Half-open token range that ``perform_operation`` consumes next.

    A group that collapses to one number is reported with both parentheses.
    """
    _, span = _reduce(tokens)
    return span


def prepare(text: str) -> Tokens:
    return resolve_negatives(establish_negatives(tokenize(text)))


def evaluate(text: str) -> list[Tokens]:
    tokens = prepare(text)
    if not tokens:
        return []
    if len(tokens) == 1 and tokens[0].is_operator:
        raise LoneOperator(str(tokens[0].value))
    steps = [tokens]
    while len(steps[-1]) > 1:
        steps.append(perform_operation(steps[-1]))
    return steps
