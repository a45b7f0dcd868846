from __future__ import annotations

import math
from typing import Sequence

from stepsolve.expr.tokens import Token

# Integral values at or beyond this magnitude keep exponent notation.
_EXP_THRESHOLD = 1e21


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _EXP_THRESHOLD:
        return str(int(value))
    return repr(value)


def format_token(token: Token) -> str:
    if token.is_number:
        return format_number(float(token.value))
    if token.is_neg:
        return "-"
    return str(token.value)


def format_tokens(tokens: Sequence[Token]) -> str:
    parts: list[str] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.is_neg:
            # "neg (" renders as "-(".
            if i + 1 < len(tokens):
                parts.append("-" + format_token(tokens[i + 1]))
                i += 2
                continue
        parts.append(format_token(tok))
        i += 1
    return " ".join(parts)
