from __future__ import annotations

from stepsolve.expr.format import format_number, format_token, format_tokens
from stepsolve.expr.lexer import tokenize, tokenize_literal
from stepsolve.expr.negation import establish_negatives, resolve_negatives
from stepsolve.expr.reduce import evaluate, locate_operation, perform_math_operation, perform_operation
from stepsolve.expr.tokens import NEG, OPERATOR_PRIORITY, Token, TokenKind

__all__ = [
    "NEG",
    "OPERATOR_PRIORITY",
    "Token",
    "TokenKind",
    "establish_negatives",
    "evaluate",
    "format_number",
    "format_token",
    "format_tokens",
    "locate_operation",
    "perform_math_operation",
    "perform_operation",
    "resolve_negatives",
    "tokenize",
    "tokenize_literal",
]
