from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

NEG = "neg"
OPEN_PAREN = "("
CLOSE_PAREN = ")"

# Glyphs accepted by the lexer, one token per character.
OPERATOR_GLYPHS = "()^*/+-"
BINARY_SYMBOLS = ["^", "*", "/", "+", "-"]
OPERATOR_SYMBOLS = [OPEN_PAREN, CLOSE_PAREN, *BINARY_SYMBOLS, NEG]

# Fixed lookup order: the first symbol of this list present anywhere in a
# sequence is applied next, at its leftmost occurrence.
OPERATOR_PRIORITY = ("^", "*", "/", "+", "-")


class TokenKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: float | str

    def __post_init__(self) -> None:
        if self.kind is TokenKind.NUMBER:
            if isinstance(self.value, str) or isinstance(self.value, bool):
                raise TypeError(f"Number token needs a numeric value: {self.value!r}")
        else:
            validate_symbol(self.value)

    @staticmethod
    def number(value: float) -> "Token":
        return Token(TokenKind.NUMBER, float(value))

    @staticmethod
    def operator(symbol: str) -> "Token":
        return Token(TokenKind.OPERATOR, symbol)

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def is_neg(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.value == NEG

    def matches(self, symbol: str) -> bool:
        return self.kind is TokenKind.OPERATOR and self.value == symbol

    def to_dict(self) -> dict[str, float | str]:
        return {"type": self.kind.value, "value": self.value}


Tokens = tuple[Token, ...]


def validate_symbol(symbol: object) -> None:
    if symbol not in OPERATOR_SYMBOLS:
        raise ValueError(f"Unknown operator symbol: {symbol!r}")


def symbols_of(tokens: Sequence[Token]) -> list[float | str]:
    return [tok.value for tok in tokens]
