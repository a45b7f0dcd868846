from __future__ import annotations

from typing import Any

USER = "user"
INTERNAL = "internal"


class EvalError(ValueError):
    """Base for every failure raised while evaluating an expression.

    ``code`` names the failure (the class name unless overridden) and ``kind``
    separates malformed input (``"user"``) from defects in the negation phases
    (``"internal"``).
    """

    kind = USER

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "kind": self.kind, "message": self.message}


class UserError(EvalError):
    kind = USER


class InternalError(EvalError):
    kind = INTERNAL


class InvalidCharacter(UserError):
    def __init__(self, char: str) -> None:
        super().__init__(f'"{char}" is not a valid character.', char=char)
        self.char = char


class InvalidLiteral(UserError):
    def __init__(self, literal: str) -> None:
        super().__init__(f'Literal "{literal}" not recognized.', literal=literal)
        self.literal = literal


class MismatchedParentheses(UserError):
    def __init__(self) -> None:
        super().__init__("Mismatched parentheses.")


class EmptyParentheses(UserError):
    def __init__(self) -> None:
        super().__init__("Parentheses cannot be empty.")


class LoneOperator(UserError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f'Expression cannot consist of a single operator ("{symbol}").', symbol=symbol)
        self.symbol = symbol


class OperatorAlone(UserError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f'Expression cannot consist only of an operator ("{symbol}").', symbol=symbol)
        self.symbol = symbol


class NoOperatorFound(UserError):
    def __init__(self) -> None:
        super().__init__("Multiple tokens in expression with no operator.")


class LeadingOperator(UserError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f'Expression cannot start with an operator ("{symbol}").', symbol=symbol)
        self.symbol = symbol


class TrailingOperator(UserError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f'Expression cannot end with an operator ("{symbol}").', symbol=symbol)
        self.symbol = symbol


class NonNumericOperand(UserError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f'"{symbol}" operator requires numeric operands.', symbol=symbol)
        self.symbol = symbol


class DanglingNegation(InternalError):
    def __init__(self) -> None:
        super().__init__('Expression cannot end with a "neg" operator.')


class InvalidNegationTarget(InternalError):
    def __init__(self, target: Any) -> None:
        super().__init__(f'"neg" must be followed by "(" or a number, got {target!r}.', target=target)
        self.target = target


class UnknownOperator(InternalError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f'"{symbol}" operator not recognized.', symbol=symbol)
        self.symbol = symbol
