from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from stepsolve.expr.format import format_tokens
from stepsolve.expr.reduce import locate_operation
from stepsolve.expr.tokens import Token, Tokens


class Interval(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @property
    def width(self) -> int:
        return self.end - self.start


class Step(BaseModel):
    """One snapshot plus the ranges a renderer highlights.

    ``computed`` holds the token produced by the previous reduction and
    ``compute_next`` the tokens the following reduction consumes.
    """

    model_config = ConfigDict(frozen=True)

    tokens: tuple[InstanceOf[Token], ...]
    computed: Interval | None = None
    compute_next: Interval | None = None


def _produced_at(prev: Tokens, cur: Tokens, consumed: Interval) -> Interval:
    # A deferred "neg" folding into the new value shortens the result by one
    # more token and moves the value one slot left.
    folded = len(prev) - consumed.width + 1 - len(cur)
    pos = consumed.start - folded
    return Interval(start=pos, end=pos + 1)


def build_steps(snapshots: Sequence[Tokens]) -> list[Step]:
    steps: list[Step] = []
    consumed: Interval | None = None
    for i, tokens in enumerate(snapshots):
        computed = None
        if consumed is not None:
            computed = _produced_at(snapshots[i - 1], tokens, consumed)
        consumed = None
        if i < len(snapshots) - 1:
            start, end = locate_operation(tokens)
            consumed = Interval(start=start, end=end)
        steps.append(Step(tokens=tuple(tokens), computed=computed, compute_next=consumed))
    return steps


def render_step(step: Step) -> str:
    return format_tokens(step.tokens)
