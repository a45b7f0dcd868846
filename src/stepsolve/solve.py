from __future__ import annotations

import math
from typing import Any, Iterable

from pydantic import BaseModel, Field

from stepsolve.errors import EvalError
from stepsolve.expr.reduce import evaluate
from stepsolve.steps import Step, build_steps, render_step
from stepsolve.util.logging import get_logger

logger = get_logger(__name__)


def _json_number(value: float | str | None) -> float | str | None:
    # Strict JSON has no inf/nan; "display" keeps their rendered form.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


class ErrorInfo(BaseModel):
    code: str
    kind: str
    message: str


class SolveResult(BaseModel):
    text: str
    ok: bool
    steps: list[Step] = Field(default_factory=list)
    display: list[str] = Field(default_factory=list)
    result: float | None = None
    error: ErrorInfo | None = None

    def to_row(self, intervals: bool = False) -> dict[str, Any]:
        row: dict[str, Any] = {
            "text": self.text,
            "ok": self.ok,
            "display": list(self.display),
            "result": _json_number(self.result),
            "error": self.error.model_dump() if self.error else None,
        }
        if intervals:
            row["intervals"] = [
                {
                    "tokens": [
                        {**tok.to_dict(), "value": _json_number(tok.value)} for tok in step.tokens
                    ],
                    "computed": step.computed.model_dump() if step.computed else None,
                    "compute_next": step.compute_next.model_dump() if step.compute_next else None,
                }
                for step in self.steps
            ]
        return row


def solve(text: str) -> SolveResult:
    try:
        snapshots = evaluate(text)
    except EvalError as exc:
        logger.debug("solve failed text=%r code=%s kind=%s", text, exc.code, exc.kind)
        return SolveResult(text=text, ok=False, error=ErrorInfo(**exc.to_dict()))
    steps = build_steps(snapshots)
    result = float(snapshots[-1][0].value) if snapshots else None
    logger.debug("solve ok text=%r steps=%d", text, len(steps))
    return SolveResult(
        text=text,
        ok=True,
        steps=steps,
        display=[render_step(step) for step in steps],
        result=result,
    )


def solve_batch(texts: Iterable[str]) -> list[SolveResult]:
    results = [solve(text) for text in texts]
    failed = sum(1 for res in results if not res.ok)
    logger.info("solve_batch rows=%d failed=%d", len(results), failed)
    return results
