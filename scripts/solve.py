from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import typer

from stepsolve.solve import SolveResult, solve_batch
from stepsolve.util.config import load_config, merge_config
from stepsolve.util.jsonl import write_jsonl
from stepsolve.util.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


def _read_expressions(path: str) -> list[str]:
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def _echo_text(res: SolveResult, intervals: bool) -> None:
    typer.echo(res.text)
    if res.error is not None:
        typer.echo(f"  error[{res.error.code}]: {res.error.message}")
        return
    for step, shown in zip(res.steps, res.display):
        line = f"  {shown}"
        if intervals and step.compute_next is not None:
            line += f"    next=[{step.compute_next.start}, {step.compute_next.end})"
        typer.echo(line)


@app.command()
def main(
    expr: str | None = typer.Argument(None, help="Expression to solve."),
    config: str = typer.Option("", "--config"),
    in_path: str | None = typer.Option(None, "--in", help="Text file with one expression per line."),
    out_path: str | None = typer.Option(None, "--out", help="Write a jsonl report here."),
    fmt: OutputFormat | None = typer.Option(None, "--format"),
    intervals: bool | None = typer.Option(None, "--intervals/--no-intervals"),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    cfg = load_config(config)
    merged = merge_config(
        cfg,
        {
            "format": fmt.value if fmt is not None else None,
            "intervals": intervals,
            "log_level": log_level,
            "in": in_path,
            "out": out_path,
        },
    )
    configure_logging(merged["log_level"])
    logger = get_logger(__name__)

    texts: list[str] = []
    if expr is not None:
        texts.append(expr)
    if merged["in"]:
        texts.extend(_read_expressions(str(merged["in"])))
    if not texts:
        raise typer.BadParameter("Provide an expression or --in.")

    show_intervals = bool(merged["intervals"])
    results = solve_batch(texts)
    if merged["format"] == OutputFormat.json.value:
        for res in results:
            typer.echo(json.dumps(res.to_row(intervals=show_intervals), ensure_ascii=True, sort_keys=True, allow_nan=False))
    else:
        for res in results:
            _echo_text(res, show_intervals)

    if merged["out"]:
        rows = write_jsonl(merged["out"], (res.to_row(intervals=show_intervals) for res in results))
        logger.info("report out=%s rows=%d", merged["out"], rows)

    failed = sum(1 for res in results if not res.ok)
    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
