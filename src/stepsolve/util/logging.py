from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT = "stepsolve"


def parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: int | str = logging.WARNING, stderr: bool = True) -> int:
    """Route the ``stepsolve`` logger tree through a single rich handler.

    Calling again swaps the handler, so repeated CLI runs in one process do
    not duplicate output. Returns the numeric level in effect.
    """
    resolved = parse_level(level)
    root = logging.getLogger(ROOT)
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    handler = RichHandler(
        console=Console(stderr=stderr),
        rich_tracebacks=True,
        show_path=False,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(name)s %(message)s"))
    root.addHandler(handler)
    root.setLevel(resolved)
    return resolved


def get_logger(name: str | None = None) -> logging.Logger:
    # Script modules ("__main__", loaded-by-path names) still land under ROOT.
    if not name:
        return logging.getLogger(ROOT)
    if name == ROOT or name.startswith(ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT}.{name}")
