from __future__ import annotations

from pathlib import Path

import pytest

from stepsolve.util.jsonl import read_jsonl, write_jsonl


def test_write_then_read(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "report.jsonl"
    rows = [{"text": "1 + 1", "ok": True}, {"text": "()", "ok": False}]
    assert write_jsonl(path, rows) == 2
    assert read_jsonl(path) == rows


def test_read_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "rows.jsonl"
    path.write_text('{"a": 1}\n\n{"a": 2}\n')
    assert read_jsonl(path) == [{"a": 1}, {"a": 2}]


def test_write_rejects_non_finite(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_jsonl(tmp_path / "bad.jsonl", [{"result": float("inf")}])
