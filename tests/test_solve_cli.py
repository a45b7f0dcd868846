from __future__ import annotations

import importlib.util
import json
from pathlib import Path

from typer.testing import CliRunner

from stepsolve.util.jsonl import read_jsonl


def _load_solve_module():
    script_path = Path(__file__).resolve().parents[1] / "scripts" / "solve.py"
    spec = importlib.util.spec_from_file_location("solve_script", script_path)
    if spec is None or spec.loader is None:
        raise AssertionError("failed to load solve.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_cli_prints_steps() -> None:
    module = _load_solve_module()
    result = CliRunner().invoke(module.app, ["(1 + (2 + 3))"])
    assert result.exit_code == 0, result.output
    assert "( 1 + 5 )" in result.output
    assert result.output.rstrip().endswith("6")


def test_cli_error_exit_code() -> None:
    module = _load_solve_module()
    result = CliRunner().invoke(module.app, ["5 $ 3"])
    assert result.exit_code == 1
    assert "InvalidCharacter" in result.output


def test_cli_json_from_config(tmp_path: Path) -> None:
    module = _load_solve_module()
    cfg_path = tmp_path / "solve.yaml"
    cfg_path.write_text("format: json\n")
    result = CliRunner().invoke(module.app, ["2 ^ 3 ^ 2", "--config", str(cfg_path)])
    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("{")]
    row = json.loads(lines[0])
    assert row["result"] == 64.0


def test_cli_batch_report(tmp_path: Path) -> None:
    module = _load_solve_module()
    in_path = tmp_path / "exprs.txt"
    in_path.write_text("1 + 1\n\n10 - 3 + 2\n")
    out_path = tmp_path / "out" / "report.jsonl"
    result = CliRunner().invoke(
        module.app,
        ["--in", str(in_path), "--out", str(out_path), "--intervals"],
    )
    assert result.exit_code == 0, result.output
    rows = read_jsonl(out_path)
    assert [row["result"] for row in rows] == [2.0, 5.0]
    assert "intervals" in rows[0]


def test_cli_requires_input() -> None:
    module = _load_solve_module()
    result = CliRunner().invoke(module.app, [])
    assert result.exit_code != 0


def test_cli_json_division_by_zero(tmp_path: Path) -> None:
    module = _load_solve_module()
    out_path = tmp_path / "report.jsonl"
    result = CliRunner().invoke(module.app, ["1 / 0", "--format", "json", "--out", str(out_path)])
    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("{")]
    assert json.loads(lines[0])["result"] is None
    assert read_jsonl(out_path)[0]["display"][-1] == "Infinity"
