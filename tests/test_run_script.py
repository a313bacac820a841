from __future__ import annotations

import sys
from pathlib import Path

import pytest

import run


def _main(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["run.py", *args])
    run.main()


def test_run_script_on_empty_knapsack(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    empty = tmp_path / "empty.txt"
    empty.write_text("0\n5\n")

    _main(monkeypatch, "-k", str(empty), "-g", "2", "-p", "4", "--quiet")

    out = capsys.readouterr().out
    assert "Best score in generation 1 was Value(0)" in out
    assert "Run 1: Value(0) ()" in out


def test_run_script_on_tiny_knapsack(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    tiny = tmp_path / "tiny.txt"
    tiny.write_text("3\n1 3 8\n2 2 8\n3 9 1\n10\n")

    _main(monkeypatch, "-k", str(tiny), "-g", "3", "-p", "10", "-n", "2", "--quiet")

    out = capsys.readouterr().out
    assert "Running on knapsack at:" in out
    assert "This is run number 2" in out
    assert "Run 2:" in out


def test_run_script_malformed_knapsack_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("2\n1 2 3\n")

    with pytest.raises(SystemExit) as excinfo:
        _main(monkeypatch, "-k", str(bad), "--quiet")

    assert excinfo.value.code == 1
    assert "Failed to load knapsack" in capsys.readouterr().out


def test_run_script_rejects_bad_arguments(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _main(monkeypatch, "--population", "0")

    assert excinfo.value.code == 1
    assert "Invalid arguments" in capsys.readouterr().out
