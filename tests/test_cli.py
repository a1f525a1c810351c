from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from tictactoe_ai.cli import main, parse_moves

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    env["TTT_AI_DELAY_MS"] = "0"
    exe = [sys.executable, "-m", "tictactoe_ai.cli"]
    return subprocess.run(exe + args, cwd=cwd, input=stdin, capture_output=True, text=True, env=env)


@pytest.mark.parametrize("raw,expected", [
    ("", []),
    ("4", [4]),
    ("0,4,8", [0, 4, 8]),
    ("0 4  8", [0, 4, 8]),
    ("0,9", None),
    ("a,1", None),
    ("-1", None),
])
def test_parse_moves(raw, expected):
    assert parse_moves(raw) == expected


def test_solve_reports_value_and_best_moves(caplog):
    with caplog.at_level(logging.INFO):
        rc = main(["--seed", "3", "solve", "--moves", "0,4,1"])
    assert rc == 0
    assert "value=0" in caplog.text
    assert "moves=[2]" in caplog.text
    assert "pick=2" in caplog.text


def test_solve_finished_game_has_no_pick(caplog):
    with caplog.at_level(logging.INFO):
        rc = main(["solve", "--moves", "0,4,1,6,2"])
    assert rc == 0
    assert "status=won" in caplog.text
    assert "pick=None" in caplog.text


@pytest.mark.parametrize("bad", ["4,4", "0,4,1,6,2,3", "x", "0,10"])
def test_solve_invalid_history_exits_2(bad, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["solve", "--moves", bad]) == 2
    assert "Invalid move history" in caplog.text


def test_cli_solve_stdin_streams_csv(tmp_path: Path):
    r = _run_cli(["solve", "--stdin", "--depth", "9"], cwd=tmp_path, stdin="0,4,1\n\nbad\n4 4\n0 3 1 4\n")
    assert r.returncode == 0
    lines = r.stdout.strip().splitlines()
    assert lines[0] == "moves,value,best_moves"
    assert lines[1] == "0 4 1,0,2"
    assert lines[2].startswith("0 3 1 4,10,")
    assert len(lines) == 3


def test_cli_play_session(tmp_path: Path):
    r = _run_cli(["--seed", "1", "play", "--no-delay"], cwd=tmp_path, stdin="4\n4\nu\nu\nzz\nq\n")
    assert r.returncode == 0
    out = r.stdout
    assert "Your turn" in out
    assert "CPU is preparing move..." in out
    assert "Illegal move." in out
    assert "Enter a cell 0-8" in out


def test_cli_play_cpu_first_and_eof(tmp_path: Path):
    r = _run_cli(["play", "--cpu-first", "--no-delay", "--depth", "2"], cwd=tmp_path, stdin="")
    assert r.returncode == 0
    assert "X" in r.stdout


def test_cli_help_smoke(tmp_path: Path):
    for args in (["--help"], ["play", "--help"], ["solve", "--help"], []):
        r = _run_cli(args, cwd=tmp_path)
        assert r.returncode == 0
        assert r.stdout or r.stderr


def test_solve_searches_once_and_reports_that_search(monkeypatch, caplog):
    import tictactoe_ai.cli as cli_mod
    from tictactoe_ai.game_state import GameState
    from tictactoe_ai.search import Searcher

    calls = []

    class CountingSearcher(Searcher):
        def search(self, depth):
            calls.append(depth)
            return super().search(depth)

    monkeypatch.setattr(cli_mod, "Searcher", CountingSearcher)
    expected = Searcher(GameState.from_moves([4]))
    expected.search(9)
    with caplog.at_level(logging.INFO):
        assert main(["--seed", "5", "solve", "--moves", "4", "--depth", "9"]) == 0
    assert calls == [9]
    assert f"nodes={expected.nodes}" in caplog.text
    pick = int(caplog.text.split("pick=")[1].split()[0])
    assert pick in GameState.from_moves([4]).valid_moves()
