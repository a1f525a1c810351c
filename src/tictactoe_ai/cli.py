from __future__ import annotations

import argparse
import csv
import logging
import random
import sys
import time
from typing import List, Optional

from .config import MAX_DEPTH, clamp_depth, load_settings
from .game_state import GameState
from .search import Searcher
from .session import GameSession

PLAY_HELP = "Enter a cell 0-8, 'c' to let the CPU move, 'u' to undo, 'n' for a new game, 'q' to quit."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-ai", description="Tic-tac-toe with a minimax opponent")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the tie-break RNG")

    p_play = sub.add_parser("play", help="Play against the computer in the terminal")
    p_play.add_argument(
        "--depth", type=int, default=None, help=f"Search depth 1-{MAX_DEPTH} (default: TTT_SEARCH_DEPTH or 9)"
    )
    p_play.add_argument("--cpu-first", action="store_true", help="Let the computer open the game")
    p_play.add_argument("--no-delay", action="store_true", help="Skip the pause before the computer moves")

    p_sol = sub.add_parser("solve", help="Search a position given as a move history")
    p_sol.add_argument("--moves", default="", help='Cell indices in play order, e.g. "0,4,8" (default: empty board)')
    p_sol.add_argument("--depth", type=int, default=None, help=f"Search depth 1-{MAX_DEPTH}")
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read one history per line from stdin and stream CSV output"
    )
    return p


def parse_moves(raw: str) -> Optional[List[int]]:
    """Parse "0,4,8" or "0 4 8" into a list of ints; None if any token is not a cell index."""
    tokens = raw.replace(",", " ").split()
    moves: List[int] = []
    for tok in tokens:
        if not tok.isdigit() or int(tok) > 8:
            return None
        moves.append(int(tok))
    return moves


def _state_from_raw(raw: str) -> Optional[GameState]:
    moves = parse_moves(raw)
    if moves is None:
        return None
    try:
        return GameState.from_moves(moves)
    except ValueError:
        return None


def _resolve_depth(depth: Optional[int]) -> int:
    return clamp_depth(depth) if depth is not None else load_settings().depth


def _solve(ns: argparse.Namespace, rng: random.Random) -> int:
    depth = _resolve_depth(ns.depth)
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["moves", "value", "best_moves"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            state = _state_from_raw(raw)
            if state is None:
                logging.debug("skipping invalid history: %r", raw)
                continue
            res = Searcher(state, rng=rng).search(depth)
            w.writerow([
                " ".join(map(str, state.moves)),
                res.value,
                " ".join(map(str, res.moves or [])),
            ])
        return 0

    state = _state_from_raw(ns.moves)
    if state is None:
        logging.error("Invalid move history %r. Expected distinct cells 0-8 played before any win.", ns.moves)
        return 2
    searcher = Searcher(state, rng=rng)
    res = searcher.search(depth)
    pick = rng.choice(res.moves) if res.moves else None
    logging.info(
        "status=%s value=%s moves=%s pick=%s nodes=%d",
        state.status.value,
        res.value,
        res.moves or [],
        pick,
        searcher.nodes,
    )
    return 0


def _play(ns: argparse.Namespace, rng: random.Random) -> int:
    settings = load_settings()
    delay_s = 0.0 if ns.no_delay else settings.delay_ms / 1000.0

    def pause(session: GameSession) -> None:
        print(session.message(), flush=True)
        if delay_s:
            time.sleep(delay_s)

    session = GameSession(depth=_resolve_depth(ns.depth), before_search=pause, rng=rng)
    print(PLAY_HELP)
    if ns.cpu_first:
        session.computer_move()

    while True:
        print()
        print(session.game.render())
        print(session.message())
        try:
            line = input("> ").strip().lower()
        except EOFError:
            return 0
        if line in ("q", "quit"):
            return 0
        if line == "n":
            session.new_game()
        elif line == "u":
            session.undo()
        elif line == "c":
            session.computer_move()
        elif line.isdigit() and len(line) == 1:
            if not session.human_move(int(line)):
                print("Illegal move.")
        else:
            print(PLAY_HELP)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-ai"))
        except Exception:
            print("unknown")
        return 0

    rng = random.Random(ns.seed)

    if ns.cmd == "solve":
        return _solve(ns, rng)
    if ns.cmd == "play":
        return _play(ns, rng)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
