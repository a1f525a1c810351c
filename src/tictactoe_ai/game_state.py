"""
Game state for Tic-Tac-Toe: board, move history and derived status.
Notes:
- The board is a list of 9 cells in row-major order: 0=empty, 1=X, 2=O. X always starts.
- History is LIFO; the move at position k was played by player 1 + k % 2.
- Status flags are recomputed after every play and cleared by every take-back.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

SYMBOLS = " XO"

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


def has_line(board: List[int]) -> bool:
    for a, b, c in WIN_PATTERNS:
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return True
    return False


class GameState:
    """A single game, mutated in place by `play` and `take_back`."""

    def __init__(self) -> None:
        self._board: List[int] = [EMPTY] * 9
        self._moves: List[int] = []
        self.is_win = False
        self.is_draw = False

    @classmethod
    def from_moves(cls, moves: Iterable[int]) -> "GameState":
        """Replay a move history. Raises ValueError on the first rejected move."""
        state = cls()
        for i, move in enumerate(moves):
            if not state.play(move):
                raise ValueError(f"Illegal move {move!r} at ply {i}")
        return state

    @property
    def board(self) -> Tuple[int, ...]:
        return tuple(self._board)

    @property
    def moves(self) -> Tuple[int, ...]:
        return tuple(self._moves)

    @property
    def turn(self) -> int:
        return 1 + len(self._moves) % 2

    @property
    def status(self) -> Status:
        if self.is_win:
            return Status.WON
        if self.is_draw:
            return Status.DRAWN
        return Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[int]:
        # The side that just moved completed the line.
        return 3 - self.turn if self.is_win else None

    def valid_moves(self) -> List[int]:
        return [i for i, v in enumerate(self._board) if v == EMPTY]

    def play(self, move: int) -> bool:
        if not isinstance(move, int) or not 0 <= move < 9:
            return False
        if self._board[move] != EMPTY or self.is_win:
            return False
        self._board[move] = self.turn
        self._moves.append(move)
        self.is_win = has_line(self._board)
        self.is_draw = not self.is_win and len(self._moves) == len(self._board)
        return True

    def take_back(self) -> bool:
        if not self._moves:
            return False
        self._board[self._moves.pop()] = EMPTY
        self.is_win = self.is_draw = False
        return True

    def copy(self) -> "GameState":
        other = GameState()
        other._board = self._board[:]
        other._moves = self._moves[:]
        other.is_win = self.is_win
        other.is_draw = self.is_draw
        return other

    def render(self) -> str:
        rows = []
        for r in range(3):
            rows.append(" | ".join(SYMBOLS[v] for v in self._board[3 * r:3 * r + 3]))
        return "\n---------\n".join(rows)

    def __repr__(self) -> str:
        return f"GameState(moves={self._moves!r}, status={self.status.value})"
