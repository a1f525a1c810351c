"""tictactoe_ai package.

Game state, negamax search with alpha-beta pruning, a session layer for
human-vs-computer play, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .game_state import EMPTY, PLAYER_ONE, PLAYER_TWO, SYMBOLS, WIN_PATTERNS, GameState, Status
from .search import SearchResult, Searcher, good_move
from .session import GameSession

__all__ = [
    "GameState",
    "Status",
    "EMPTY",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "SYMBOLS",
    "WIN_PATTERNS",
    "Searcher",
    "SearchResult",
    "good_move",
    "GameSession",
]
