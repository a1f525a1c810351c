"""
Depth-bounded negamax with alpha-beta pruning, from the side-to-move perspective.
Search policy:
- A won position is a loss (-10) for the side to move; draws and depth cutoffs are 0.
- Moves are enumerated in ascending index order; all moves tying the best value are kept.
- The tree is explored by playing and taking back moves on one shared GameState.
- good_move picks uniformly at random among the tied best moves.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional

from .game_state import GameState

WIN_VALUE = 10

# Values are integers, so widening a child's window by one unit below alpha
# makes any sibling that ties the current best an exact value instead of a bound.
TIE_MARGIN = 1


@dataclass
class SearchResult:
    value: float
    moves: Optional[List[int]] = None


class Searcher:
    """Negamax searcher over a live GameState.

    The state is mutated during the search and restored before each call returns.
    `nodes` counts the positions visited since the last `search`/`good_move`.
    With ``pruning=False`` the search is a plain full-width negamax.
    """

    def __init__(self, state: GameState, rng: Optional[random.Random] = None, pruning: bool = True):
        self.state = state
        self.rng = rng if rng is not None else random.Random()
        self.pruning = pruning
        self.nodes = 0

    def minimax(self, depth: int, alpha: float = -math.inf, beta: float = math.inf) -> SearchResult:
        self.nodes += 1
        state = self.state
        if state.is_win:
            return SearchResult(-WIN_VALUE)
        if state.is_draw or depth == 0:
            return SearchResult(0)

        best = SearchResult(-math.inf, [])
        for move in state.valid_moves():
            state.play(move)
            if self.pruning:
                child = self.minimax(depth - 1, -beta, -(alpha - TIE_MARGIN))
            else:
                child = self.minimax(depth - 1)
            state.take_back()
            value = -child.value
            if value > best.value:
                best = SearchResult(value, [move])
            elif value == best.value:
                best.moves.append(move)
            alpha = max(alpha, value)
            if self.pruning and alpha >= beta:
                break
        return best

    def search(self, depth: int) -> SearchResult:
        self.nodes = 0
        result = self.minimax(depth, -math.inf, math.inf)
        logging.debug(
            "search depth=%d value=%s best=%s nodes=%d",
            depth,
            result.value,
            result.moves,
            self.nodes,
        )
        return result

    def good_move(self, depth: int) -> Optional[int]:
        """Return a random move among the best found, or None when there is nothing to play."""
        state = self.state
        if state.is_win or state.is_draw or not state.valid_moves():
            return None
        if depth < 1:
            logging.debug("good_move called with depth=%d; no search performed", depth)
            return None
        result = self.search(depth)
        return self.rng.choice(result.moves)


def good_move(state: GameState, depth: int, rng: Optional[random.Random] = None) -> Optional[int]:
    return Searcher(state, rng=rng).good_move(depth)
