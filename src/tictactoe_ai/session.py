"""
Game session: one human against the computer, without any display code.
Notes:
- A session owns its GameState and the human's side; nothing is process-global.
- Asking the computer to move hands it the side to move and gives the human the other one.
- `before_search` runs right before the computer searches (used by front ends for pacing).
"""
from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from .config import clamp_depth, search_depth
from .game_state import SYMBOLS, GameState
from .search import Searcher

BeforeSearch = Callable[["GameSession"], None]


class GameSession:
    def __init__(
        self,
        depth: Optional[int] = None,
        before_search: Optional[BeforeSearch] = None,
        rng: Optional[random.Random] = None,
    ):
        self.depth = clamp_depth(depth if depth is not None else search_depth())
        self.before_search = before_search
        self.rng = rng if rng is not None else random.Random()
        self.game = GameState()
        self.human = 1

    def new_game(self) -> None:
        self.game = GameState()
        self.human = 1
        logging.debug("new game, human plays %s", SYMBOLS[self.human])

    def set_depth(self, depth: int) -> int:
        self.depth = clamp_depth(depth)
        return self.depth

    def is_over(self) -> bool:
        return self.game.is_win or self.game.is_draw

    def human_move(self, index: int) -> bool:
        if self.game.turn != self.human or not self.game.play(index):
            return False
        logging.debug("human plays %d", index)
        self.computer_move()
        return True

    def computer_move(self) -> Optional[int]:
        if self.is_over():
            return None
        self.human = 3 - self.game.turn
        if self.before_search is not None:
            self.before_search(self)
        move = Searcher(self.game, rng=self.rng).good_move(self.depth)
        if move is None or not self.game.play(move):
            return None
        logging.debug("computer plays %d at depth %d", move, self.depth)
        return move

    def undo(self) -> bool:
        if self.game.take_back():
            return True
        logging.info("No moves to undo.")
        return False

    def message(self) -> str:
        game = self.game
        if game.is_win:
            return "CPU won" if game.turn == self.human else "You won"
        if game.is_draw:
            return "It's a draw"
        if game.turn == self.human:
            return "Your turn"
        return "CPU is preparing move..."

    def inactive(self) -> bool:
        return self.is_over() or self.game.turn != self.human

    def cells(self) -> List[str]:
        return [SYMBOLS[v] for v in self.game.board]
