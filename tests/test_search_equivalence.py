from typing import Dict, List, Tuple

import pytest
from hypothesis import given, settings, strategies as st

from tictactoe_ai.game_state import GameState
from tictactoe_ai.search import Searcher


def _reachable_histories(min_len: int) -> Dict[Tuple[int, ...], List[int]]:
    """One move history per distinct non-terminal board with at least `min_len` moves."""
    found: Dict[Tuple[int, ...], List[int]] = {}
    g = GameState()

    def walk() -> None:
        if g.is_win or g.is_draw:
            return
        if len(g.moves) >= min_len and g.board not in found:
            found[g.board] = list(g.moves)
        for mv in g.valid_moves():
            g.play(mv)
            walk()
            g.take_back()

    walk()
    return found


@pytest.fixture(scope="module")
def nonempty_histories():
    return list(_reachable_histories(1).values())


def _both(moves: List[int], depth: int):
    pruned = Searcher(GameState.from_moves(moves)).search(depth)
    full = Searcher(GameState.from_moves(moves), pruning=False).search(depth)
    return pruned, full


def test_every_reachable_position_matches_full_width(nonempty_histories):
    # distinct non-terminal boards after at least one move
    assert len(nonempty_histories) == 4519
    for moves in nonempty_histories:
        pruned, full = _both(moves, 9)
        assert pruned.value == full.value, moves
        assert pruned.moves == full.moves, moves


@pytest.mark.parametrize("moves", [[], [4], [0], [1], [0, 4], [4, 0], [1, 7]])
def test_opening_positions_match_full_width(moves):
    pruned, full = _both(moves, 9)
    assert pruned == full


@settings(max_examples=60, deadline=None)
@given(
    st.permutations(list(range(9))).flatmap(
        lambda order: st.integers(min_value=2, max_value=8).map(lambda n: order[:n])
    ),
    st.integers(min_value=1, max_value=9),
)
def test_depth_limited_search_matches_full_width(moves: List[int], depth: int):
    g = GameState()
    for mv in moves:
        if not g.play(mv):
            break
    if g.is_win or g.is_draw:
        return
    pruned, full = _both(list(g.moves), depth)
    assert pruned.value == full.value
    assert pruned.moves == full.moves
