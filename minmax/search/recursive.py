"""Single-pass recursive minimax that never materializes the game tree.

Visits exactly the nodes ``build_tree`` would create, in the same order,
and returns the same ``SearchResult`` as ``tree_search.minmax``.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, TypeVar

from minmax.errors import InvariantViolation
from minmax.games.state_evaluator import Evaluator, score_state
from minmax.games.turn_based_game import TurnBasedGame
from .result import SearchResult, SearchStatistics
from .tree_search import check_search_preconditions

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


def minmax_recur(
    state: S,
    game: TurnBasedGame[S, A],
    evaluator: Evaluator[S],
    plies: int,
    stats: Optional[SearchStatistics] = None,
) -> SearchResult[A]:
    """
    Pick the best move for the player to move in ``state``.

    ``stats`` is updated in place with the number of visited nodes and
    evaluated leaves. The caller owns it and must not share one record
    between concurrent searches.
    """
    check_search_preconditions(game, state, plies)
    if stats is None:
        stats = SearchStatistics()

    stats.total_nodes_visited += 1
    actions = game.legal_actions(state)
    if not actions:
        raise InvariantViolation("legal_actions returned no moves for the non-terminal root")

    best_move: Optional[A] = None
    best_value = -math.inf
    found = False
    for action in actions:
        value = _search(game, evaluator, game.apply_action(state, action), plies - 1, False, stats)
        # First action reaching the maximum wins ties, -inf included.
        if not found or value > best_value:
            best_move, best_value, found = action, value, True

    logger.debug(
        "minmax_recur plies=%d nodes=%d leaves=%d best_move=%r evaluation=%s",
        plies,
        stats.total_nodes_visited,
        stats.leaf_nodes_evaluated,
        best_move,
        best_value,
    )
    return SearchResult(best_move=best_move, evaluation=best_value)


def _search(
    game: TurnBasedGame[S, A],
    evaluator: Evaluator[S],
    state: S,
    plies_remaining: int,
    maximizing: bool,
    stats: SearchStatistics,
) -> float:
    """Value of ``state`` from the root player's perspective."""
    stats.total_nodes_visited += 1

    if plies_remaining == 0 or game.is_terminal(state):
        stats.leaf_nodes_evaluated += 1
        score = score_state(evaluator, state)
        return score if maximizing else -score

    actions = game.legal_actions(state)
    if not actions:
        raise InvariantViolation("legal_actions returned no moves for a non-terminal state")

    value = -math.inf if maximizing else math.inf
    for action in actions:
        child_value = _search(
            game, evaluator, game.apply_action(state, action), plies_remaining - 1, not maximizing, stats
        )
        value = max(value, child_value) if maximizing else min(value, child_value)
    return value
