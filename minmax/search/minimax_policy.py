"""Minimax search policy over TurnBasedGame + evaluator."""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from minmax.config import SearchConfig
from minmax.games.state_evaluator import Evaluator
from minmax.games.turn_based_game import TurnBasedGame
from .recursive import minmax_recur
from .result import SearchResult, SearchStatistics
from .tree_search import minmax

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


class MinimaxPolicy(Generic[StateT, ActionT]):
    """Fixed-depth minimax policy; ``config.algorithm`` picks the search variant."""

    def __init__(
        self,
        evaluator: Evaluator[StateT],
        config: Optional[SearchConfig] = None,
    ) -> None:
        self.evaluator = evaluator
        self.config = config or SearchConfig()
        self.last_result: Optional[SearchResult[ActionT]] = None
        self.last_statistics: Optional[SearchStatistics] = None

    def select_action(self, game: TurnBasedGame[StateT, ActionT], state: StateT) -> ActionT:
        if self.config.algorithm == "recursive":
            stats = SearchStatistics()
            result = minmax_recur(state, game, self.evaluator, self.config.plies, stats)
            self.last_statistics = stats
        else:
            result = minmax(state, game, self.evaluator, self.config.plies)
            self.last_statistics = None

        self.last_result = result
        logger.debug(
            "%s search picked %r (evaluation %s)",
            self.config.algorithm,
            result.best_move,
            result.evaluation,
        )
        return result.best_move
