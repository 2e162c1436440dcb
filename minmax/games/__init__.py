from __future__ import annotations

from .state_evaluator import Evaluator, StateValueFn, score_state
from .turn_based_game import FunctionalGame, TurnBasedGame

__all__ = ["Evaluator", "FunctionalGame", "StateValueFn", "TurnBasedGame", "score_state"]
