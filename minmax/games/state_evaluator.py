from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from minmax.errors import InvariantViolation

S = TypeVar("S")

# Score of a state for the player about to move there.
Evaluator = Callable[[S], float]


class StateValueFn(ABC, Generic[S]):
    """
    Static evaluation of a state from the perspective of the player to move.

    ``math.inf`` means a certain win for that player, ``-math.inf`` a
    certain loss; anything finite is a graded assessment (draws included).
    The evaluator knows nothing about maximizing or minimizing players,
    that framing belongs to the search.
    """

    @abstractmethod
    def evaluate(self, state: S) -> float:
        """
        Higher is better for the player to move in ``state``.
        """
        ...

    def __call__(self, state: S) -> float:
        return self.evaluate(state)


def score_state(evaluator: Evaluator[S], state: S) -> float:
    """Call ``evaluator`` on ``state``, rejecting scores that cannot be ordered."""
    score = evaluator(state)
    if math.isnan(score):
        raise InvariantViolation(f"evaluator returned NaN for state {state!r}")
    return score
