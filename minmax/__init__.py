"""Generic minimax search for two-player, zero-sum, perfect-information games.

Modules:
- games: rules contract (TurnBasedGame) and evaluator contract
- search: two-phase tree search, recursive search, policy wrapper
- config: dataclass configuration loaded from YAML
- registry: named game rule sets
"""

from .errors import ChoreographyError, InvariantViolation, PreconditionError, SearchError
from .games import Evaluator, FunctionalGame, StateValueFn, TurnBasedGame
from .search import MinimaxPolicy, SearchResult, SearchStatistics, minmax, minmax_recur

__all__ = [
    "ChoreographyError",
    "Evaluator",
    "FunctionalGame",
    "InvariantViolation",
    "MinimaxPolicy",
    "PreconditionError",
    "SearchError",
    "SearchResult",
    "SearchStatistics",
    "StateValueFn",
    "TurnBasedGame",
    "minmax",
    "minmax_recur",
]
