"""Minimax search: two-phase tree search, recursive search and a policy wrapper."""

from .minimax_policy import MinimaxPolicy
from .recursive import minmax_recur
from .result import SearchResult, SearchStatistics
from .tree import SearchNode, SearchTree, format_evaluation
from .tree_search import build_tree, evaluate_leaves, fold, minmax, select_best_move

__all__ = [
    "MinimaxPolicy",
    "SearchNode",
    "SearchResult",
    "SearchStatistics",
    "SearchTree",
    "build_tree",
    "evaluate_leaves",
    "fold",
    "format_evaluation",
    "minmax",
    "minmax_recur",
    "select_best_move",
]
