"""Result and statistics records returned by the search entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class SearchResult(Generic[A]):
    best_move: A
    # From the root player's perspective.
    evaluation: float


@dataclass
class SearchStatistics:
    total_nodes_visited: int = 0
    leaf_nodes_evaluated: int = 0
    # Reserved for a pruning search; stays 0.
    pruning_count: int = 0
