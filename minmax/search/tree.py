"""Game tree used by the two-phase minimax search.

The tree is an arena: every node lives in ``SearchTree.nodes`` and refers
to its children (and, for diagnostics, to its parent) by index. Nodes are
numbered in pre-order, so a child always has a larger index than its
parent and a reversed walk over the arena sees children before parents.
"""

from __future__ import annotations

import math
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from minmax.errors import ChoreographyError

S = TypeVar("S")
A = TypeVar("A")


class SearchNode(Generic[S, A]):
    """One game state in the tree plus the bookkeeping the search needs."""

    __slots__ = ("index", "state", "is_maximizing", "depth", "parent", "children", "_evaluation")

    def __init__(
        self,
        index: int,
        state: S,
        is_maximizing: bool,
        depth: int = 0,
        parent: Optional[int] = None,
    ) -> None:
        self.index = index
        self.state = state
        self.is_maximizing = is_maximizing
        self.depth = depth
        self.parent = parent
        # None marks a leaf (terminal or at the ply limit).
        self.children: Optional[List[Tuple[A, int]]] = None
        self._evaluation: Optional[float] = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def evaluation(self) -> Optional[float]:
        """Score for the player to move at this node, ``None`` until set."""
        return self._evaluation

    @evaluation.setter
    def evaluation(self, value: float) -> None:
        if self._evaluation is not None:
            raise ChoreographyError(
                f"node #{self.index} is already evaluated ({self._evaluation}), "
                "evaluations cannot be reassigned"
            )
        if value is None:
            raise ChoreographyError(f"node #{self.index} cannot be evaluated to None")
        self._evaluation = value

    @property
    def is_evaluated(self) -> bool:
        return self._evaluation is not None

    def effective_evaluation(self) -> float:
        """Evaluation seen from the root player's side."""
        if self._evaluation is None:
            raise ChoreographyError(
                f"node #{self.index} has not been evaluated yet, "
                "its effective evaluation is undefined"
            )
        return self._evaluation * (1 if self.is_maximizing else -1)

    def __repr__(self) -> str:
        side = "MAX" if self.is_maximizing else "MIN"
        return f"SearchNode(#{self.index}, {side}, depth={self.depth}, evaluation={self._evaluation!r})"


class SearchTree(Generic[S, A]):
    """Arena of ``SearchNode`` objects rooted at index 0."""

    def __init__(self) -> None:
        self.nodes: List[SearchNode[S, A]] = []

    def add_node(
        self,
        state: S,
        is_maximizing: bool,
        parent: Optional[SearchNode[S, A]] = None,
    ) -> SearchNode[S, A]:
        node = SearchNode(
            index=len(self.nodes),
            state=state,
            is_maximizing=is_maximizing,
            depth=0 if parent is None else parent.depth + 1,
            parent=None if parent is None else parent.index,
        )
        self.nodes.append(node)
        return node

    @property
    def root(self) -> SearchNode[S, A]:
        return self.nodes[0]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def leaf_count(self) -> int:
        return sum(1 for node in self.nodes if node.is_leaf)

    def leaves(self) -> Iterator[SearchNode[S, A]]:
        return (node for node in self.nodes if node.is_leaf)

    def children_of(self, node: SearchNode[S, A]) -> List[Tuple[A, SearchNode[S, A]]]:
        if node.children is None:
            return []
        return [(action, self.nodes[index]) for action, index in node.children]

    def post_order(self) -> Iterator[SearchNode[S, A]]:
        """Children before parents."""
        return reversed(self.nodes)

    def render(self, describe: Callable[[SearchNode[S, A]], str]) -> str:
        """
        Human-readable dump of the tree, one node per line in pre-order.

        The root line reads ``ROOT node #0 with value: ...``; every other
        line names the edge it hangs from, e.g.
        ``node #0 ~~[a]~~> node #1 with value: ...``.
        """
        lines = []
        for node in self.nodes:
            if node.parent is None:
                lines.append(f"ROOT node #{node.index} with value: {describe(node)}")
                continue
            action = self._edge_label(node)
            lines.append(
                f"node #{node.parent} ~~[{action}]~~> node #{node.index} "
                f"with value: {describe(node)}"
            )
        return "\n".join(lines)

    def _edge_label(self, node: SearchNode[S, A]) -> A:
        parent = self.nodes[node.parent]
        for action, index in parent.children or ():
            if index == node.index:
                return action
        raise ChoreographyError(f"node #{node.index} is not a child of node #{parent.index}")

    def __len__(self) -> int:
        return len(self.nodes)


def format_evaluation(value: Optional[float]) -> str:
    if value is None:
        return "?"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return str(value)
