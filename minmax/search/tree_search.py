"""Two-phase minimax: materialize the game tree, then fold it.

``minmax`` runs four discrete passes over one ``SearchTree``:

1. ``build_tree`` expands every non-terminal state up to the ply limit,
2. ``evaluate_leaves`` scores each leaf with the caller's evaluator,
3. ``fold`` pulls evaluations up from children to parents,
4. ``select_best_move`` picks the first root child matching the root.

Each node stores its evaluation from the point of view of the player to
move there; ``SearchNode.effective_evaluation`` flips the sign on
minimizing nodes so values are comparable from the root player's side.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import TypeVar

from minmax.errors import ChoreographyError, InvariantViolation, PreconditionError
from minmax.games.state_evaluator import Evaluator, score_state
from minmax.games.turn_based_game import TurnBasedGame
from .result import SearchResult
from .tree import SearchNode, SearchTree

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


def check_search_preconditions(game: TurnBasedGame[S, A], state: S, plies: int) -> None:
    """Reject a terminal root or a ply count that is not a positive integer."""
    if game.is_terminal(state):
        raise PreconditionError("minimax search called on a terminal state")
    if isinstance(plies, bool) or not isinstance(plies, numbers.Integral) or plies < 1:
        raise PreconditionError(f"illegal plies for minimax search: {plies!r}")


def build_tree(root_state: S, game: TurnBasedGame[S, A], plies: int) -> SearchTree[S, A]:
    """
    Expand the game tree below ``root_state`` for at most ``plies`` moves.

    A node becomes a leaf when no plies remain or its state is terminal;
    otherwise it gets one child per legal action, in the order returned by
    ``game.legal_actions``. The root is a maximizing node and the flag
    alternates with depth.
    """
    tree: SearchTree[S, A] = SearchTree()
    root = tree.add_node(root_state, is_maximizing=True)
    _expand(tree, root, game, plies)
    return tree


def _expand(
    tree: SearchTree[S, A],
    node: SearchNode[S, A],
    game: TurnBasedGame[S, A],
    plies_remaining: int,
) -> None:
    if plies_remaining == 0 or game.is_terminal(node.state):
        return

    node.children = []
    for action in game.legal_actions(node.state):
        next_state = game.apply_action(node.state, action)
        child = tree.add_node(next_state, is_maximizing=not node.is_maximizing, parent=node)
        node.children.append((action, child.index))
        _expand(tree, child, game, plies_remaining - 1)


def evaluate_leaves(tree: SearchTree[S, A], evaluator: Evaluator[S]) -> None:
    """Score every leaf of ``tree``; internal nodes are left untouched."""
    for node in tree.leaves():
        node.evaluation = score_state(evaluator, node.state)


def fold(tree: SearchTree[S, A]) -> None:
    """
    Propagate leaf evaluations up to the root.

    Maximizing nodes take the max of their children's effective
    evaluations, minimizing nodes the min. The reduced value is stored in
    the node's own perspective so that its effective evaluation equals it.
    """
    for node in tree.post_order():
        if node.is_leaf:
            continue
        children = tree.children_of(node)
        if not children:
            raise InvariantViolation(
                f"node #{node.index} is not a leaf but has no children; "
                "legal_actions returned no moves for a non-terminal state"
            )
        for action, child in children:
            if not child.is_evaluated:
                raise InvariantViolation(
                    f"child #{child.index} (action {action!r}) of node #{node.index} "
                    "is not evaluated at fold time"
                )
        effective = [child.effective_evaluation() for _, child in children]
        if node.is_maximizing:
            node.evaluation = max(effective, default=-math.inf)
        else:
            node.evaluation = -min(effective, default=math.inf)


def select_best_move(tree: SearchTree[S, A]) -> SearchResult[A]:
    """
    Return the first root action whose child matches the root evaluation.

    Ties are broken by the order of ``legal_actions`` at the root.
    """
    root = tree.root
    if root.parent is not None:
        raise InvariantViolation(f"node #{root.index} is not a root")
    if not root.children:
        raise InvariantViolation("cannot select a move from a childless root")
    if not root.is_evaluated:
        raise ChoreographyError("root must be evaluated before selecting a move")

    root_evaluation = root.evaluation
    for action, child in tree.children_of(root):
        if child.effective_evaluation() == root_evaluation:
            return SearchResult(best_move=action, evaluation=root_evaluation)

    raise InvariantViolation(
        f"no child of the root matches the root evaluation {root_evaluation}"
    )


def minmax(
    state: S,
    game: TurnBasedGame[S, A],
    evaluator: Evaluator[S],
    plies: int,
) -> SearchResult[A]:
    """Pick the best move for the player to move in ``state``."""
    check_search_preconditions(game, state, plies)

    tree = build_tree(state, game, plies)
    evaluate_leaves(tree, evaluator)
    fold(tree)
    result = select_best_move(tree)

    logger.debug(
        "minmax plies=%d nodes=%d leaves=%d best_move=%r evaluation=%s",
        plies,
        tree.node_count,
        tree.leaf_count,
        result.best_move,
        result.evaluation,
    )
    return result
