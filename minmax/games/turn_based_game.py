from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Sequence, TypeVar

S = TypeVar("S")  # game state
A = TypeVar("A")  # action (move)


class TurnBasedGame(ABC, Generic[S, A]):
    """
    Rules of a deterministic two-player game with perfect information.

    Pure rules only: states are never mutated, new states are derived
    through ``apply_action``. The search never calls ``legal_actions``
    on a state for which ``is_terminal`` holds.
    """

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[A]:
        """All legal actions in ``state``; order decides tie-breaks."""

    @abstractmethod
    def apply_action(self, state: S, action: A) -> S:
        """Return the state reached by playing ``action``."""

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Has the game ended at ``state``?"""


class FunctionalGame(TurnBasedGame[S, A]):
    """Rules assembled from three plain functions."""

    def __init__(
        self,
        brancher: Callable[[S], Sequence[A]],
        next_state: Callable[[S, A], S],
        is_terminal_state: Callable[[S], bool],
    ) -> None:
        self._brancher = brancher
        self._next_state = next_state
        self._is_terminal_state = is_terminal_state

    def legal_actions(self, state: S) -> Sequence[A]:
        return self._brancher(state)

    def apply_action(self, state: S, action: A) -> S:
        return self._next_state(state, action)

    def is_terminal(self, state: S) -> bool:
        return self._is_terminal_state(state)
