"""A game that never ends under perfect play.

Each turn the player to move names one of the letters ``a``, ``b`` or
``c``. Repeating the letter the opponent just named loses. Nobody has to
make that mistake, so every position reachable without it is a draw.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from minmax.games.turn_based_game import TurnBasedGame
from minmax.search.tree import SearchNode, format_evaluation

LETTERS: Tuple[str, ...] = ("a", "b", "c")


@dataclass(frozen=True)
class LetterState:
    prev_letter: Optional[str] = None
    letter: Optional[str] = None

    def play(self, letter: str) -> "LetterState":
        return LetterState(prev_letter=self.letter, letter=letter)

    @property
    def is_over(self) -> bool:
        return self.letter is not None and self.letter == self.prev_letter


class LetterGame(TurnBasedGame[LetterState, str]):
    def __init__(self, letters: Sequence[str] = LETTERS) -> None:
        self.letters = tuple(letters)

    def initial_state(self) -> LetterState:
        return LetterState()

    def legal_actions(self, state: LetterState) -> Sequence[str]:
        return list(self.letters)

    def apply_action(self, state: LetterState, action: str) -> LetterState:
        if action not in self.letters:
            raise ValueError(f"Illegal letter: {action!r}")
        return state.play(action)

    def is_terminal(self, state: LetterState) -> bool:
        return state.is_over


def letter_evaluator(state: LetterState) -> float:
    # The player who just moved repeated a letter, so the player to move won.
    if state.is_over:
        return math.inf
    return 0


def describe_letter_node(node: SearchNode[LetterState, str]) -> str:
    """One-line summary of a letter-game node, used with ``SearchTree.render``."""
    state = node.state
    prev_letter = state.prev_letter or "."
    letter = state.letter or "."
    end_state = "Y" if state.is_over else "N"
    evaluation = format_evaluation(node.effective_evaluation() if node.is_evaluated else None)
    side = "MAX" if node.is_maximizing else "MIN"
    return f"letr: {prev_letter}-{letter}, end state? {end_state} ev: {evaluation}, {side}"
