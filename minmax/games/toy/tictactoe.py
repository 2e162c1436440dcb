"""Tic-tac-toe rules (immutable state, for search algorithms)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

from minmax.games.turn_based_game import TurnBasedGame

# Flattened cell indices of every winning line.
WIN_LINES = np.array(
    [
        [0, 1, 2], [3, 4, 5], [6, 7, 8],
        [0, 3, 6], [1, 4, 7], [2, 5, 8],
        [0, 4, 8], [2, 4, 6],
    ],
    dtype=np.intp,
)


@dataclass(frozen=True, eq=False)
class TicTacToeState:
    board: np.ndarray  # (9,) int8: 0 empty, 1 X, -1 O
    current_token: int
    winner: Optional[int]
    done: bool

    def __post_init__(self) -> None:
        self.board.flags.writeable = False


class TicTacToeGame(TurnBasedGame[TicTacToeState, int]):
    """
    Pure 3x3 rules; actions are flattened cell indices 0-8, X moves first.
    """

    def initial_state(self) -> TicTacToeState:
        return TicTacToeState(
            board=np.zeros(9, dtype=np.int8),
            current_token=1,
            winner=None,
            done=False,
        )

    def state_from_actions(self, actions: Iterable[int]) -> TicTacToeState:
        state = self.initial_state()
        for action in actions:
            state = self.apply_action(state, action)
        return state

    def legal_actions(self, state: TicTacToeState) -> Sequence[int]:
        if state.done:
            return []
        return [int(cell) for cell in np.flatnonzero(state.board == 0)]

    def apply_action(self, state: TicTacToeState, action: int) -> TicTacToeState:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")
        if action < 0 or action >= 9:
            raise ValueError(f"Illegal action: {action}")
        if state.board[action] != 0:
            raise ValueError(f"Cell {action} is occupied")

        board = state.board.copy()
        board[action] = state.current_token

        winner: Optional[int] = None
        done = False
        if _has_line(board, state.current_token):
            winner = state.current_token
            done = True
        elif np.all(board != 0):
            winner = 0
            done = True

        return TicTacToeState(
            board=board,
            current_token=-state.current_token,
            winner=winner,
            done=done,
        )

    def current_player(self, state: TicTacToeState) -> int:
        return state.current_token

    def is_terminal(self, state: TicTacToeState) -> bool:
        return state.done

    def winner(self, state: TicTacToeState) -> Optional[int]:
        return state.winner


def _has_line(board: np.ndarray, token: int) -> bool:
    return bool(np.any(np.all(board[WIN_LINES] == token, axis=1)))


def tictactoe_evaluator(state: TicTacToeState) -> float:
    """
    Score for the player to move.

    Finished games are +/-inf or 0 for a draw; otherwise the number of
    lines still open for the player to move minus those open for the
    opponent.
    """
    me = state.current_token
    if state.done:
        if state.winner == me:
            return math.inf
        if state.winner == -me:
            return -math.inf
        return 0.0

    lines = state.board[WIN_LINES]
    open_for_me = int(np.sum(np.all(lines != -me, axis=1)))
    open_for_opponent = int(np.sum(np.all(lines != me, axis=1)))
    return float(open_for_me - open_for_opponent)
