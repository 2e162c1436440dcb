"""Shared fixtures: games whose states are explicit trees.

A state is either a number (a finished game scored for the player to move
there) or a mapping / list of child states keyed by move.
"""

from __future__ import annotations

import math

import pytest

from minmax.games import FunctionalGame


def _moves(state):
    if isinstance(state, dict):
        return list(state.keys())
    if isinstance(state, list):
        return list(range(len(state)))
    raise AssertionError(f"brancher called on a finished state: {state!r}")


def _next_state(state, move):
    return state[move]


def _is_terminal(state) -> bool:
    return not isinstance(state, (dict, list))


def explicit_tree_evaluator(state) -> float:
    if _is_terminal(state):
        return state
    # Cut off by the ply limit: deterministic finite guess.
    return float(len(state))


@pytest.fixture
def tree_game() -> FunctionalGame:
    return FunctionalGame(_moves, _next_state, _is_terminal)


@pytest.fixture
def tree_evaluator():
    return explicit_tree_evaluator


@pytest.fixture
def pseudo_game_1() -> dict:
    #   X                     maximizing
    #   +--b-->X              minimizing
    #          +--c1-->5
    #          +--c2-->4
    #          +--c3-->1
    #          +--c4-->2
    #          +--c5-->3
    return {"b": {"c1": 5, "c2": 4, "c3": 1, "c4": 2, "c5": 3}}


@pytest.fixture
def pseudo_game_2() -> dict:
    #   X                     maximizing
    #   +--b-->X              minimizing
    #   |      +--b1-->4
    #   |      +--b2-->4
    #   |      +--b3-->0
    #   +--c-->X              minimizing
    #          +--c1-->2
    #          +--c2-->1
    #          +--c3-->3
    return {
        "b": {"b1": 4, "b2": 4, "b3": 0},
        "c": {"c1": 2, "c2": 1, "c3": 3},
    }


@pytest.fixture
def forced_loss_game() -> dict:
    # "lose" and "also_lose" end the game with the opponent (to move) winning.
    return {"lose": math.inf, "safe": {"x": 0, "y": 2}, "also_lose": math.inf}
