"""Tests for the game registry."""

from __future__ import annotations

from uuid import uuid4

import pytest

from minmax.config import AppConfig
from minmax.games import FunctionalGame
from minmax.games.toy import LetterGame, TicTacToeGame, letter_evaluator
from minmax.registry import get_game_entry, list_games, make_game, make_player, register_game
from minmax.search import MinimaxPolicy


def _countdown_game(start: int = 3) -> FunctionalGame:
    return FunctionalGame(lambda s: ["step"], lambda s, m: s - 1, lambda s: s <= 0)


class _NotAGame:
    def __init__(self, size: int) -> None:
        self.size = size


def test_register_and_make_game():
    game_id = f"countdown_{uuid4().hex}"
    register_game(game_id, _countdown_game, float, start=4)

    game = make_game(game_id, start=2)
    assert isinstance(game, FunctionalGame)
    assert game.is_terminal(0)

    entry = get_game_entry(game_id)
    assert entry.factory is _countdown_game
    assert entry.evaluator is float
    assert entry.defaults == {"start": 4}

    with pytest.raises(ValueError):
        register_game(game_id, _countdown_game, float)


def test_factory_must_build_rules():
    game_id = f"not_a_game_{uuid4().hex}"
    register_game(game_id, _NotAGame, float, size=3)
    with pytest.raises(TypeError):
        make_game(game_id)


def test_toy_games_registered():
    assert "letters" in list_games()
    assert "tictactoe" in list_games()
    assert isinstance(make_game("tictactoe"), TicTacToeGame)

    game = make_game("letters", letters=["a", "b"])
    assert isinstance(game, LetterGame)
    assert list(game.legal_actions(game.initial_state())) == ["a", "b"]


def test_make_player_from_config():
    cfg = AppConfig.from_dict(
        {"game": {"id": "letters"}, "search": {"plies": 2, "algorithm": "recursive"}}
    )
    game, policy = make_player(cfg)

    assert isinstance(game, LetterGame)
    assert isinstance(policy, MinimaxPolicy)
    assert policy.evaluator is letter_evaluator
    assert policy.select_action(game, game.initial_state()) == "a"
    assert policy.last_statistics.total_nodes_visited == 13


def test_unknown_game():
    with pytest.raises(KeyError):
        make_game(f"missing_{uuid4().hex}")
    with pytest.raises(KeyError):
        get_game_entry(f"missing_{uuid4().hex}")
