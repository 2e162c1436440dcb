"""Named game rule sets, each with the evaluator used to search it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Tuple

from minmax.config import AppConfig
from minmax.games.state_evaluator import Evaluator
from minmax.games.turn_based_game import TurnBasedGame
from minmax.search.minimax_policy import MinimaxPolicy

GameFactory = Callable[..., TurnBasedGame]


@dataclass(frozen=True)
class GameEntry:
    factory: GameFactory
    evaluator: Evaluator
    defaults: Dict[str, Any] = field(default_factory=dict)


_GAMES: Dict[str, GameEntry] = {}


def register_game(
    game_id: str,
    factory: GameFactory,
    evaluator: Evaluator,
    **default_kwargs: Any,
) -> None:
    """Register rules under ``game_id`` together with their static evaluator."""
    if game_id in _GAMES:
        raise ValueError(f"Game id '{game_id}' is already registered.")
    _GAMES[game_id] = GameEntry(factory=factory, evaluator=evaluator, defaults=dict(default_kwargs))


def get_game_entry(game_id: str) -> GameEntry:
    try:
        return _GAMES[game_id]
    except KeyError:
        raise KeyError(f"Game id '{game_id}' is not registered.") from None


def list_games() -> Iterable[str]:
    return tuple(_GAMES)


def make_game(game_id: str, **overrides: Any) -> TurnBasedGame:
    """Build the rules of a registered game; ``overrides`` win over the defaults."""
    entry = get_game_entry(game_id)
    game = entry.factory(**{**entry.defaults, **overrides})
    if not isinstance(game, TurnBasedGame):
        raise TypeError(
            f"Factory for '{game_id}' built {type(game).__name__}, not a TurnBasedGame."
        )
    return game


def make_player(config: AppConfig) -> Tuple[TurnBasedGame, MinimaxPolicy]:
    """Rules plus a minimax policy searching them, as described by ``config``."""
    game = make_game(config.game.id, **config.game.params)
    policy = MinimaxPolicy(get_game_entry(config.game.id).evaluator, config.search)
    return game, policy
