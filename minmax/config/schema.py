"""Configuration schema for search runs."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

SEARCH_ALGORITHMS = ("tree", "recursive")


@dataclass
class SearchConfig:
    plies: int = 2
    algorithm: str = "tree"

    def __post_init__(self) -> None:
        if isinstance(self.plies, bool) or not isinstance(self.plies, numbers.Integral) or self.plies < 1:
            raise ValueError(f"search.plies must be a positive integer, got {self.plies!r}")
        if self.algorithm not in SEARCH_ALGORITHMS:
            raise ValueError(
                f"search.algorithm must be one of {SEARCH_ALGORITHMS}, got {self.algorithm!r}"
            )


@dataclass
class GameConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AppConfig:
    game: GameConfig
    search: SearchConfig = field(default_factory=SearchConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        game_data = data.get("game")
        if game_data is None:
            raise ValueError("game is required")
        game = GameConfig(id=game_data["id"], params=dict(game_data.get("params") or {}))

        search_data = data.get("search") or {}
        search = SearchConfig(
            plies=search_data.get("plies", 2),
            algorithm=str(search_data.get("algorithm", "tree")),
        )
        return cls(game=game, search=search)


def load_config(path: Union[str, Path]) -> AppConfig:
    """
    Load AppConfig from a YAML file.

    Convenience for scripts and tests; the search functions themselves take
    plain arguments and never read configuration files.
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
