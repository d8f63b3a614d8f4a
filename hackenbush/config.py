from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from hackenbush.analysis import STRATEGY_MODES, SearchConfig
from hackenbush.core import Convention, Player


@dataclass
class GameConfig:
    convention: Convention = Convention.NORMAL
    starting_player: Player = Player.RED
    player1_color: Player = Player.RED
    mode: str = "auto"
    auto_play: bool = False
    search: SearchConfig = field(default_factory=SearchConfig)

    def __post_init__(self) -> None:
        self.convention = Convention.parse(self.convention)
        self.starting_player = Player.parse(self.starting_player)
        self.player1_color = Player.parse(self.player1_color)
        if self.mode not in STRATEGY_MODES:
            raise ValueError(f"Unknown analysis mode {self.mode!r}; expected one of {STRATEGY_MODES}.")
        if isinstance(self.search, dict):
            self.search = SearchConfig(**self.search)

    @property
    def computer_player(self) -> Player:
        return self.player1_color.opponent

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GameConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: Union[str, Path, None]) -> GameConfig:
    if path is None:
        return GameConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return GameConfig()
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    return GameConfig.from_dict(cfg)


def load_edges(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Edge records from a YAML/JSON file, either a bare list or under ``edges``."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or []
    if isinstance(data, dict):
        data = data.get("edges", [])
    return list(data)
