"""Hackenbush game engine."""

from . import analysis, core, env, evaluation, game
from .analysis import ColonStrategy, MinimaxSearch, SearchConfig, make_strategy, position_value
from .config import GameConfig, load_config
from .core import (
    Convention,
    DyadicNumber,
    Edge,
    EdgeColor,
    GameAnalysis,
    GameState,
    IllegalMove,
    InvalidPosition,
    Player,
    Position,
    apply_move,
    build_position,
)
from .env import HackenbushEnv
from .evaluation import EvaluationResult, RandomPolicy, StrategyPolicy, evaluate_policies
from .game import GameController, GameSnapshot

__all__ = [
    "analysis",
    "core",
    "env",
    "evaluation",
    "game",
    "ColonStrategy",
    "MinimaxSearch",
    "SearchConfig",
    "make_strategy",
    "position_value",
    "GameConfig",
    "load_config",
    "Convention",
    "DyadicNumber",
    "Edge",
    "EdgeColor",
    "GameAnalysis",
    "GameState",
    "IllegalMove",
    "InvalidPosition",
    "Player",
    "Position",
    "apply_move",
    "build_position",
    "HackenbushEnv",
    "EvaluationResult",
    "RandomPolicy",
    "StrategyPolicy",
    "evaluate_policies",
    "GameController",
    "GameSnapshot",
]
