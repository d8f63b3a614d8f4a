"""Core game logic for Hackenbush."""

from .dyadic import (
    ZERO,
    DyadicNumber,
    absolute,
    add_dyadic,
    compare_dyadic,
    format_dyadic,
    format_dyadic_mixed,
    negate,
    simplify_dyadic,
    to_float,
)
from .state import (
    GROUND,
    Convention,
    Edge,
    EdgeColor,
    GameAnalysis,
    GameState,
    HackenbushError,
    IllegalMove,
    InvalidPosition,
    Player,
    Position,
)
from .rules import (
    active_counts,
    apply_move,
    build_position,
    connected_vertices,
    ground_distances,
    has_moves,
    legal_moves,
    terminal_winner,
    validate_position,
)

__all__ = [
    "ZERO",
    "DyadicNumber",
    "absolute",
    "add_dyadic",
    "compare_dyadic",
    "format_dyadic",
    "format_dyadic_mixed",
    "negate",
    "simplify_dyadic",
    "to_float",
    "GROUND",
    "Convention",
    "Edge",
    "EdgeColor",
    "GameAnalysis",
    "GameState",
    "HackenbushError",
    "IllegalMove",
    "InvalidPosition",
    "Player",
    "Position",
    "active_counts",
    "apply_move",
    "build_position",
    "connected_vertices",
    "ground_distances",
    "has_moves",
    "legal_moves",
    "terminal_winner",
    "validate_position",
]
