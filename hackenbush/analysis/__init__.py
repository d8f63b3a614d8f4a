"""Position analysis strategies."""

from __future__ import annotations

from typing import Optional, Protocol, Union

from hackenbush.core import Convention, GameAnalysis, Player, Position

from .colon import ColonStrategy, analyse_blue_red, edge_value, position_value
from .search import WIN_SCORE, MinimaxSearch, SearchConfig, SearchResult

STRATEGY_MODES = ("auto", "exact", "search")


class AnalysisStrategy(Protocol):
    name: str

    def analyse(self, position: Position, player: Player, last_mover: Optional[Player] = None) -> GameAnalysis:
        ...


def make_strategy(
    mode: str,
    position: Position,
    *,
    convention: Union[str, Convention] = Convention.NORMAL,
    search_config: Optional[SearchConfig] = None,
) -> AnalysisStrategy:
    """Pick the exact engine where it applies, the search engine otherwise."""
    convention = Convention.parse(convention)
    exact_applies = convention is Convention.NORMAL and not position.has_green
    if mode == "auto":
        mode = "exact" if exact_applies else "search"
    if mode == "exact":
        if not exact_applies:
            raise ValueError("Exact valuation only supports normal play without green edges.")
        return ColonStrategy()
    if mode == "search":
        return MinimaxSearch(search_config, convention=convention)
    raise ValueError(f"Unknown analysis mode {mode!r}; expected one of {STRATEGY_MODES}.")


__all__ = [
    "AnalysisStrategy",
    "ColonStrategy",
    "MinimaxSearch",
    "SearchConfig",
    "SearchResult",
    "STRATEGY_MODES",
    "WIN_SCORE",
    "analyse_blue_red",
    "edge_value",
    "make_strategy",
    "position_value",
]
