"""Exact blue-red valuation via the Colon Principle.

Each active edge hanging at ``level`` (one more than the ground distance of
its closer endpoint) contributes ``±1 / 2**(level - 1)``: blue positive, red
negative. The sum is exact for stalks; other graphs get the same formula
applied edge by edge, which is only an approximation there.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from hackenbush.core import (
    ZERO,
    DyadicNumber,
    Edge,
    EdgeColor,
    GameAnalysis,
    Player,
    Position,
    absolute,
    add_dyadic,
    apply_move,
    compare_dyadic,
    format_dyadic,
    ground_distances,
    simplify_dyadic,
)

logger = logging.getLogger(__name__)


def _edge_sign(color: EdgeColor) -> int:
    if color is EdgeColor.BLUE:
        return 1
    if color is EdgeColor.RED:
        return -1
    if color is EdgeColor.GREEN:
        return 0
    raise ValueError(f"Unknown edge colour {color!r}")


def _blue_red_only(position: Position) -> Position:
    return Position(tuple(edge for edge in position.edges if edge.color is not EdgeColor.GREEN))


def edge_value(level: int, color: EdgeColor) -> DyadicNumber:
    return DyadicNumber.unit(_edge_sign(color), level - 1)


def position_value(position: Position) -> DyadicNumber:
    """Colon-Principle value of ``position``; green edges are ignored."""
    position = _blue_red_only(position)
    distances = ground_distances(position)
    total = ZERO
    for edge in position.active_edges():
        reached = [distances[v] for v in edge.endpoints if v in distances]
        if not reached:
            continue
        total = add_dyadic(total, edge_value(1 + min(reached), edge.color))
    return simplify_dyadic(total)


def _favours(value: DyadicNumber, player: Player) -> bool:
    sign = value.sign()
    return sign > 0 if player.maximizing else sign < 0


def _candidates(position: Position, player: Player) -> List[Tuple[Edge, DyadicNumber]]:
    own = EdgeColor.for_player(player)
    results = []
    for edge in position.active_edges():
        if edge.color is not own:
            continue
        results.append((edge, position_value(apply_move(position, edge.id, player))))
    return results


def _smallest(options: List[Tuple[Edge, DyadicNumber]]) -> Optional[str]:
    best: Optional[Tuple[Edge, DyadicNumber]] = None
    for option in options:
        if best is None or compare_dyadic(absolute(option[1]), absolute(best[1])) < 0:
            best = option
    return None if best is None else best[0].id


class ColonStrategy:
    """One-ply greedy move choice on top of :func:`position_value`."""

    name = "exact"

    def analyse(self, position: Position, player: Player, last_mover: Optional[Player] = None) -> GameAnalysis:
        value = position_value(position)
        if value.sign() == 0:
            logger.debug("%s to move at zero; every cut loses", player.value)
            return GameAnalysis(value=value, optimal_move=None, winning=False)
        candidates = _candidates(position, player)
        if not candidates:
            return GameAnalysis(value=value, optimal_move=None, winning=False)

        if not _favours(value, player):
            move = _smallest(candidates)
            logger.debug(
                "%s is behind at %s; resisting with %s", player.value, format_dyadic(value), move
            )
            return GameAnalysis(value=value, optimal_move=move, winning=False)

        keeping = [c for c in candidates if _favours(c[1], player)]
        zeroing = [c for c in candidates if c[1].sign() == 0]
        if keeping:
            move = _smallest(keeping)
        elif zeroing:
            move = zeroing[0][0].id
        else:
            move = _smallest(candidates)
        logger.debug("%s leads at %s; playing %s", player.value, format_dyadic(value), move)
        return GameAnalysis(value=value, optimal_move=move, winning=True)


def analyse_blue_red(position: Position, player: Player) -> GameAnalysis:
    return ColonStrategy().analyse(position, player)
