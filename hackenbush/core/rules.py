from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .state import (
    GROUND,
    Convention,
    Edge,
    EdgeColor,
    IllegalMove,
    InvalidPosition,
    Player,
    Position,
)

logger = logging.getLogger(__name__)

_ENDPOINT_KEYS: Tuple[Tuple[str, str], ...] = (("endpoint_a", "endpoint_b"), ("from", "to"))


def _adjacency(edges: Iterable[Edge]) -> Dict[str, Set[str]]:
    # Sets collapse parallel edges into a single link.
    adjacency: Dict[str, Set[str]] = {}
    for edge in edges:
        if not edge.active:
            continue
        a, b = edge.endpoints
        adjacency.setdefault(a, set()).add(b)
        adjacency.setdefault(b, set()).add(a)
    return adjacency


def _bfs(edges: Iterable[Edge]) -> Dict[str, int]:
    adjacency = _adjacency(edges)
    distances = {GROUND: 0}
    queue = deque([GROUND])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency.get(current, ()):
            if neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
    return distances


def ground_distances(position: Position) -> Dict[str, int]:
    """Unweighted BFS distance from ``ground`` over active edges."""
    return _bfs(position.edges)


def connected_vertices(position: Position) -> Set[str]:
    return set(ground_distances(position))


def _prune_disconnected(edges: List[Edge]) -> List[Edge]:
    reachable = set(_bfs(edges))
    return [
        edge if not edge.active or (edge.endpoint_a in reachable and edge.endpoint_b in reachable)
        else edge.deactivated()
        for edge in edges
    ]


def apply_move(position: Position, edge_id: str, player: Player) -> Position:
    edge = position.edge(edge_id)
    if edge is None:
        raise IllegalMove(f"No edge with id {edge_id!r}.")
    if not edge.active:
        raise IllegalMove(f"Edge {edge_id!r} has already been removed.")
    if not edge.color.playable_by(player):
        raise IllegalMove(f"{player.value} cannot cut {edge.color.value} edge {edge_id!r}.")

    edges = list(position.edges)
    edges[position.index_of(edge_id)] = edge.deactivated()
    return Position(tuple(_prune_disconnected(edges)))


def legal_moves(position: Position, player: Player) -> List[str]:
    return [edge.id for edge in position.active_edges() if edge.color.playable_by(player)]


def has_moves(position: Position, player: Player) -> bool:
    return any(edge.color.playable_by(player) for edge in position.active_edges())


def active_counts(position: Position) -> Dict[EdgeColor, int]:
    counts = {color: 0 for color in EdgeColor}
    for edge in position.active_edges():
        counts[edge.color] += 1
    return counts


def terminal_winner(
    position: Position,
    to_move: Player,
    last_mover: Player,
    convention: Convention,
) -> Optional[Player]:
    """Winner if the game is over with ``to_move`` to play, else ``None``."""
    mover_stuck = not has_moves(position, to_move)
    other_stuck = not has_moves(position, to_move.opponent)

    if convention is Convention.NORMAL:
        if mover_stuck and other_stuck:
            return last_mover
        if mover_stuck:
            return to_move.opponent
        return None
    if convention is Convention.MISERE:
        if mover_stuck and other_stuck:
            return last_mover.opponent
        if mover_stuck:
            return to_move
        if other_stuck:
            return to_move.opponent
        return None
    raise ValueError(f"Unknown convention {convention!r}")


def _edge_from_record(record: Mapping[str, object]) -> Edge:
    try:
        edge_id = str(record["id"])
    except KeyError:
        raise InvalidPosition(f"Edge record without an id: {dict(record)!r}") from None

    endpoints = None
    for key_a, key_b in _ENDPOINT_KEYS:
        if key_a in record and key_b in record:
            endpoints = (str(record[key_a]), str(record[key_b]))
            break
    if endpoints is None:
        raise InvalidPosition(f"Edge {edge_id!r} is missing its endpoints.")

    try:
        color = EdgeColor(str(record.get("color", "")).lower())
    except ValueError:
        raise InvalidPosition(f"Edge {edge_id!r} has unknown colour {record.get('color')!r}.") from None

    return Edge(edge_id, endpoints[0], endpoints[1], color)


def build_position(records: Iterable[object]) -> Position:
    """Validate externally supplied edges and build the initial position.

    Records may be :class:`Edge` instances or mappings with ``id``, ``color``
    and either ``endpoint_a``/``endpoint_b`` or ``from``/``to``. Every edge must
    hang from ``ground``; anything else is rejected rather than silently
    dropped.
    """
    edges: List[Edge] = []
    seen: Set[str] = set()
    for record in records:
        if isinstance(record, Edge):
            edge = Edge(record.id, record.endpoint_a, record.endpoint_b, EdgeColor(record.color))
        elif isinstance(record, Mapping):
            edge = _edge_from_record(record)
        else:
            raise InvalidPosition(f"Unsupported edge record {record!r}.")
        if edge.id in seen:
            raise InvalidPosition(f"Duplicate edge id {edge.id!r}.")
        seen.add(edge.id)
        edges.append(edge)

    position = validate_position(Position(tuple(edges)))
    logger.debug("Built position with %d edges", len(edges))
    return position


def validate_position(position: Position) -> Position:
    """Check that every active edge of ``position`` is connected to ``ground``."""
    seen: Set[str] = set()
    for edge in position.edges:
        if edge.id in seen:
            raise InvalidPosition(f"Duplicate edge id {edge.id!r}.")
        seen.add(edge.id)

    active = list(position.active_edges())
    if not active:
        return position
    if not any(GROUND in edge.endpoints for edge in active):
        raise InvalidPosition("No edge touches the ground vertex.")

    reachable = connected_vertices(position)
    floating = [edge.id for edge in active if edge.endpoint_a not in reachable or edge.endpoint_b not in reachable]
    if floating:
        raise InvalidPosition(f"Edges not connected to ground: {', '.join(floating)}")
    return position
