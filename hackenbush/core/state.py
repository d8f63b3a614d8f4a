from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .dyadic import DyadicNumber

GROUND = "ground"


class HackenbushError(ValueError):
    """Base class for engine errors."""


class IllegalMove(HackenbushError):
    """Raised when an edge cannot be cut by the requesting player."""


class InvalidPosition(HackenbushError):
    """Raised when an input graph cannot be turned into a playable position."""


class Player(Enum):
    RED = "red"
    BLUE = "blue"

    @property
    def opponent(self) -> "Player":
        if self is Player.RED:
            return Player.BLUE
        if self is Player.BLUE:
            return Player.RED
        raise ValueError(f"Unknown player {self!r}")

    @property
    def maximizing(self) -> bool:
        return self is Player.BLUE

    @classmethod
    def parse(cls, value: Union[str, "Player"]) -> "Player":
        if isinstance(value, Player):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown player colour {value!r}; expected 'red' or 'blue'.") from None


class EdgeColor(Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"

    def playable_by(self, player: Player) -> bool:
        if self is EdgeColor.GREEN:
            return True
        if self is EdgeColor.RED:
            return player is Player.RED
        if self is EdgeColor.BLUE:
            return player is Player.BLUE
        raise ValueError(f"Unknown edge colour {self!r}")

    @property
    def owner(self) -> Optional[Player]:
        """The side owning this colour; ``None`` for green."""
        if self is EdgeColor.RED:
            return Player.RED
        if self is EdgeColor.BLUE:
            return Player.BLUE
        if self is EdgeColor.GREEN:
            return None
        raise ValueError(f"Unknown edge colour {self!r}")

    @classmethod
    def for_player(cls, player: Player) -> "EdgeColor":
        return cls(player.value)


class Convention(Enum):
    NORMAL = "normal"
    MISERE = "misere"

    @classmethod
    def parse(cls, value: Union[str, "Convention"]) -> "Convention":
        if isinstance(value, Convention):
            return value
        text = str(value).lower().replace("è", "e")
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown convention {value!r}; expected 'normal' or 'misere'.") from None


@dataclass(frozen=True)
class Edge:
    id: str
    endpoint_a: str
    endpoint_b: str
    color: EdgeColor
    active: bool = True

    @property
    def endpoints(self) -> Tuple[str, str]:
        return (self.endpoint_a, self.endpoint_b)

    def deactivated(self) -> "Edge":
        return replace(self, active=False)


@dataclass(frozen=True)
class Position:
    """Immutable snapshot of the board; vertices are implied by edge endpoints."""

    edges: Tuple[Edge, ...] = ()
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "_index", {edge.id: i for i, edge in enumerate(self.edges)})

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __contains__(self, edge_id: object) -> bool:
        return edge_id in self._index

    def edge(self, edge_id: str) -> Optional[Edge]:
        idx = self._index.get(edge_id)
        return None if idx is None else self.edges[idx]

    def index_of(self, edge_id: str) -> int:
        return self._index[edge_id]

    def active_edges(self) -> Iterable[Edge]:
        return (edge for edge in self.edges if edge.active)

    def vertices(self) -> set[str]:
        found = {GROUND}
        for edge in self.edges:
            found.update(edge.endpoints)
        return found

    @property
    def has_green(self) -> bool:
        return any(edge.color is EdgeColor.GREEN for edge in self.active_edges())

    def __repr__(self) -> str:
        live = ", ".join(edge.id for edge in self.active_edges())
        return f"Position(active=[{live}], total={len(self.edges)})"


AnalysisValue = Union[DyadicNumber, int]


@dataclass(frozen=True)
class GameAnalysis:
    value: AnalysisValue
    optimal_move: Optional[str]
    winning: bool


@dataclass(frozen=True)
class GameState:
    position: Position
    current_player: Player
    game_over: bool = False
    winner: Optional[Player] = None
    last_mover: Optional[Player] = None

    @property
    def is_terminal(self) -> bool:
        return self.game_over
