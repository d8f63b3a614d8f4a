from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from hackenbush.analysis import AnalysisStrategy, make_strategy
from hackenbush.config import GameConfig
from hackenbush.core import (
    GameAnalysis,
    GameState,
    IllegalMove,
    Player,
    Position,
    apply_move,
    build_position,
    legal_moves,
    terminal_winner,
    validate_position,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    state: GameState
    analysis: Optional[GameAnalysis]


Listener = Callable[[GameSnapshot], None]


class GameController:
    """Turn order and terminal detection around an immutable position.

    The controller is either awaiting a move from ``current_player`` or over
    with a ``winner``. Every accepted move replaces the position; nothing is
    kept for undo, so callers wanting history hold on to the snapshots they
    receive.
    """

    def __init__(
        self,
        position: Position,
        config: Optional[GameConfig] = None,
        *,
        strategy: Optional[AnalysisStrategy] = None,
        listener: Optional[Listener] = None,
    ) -> None:
        validate_position(position)
        self.config = config or GameConfig()
        self.strategy = strategy or make_strategy(
            self.config.mode,
            position,
            convention=self.config.convention,
            search_config=self.config.search,
        )
        self._listener = listener
        self._analysed: Optional[Tuple[GameState, GameAnalysis]] = None

        starting = self.config.starting_player
        winner = terminal_winner(position, starting, starting.opponent, self.config.convention)
        self._state = GameState(
            position=position,
            current_player=starting,
            game_over=winner is not None,
            winner=winner,
        )
        self._emit()
        self._auto_play()

    @classmethod
    def from_edges(cls, records: Iterable[object], config: Optional[GameConfig] = None, **kwargs) -> "GameController":
        return cls(build_position(records), config, **kwargs)

    # ------------------------------------------------------------------
    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    def state(self) -> GameState:
        return self._state

    def legal_moves(self) -> List[str]:
        if self._state.game_over:
            return []
        return legal_moves(self._state.position, self._state.current_player)

    def analysis(self) -> Optional[GameAnalysis]:
        state = self._state
        if state.game_over:
            return None
        # Cached per state object.
        if self._analysed is not None and self._analysed[0] is state:
            return self._analysed[1]
        analysis = self.strategy.analyse(state.position, state.current_player, state.last_mover)
        self._analysed = (state, analysis)
        return analysis

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(state=self._state, analysis=self.analysis())

    # ------------------------------------------------------------------
    def play(self, edge_id: str, player: Player) -> GameState:
        self._apply(edge_id, player)
        self._emit()
        self._auto_play()
        return self._state

    def computer_move(self) -> GameState:
        """Play the strategy's suggestion for the side to move."""
        if self._state.game_over:
            raise IllegalMove("The game is already over.")
        self._play_suggestion()
        self._emit()
        return self._state

    # ------------------------------------------------------------------
    def _apply(self, edge_id: str, player: Player) -> None:
        state = self._state
        if state.game_over:
            raise IllegalMove("The game is already over.")
        if player is not state.current_player:
            raise IllegalMove(f"It is {state.current_player.value}'s turn, not {player.value}'s.")

        position = apply_move(state.position, edge_id, player)
        opponent = player.opponent
        winner = terminal_winner(position, opponent, player, self.config.convention)
        self._state = GameState(
            position=position,
            current_player=opponent,
            game_over=winner is not None,
            winner=winner,
            last_mover=player,
        )
        logger.debug("%s cut %s%s", player.value, edge_id, f"; {winner.value} wins" if winner else "")

    def _play_suggestion(self) -> None:
        player = self._state.current_player
        analysis = self.analysis()
        move = analysis.optimal_move if analysis is not None else None
        if move is None:
            moves = self.legal_moves()
            if not moves:
                raise IllegalMove(f"{player.value} has no legal move.")
            move = moves[0]
        self._apply(move, player)

    def _auto_play(self) -> None:
        if not self.config.auto_play:
            return
        while not self._state.game_over and self._state.current_player is self.config.computer_player:
            self._play_suggestion()
            self._emit()

    def _emit(self) -> None:
        if self._listener is not None:
            self._listener(self.snapshot())
