"""Depth-limited minimax with alpha-beta pruning.

Handles green edges and both play conventions. Blue is always the
maximizing side; terminal positions score ``±WIN_SCORE`` and everything else
at the horizon falls back to an edge-count heuristic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from hackenbush.core import (
    Convention,
    EdgeColor,
    GameAnalysis,
    Player,
    Position,
    active_counts,
    apply_move,
    legal_moves,
    terminal_winner,
)

logger = logging.getLogger(__name__)

WIN_SCORE = 1000


@dataclass
class SearchConfig:
    depth: int = 8
    # Empirical knob: below this many live edges the misère heuristic flips sign.
    misere_endgame_threshold: int = 8
    prune: bool = True
    max_nodes: Optional[int] = None


@dataclass
class SearchResult:
    best_move: Optional[str]
    score: int
    nodes: int = 0
    cutoffs: int = 0
    budget_exhausted: bool = False


class MinimaxSearch:
    name = "search"

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        convention: Convention = Convention.NORMAL,
    ) -> None:
        self.config = config or SearchConfig()
        self.convention = Convention.parse(convention)
        self._nodes = 0
        self._cutoffs = 0

    # ------------------------------------------------------------------
    def analyse(self, position: Position, player: Player, last_mover: Optional[Player] = None) -> GameAnalysis:
        result = self.search(position, player, last_mover)
        if player.maximizing:
            winning = result.best_move is not None and result.score > 0
        else:
            winning = result.best_move is not None and result.score < 0
        return GameAnalysis(value=result.score, optimal_move=result.best_move, winning=winning)

    def search(self, position: Position, player: Player, last_mover: Optional[Player] = None) -> SearchResult:
        self._nodes = 0
        self._cutoffs = 0
        if last_mover is not None:
            winner = terminal_winner(position, player, last_mover, self.convention)
            if winner is not None:
                return SearchResult(best_move=None, score=WIN_SCORE if winner is Player.BLUE else -WIN_SCORE)
        moves = legal_moves(position, player)
        if not moves:
            return SearchResult(best_move=None, score=self.evaluate(position))

        maximizing = player.maximizing
        alpha = float("-inf")
        beta = float("inf")
        best_move: Optional[str] = None
        best_score = 0

        for edge_id in moves:
            child = apply_move(position, edge_id, player)
            score = self._minimax(
                child,
                player.opponent,
                player,
                self.config.depth - 1,
                alpha,
                beta,
                not maximizing,
            )
            improved = score > best_score if maximizing else score < best_score
            if best_move is None or improved:
                best_move = edge_id
                best_score = score
            if self.config.prune:
                if maximizing:
                    alpha = max(alpha, best_score)
                else:
                    beta = min(beta, best_score)

        logger.debug(
            "search %s (%s): move=%s score=%d nodes=%d cutoffs=%d",
            player.value,
            self.convention.value,
            best_move,
            best_score,
            self._nodes,
            self._cutoffs,
        )
        return SearchResult(
            best_move=best_move,
            score=best_score,
            nodes=self._nodes,
            cutoffs=self._cutoffs,
            budget_exhausted=self._budget_exhausted(),
        )

    def evaluate(self, position: Position) -> int:
        counts = active_counts(position)
        score = counts[EdgeColor.BLUE] - counts[EdgeColor.RED]
        if self.convention is Convention.MISERE and sum(counts.values()) <= self.config.misere_endgame_threshold:
            score = -score
        return score

    # ------------------------------------------------------------------
    def _budget_exhausted(self) -> bool:
        return self.config.max_nodes is not None and self._nodes >= self.config.max_nodes

    def _minimax(
        self,
        position: Position,
        to_move: Player,
        last_mover: Player,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
    ) -> int:
        self._nodes += 1

        winner = terminal_winner(position, to_move, last_mover, self.convention)
        if winner is not None:
            return WIN_SCORE if winner is Player.BLUE else -WIN_SCORE

        if depth <= 0 or self._budget_exhausted():
            return self.evaluate(position)

        moves = legal_moves(position, to_move)
        if not moves:
            return self.evaluate(position)

        if maximizing:
            value = -WIN_SCORE - 1
            for edge_id in moves:
                child = apply_move(position, edge_id, to_move)
                value = max(value, self._minimax(child, to_move.opponent, to_move, depth - 1, alpha, beta, False))
                if self.config.prune:
                    alpha = max(alpha, value)
                    if beta <= alpha:
                        self._cutoffs += 1
                        break
            return value

        value = WIN_SCORE + 1
        for edge_id in moves:
            child = apply_move(position, edge_id, to_move)
            value = min(value, self._minimax(child, to_move.opponent, to_move, depth - 1, alpha, beta, True))
            if self.config.prune:
                beta = min(beta, value)
                if beta <= alpha:
                    self._cutoffs += 1
                    break
        return value
