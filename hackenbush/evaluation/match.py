from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from hackenbush.analysis import AnalysisStrategy
from hackenbush.core import GameState, Player
from hackenbush.env import HackenbushEnv


class Policy:
    """Policy interface producing action probabilities over legal edges."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


class StrategyPolicy(Policy):
    """Deterministic policy that plays an analysis strategy's suggestion."""

    def __init__(self, strategy: AnalysisStrategy) -> None:
        self.strategy = strategy

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros_like(legal_mask, dtype=np.float32)
        analysis = self.strategy.analyse(state.position, state.current_player, state.last_mover)
        if analysis.optimal_move is None:
            legal = np.flatnonzero(legal_mask)
            if len(legal):
                probs[legal[0]] = 1.0
            return probs
        probs[state.position.index_of(analysis.optimal_move)] = 1.0
        return probs


@dataclass
class EvaluationResult:
    games_played: int
    blue_wins: int
    red_wins: int
    average_length: float

    def winrate_blue(self) -> float:
        return self.blue_wins / max(1, self.games_played)

    def winrate_red(self) -> float:
        return self.red_wins / max(1, self.games_played)


def evaluate_policies(
    policy_blue: Policy,
    policy_red: Policy,
    *,
    episodes: int,
    env_factory: Callable[[], HackenbushEnv],
    rng: Optional[np.random.Generator] = None,
    progress: Optional[Callable[[int], None]] = None,
) -> EvaluationResult:
    rng = rng or np.random.default_rng()

    blue_wins = 0
    red_wins = 0
    total_ply = 0

    for episode in range(episodes):
        env = env_factory()
        obs, info = env.reset()
        terminated = env.controller.game_over
        ply = 0

        while not terminated:
            state_snapshot = env.controller.state()
            legal_mask = info["legal_action_mask"]
            policy = policy_blue if state_snapshot.current_player is Player.BLUE else policy_red
            probs = policy.act(state_snapshot, legal_mask)
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
            probs = probs / probs.sum()
            action_index = int(rng.choice(len(probs), p=probs))
            obs, reward, terminated, truncated, info = env.step(action_index)
            ply += 1
            if truncated:
                terminated = True

        total_ply += ply
        if env.controller.winner is Player.BLUE:
            blue_wins += 1
        elif env.controller.winner is Player.RED:
            red_wins += 1
        if progress is not None:
            progress(episode + 1)

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        blue_wins=blue_wins,
        red_wins=red_wins,
        average_length=average_length,
    )
