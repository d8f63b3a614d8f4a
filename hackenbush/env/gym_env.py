from __future__ import annotations

from typing import Callable, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from hackenbush.config import GameConfig
from hackenbush.core import EdgeColor, Player, Position
from hackenbush.game import GameController

COLOR_CODES = {EdgeColor.RED: 0, EdgeColor.BLUE: 1, EdgeColor.GREEN: 2}
PLAYER_CODES = {Player.RED: 0, Player.BLUE: 1}


class HackenbushEnv(gym.Env):
    """Edge-cutting environment over a fixed starting position.

    Actions are indices into the position's edge tuple; rewards are from
    blue's point of view (+1 blue win, -1 red win).
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        position_factory: Callable[[], Position],
        *,
        config: Optional[GameConfig] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._position_factory = position_factory
        self._config = config or GameConfig(mode="search")
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self._controller = GameController(position_factory(), self._config)
        n_edges = len(self._controller.position)
        if n_edges == 0:
            raise ValueError("HackenbushEnv needs at least one edge.")

        self.observation_space = spaces.Dict(
            {
                "active": spaces.MultiBinary(n_edges),
                "colors": spaces.MultiDiscrete([len(COLOR_CODES)] * n_edges),
                "player": spaces.Discrete(len(PLAYER_CODES)),
            }
        )
        self.action_space = spaces.Discrete(n_edges)
        self._last_info: Dict[str, np.ndarray] = {}

    @property
    def controller(self) -> GameController:
        return self._controller

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._controller = GameController(self._position_factory(), self._config)
        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        edge = self._controller.position.edges[int(action_index)]
        self._controller.play(edge.id, self._controller.current_player)

        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info

        reward = self._compute_reward(self._controller.winner)
        terminated = self._controller.game_over
        truncated = False

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        position = self._controller.position
        for edge_id in self._controller.legal_moves():
            mask[position.index_of(edge_id)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        edges = self._controller.position.edges
        active = np.array([edge.active for edge in edges], dtype=np.int8)
        colors = np.array([COLOR_CODES[edge.color] for edge in edges], dtype=np.int64)
        return {"active": active, "colors": colors, "player": PLAYER_CODES[self._controller.current_player]}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, winner: Optional[Player]) -> float:
        if winner is Player.BLUE:
            return 1.0
        if winner is Player.RED:
            return -1.0
        return 0.0

    def _render_ascii(self) -> str:
        symbols = {EdgeColor.RED: "R", EdgeColor.BLUE: "B", EdgeColor.GREEN: "G"}
        rows = []
        for edge in self._controller.position.edges:
            mark = symbols[edge.color] if edge.active else "."
            rows.append(f"{mark} {edge.id}: {edge.endpoint_a} -- {edge.endpoint_b}")
        return "\n".join(rows)
