#!/usr/bin/env python3
"""Play a batch of games between two policies on one position and report win rates."""

import argparse
import json
import logging
from typing import Dict, List, Optional

import numpy as np
from tqdm.auto import tqdm

from hackenbush import GameConfig, HackenbushEnv, load_config
from hackenbush.config import load_edges
from hackenbush.analysis import make_strategy
from hackenbush.core import Position, build_position
from hackenbush.evaluation import Policy, RandomPolicy, StrategyPolicy, evaluate_policies


def make_policy(kind: str, position: Position, config: GameConfig, rng: np.random.Generator) -> Policy:
    if kind == "random":
        return RandomPolicy(rng)
    strategy = make_strategy(
        kind,
        position,
        convention=config.convention,
        search_config=config.search,
    )
    return StrategyPolicy(strategy)


def run(args: argparse.Namespace) -> Dict[str, object]:
    config = load_config(args.config)
    if args.convention is not None:
        config.convention = args.convention
    if args.depth is not None:
        config.search.depth = args.depth
    config.auto_play = False
    config = GameConfig.from_dict(vars(config))

    edges: List[Dict] = load_edges(args.position)
    position = build_position(edges)
    rng = np.random.default_rng(args.seed)

    policy_blue = make_policy(args.blue, position, config, rng)
    policy_red = make_policy(args.red, position, config, rng)

    def env_factory() -> HackenbushEnv:
        return HackenbushEnv(lambda: build_position(edges), config=config)

    with tqdm(total=args.episodes, desc="Games") as bar:
        result = evaluate_policies(
            policy_blue,
            policy_red,
            episodes=args.episodes,
            env_factory=env_factory,
            rng=rng,
            progress=lambda done: bar.update(done - bar.n),
        )
    return {
        "games": result.games_played,
        "blue_wins": result.blue_wins,
        "red_wins": result.red_wins,
        "blue_winrate": result.winrate_blue(),
        "average_length": result.average_length,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("position", help="YAML/JSON file with the edge list")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--blue", choices=["random", "auto", "exact", "search"], default="auto")
    parser.add_argument("--red", choices=["random", "auto", "exact", "search"], default="random")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--convention", choices=["normal", "misere"])
    parser.add_argument("--depth", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    print(json.dumps(run(args), indent=2))


if __name__ == "__main__":
    main()
