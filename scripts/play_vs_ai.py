#!/usr/bin/env python3
"""Play Hackenbush against the computer in the console."""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from hackenbush import GameConfig, GameController, GameSnapshot, IllegalMove, Player, load_config
from hackenbush.config import load_edges
from hackenbush.core import DyadicNumber, Position, build_position, format_dyadic_mixed


def format_board(position: Position) -> str:
    symbols = {"red": "R", "blue": "B", "green": "G"}
    rows = []
    for edge in position.edges:
        mark = symbols[edge.color.value] if edge.active else "."
        rows.append(f"  {mark} {edge.id}: {edge.endpoint_a} -- {edge.endpoint_b}")
    return "\n".join(rows)


def describe(snapshot: GameSnapshot) -> str:
    state = snapshot.state
    if state.game_over:
        winner = state.winner.value.upper() if state.winner else "?"
        return f"{winner} wins!"
    lines = [f"To move: {state.current_player.value.upper()}"]
    analysis = snapshot.analysis
    if analysis is not None:
        value = analysis.value
        shown = format_dyadic_mixed(value) if isinstance(value, DyadicNumber) else str(value)
        lines.append(f"Value: {shown}")
    return "\n".join(lines)


def print_snapshot(snapshot: GameSnapshot) -> None:
    print()
    print(format_board(snapshot.state.position))
    print(describe(snapshot))


def prompt_human_move(controller: GameController) -> Optional[str]:
    moves = controller.legal_moves()
    print("Legal edges: " + ", ".join(moves))
    while True:
        raw = input("Edge to cut (h for hint, q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            return None
        if raw.lower() in {"h", "hint"}:
            analysis = controller.analysis()
            hint = analysis.optimal_move if analysis else None
            print(f"Suggested: {hint or 'no good move'}")
            continue
        if raw in moves:
            return raw
        print("Not a legal edge, try again.")


def play_interactive(config: GameConfig, edges: List[Dict]) -> Optional[Player]:
    controller = GameController(build_position(edges), config, listener=print_snapshot)
    human = config.player1_color

    while not controller.game_over:
        if controller.current_player is not human:
            controller.computer_move()
            continue
        edge_id = prompt_human_move(controller)
        if edge_id is None:
            print("Bye.")
            return None
        try:
            controller.play(edge_id, human)
        except IllegalMove as exc:
            print(f"Ignored: {exc}")
    return controller.winner


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Hackenbush in the console against the computer.")
    parser.add_argument("position", help="YAML/JSON file with the edge list")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--convention", choices=["normal", "misere"])
    parser.add_argument("--player1-color", choices=["red", "blue"])
    parser.add_argument("--starting-player", choices=["red", "blue"])
    parser.add_argument("--mode", choices=["auto", "exact", "search"])
    parser.add_argument("--depth", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config)
    if args.convention is not None:
        config.convention = args.convention
    if args.player1_color is not None:
        config.player1_color = args.player1_color
    if args.starting_player is not None:
        config.starting_player = args.starting_player
    if args.mode is not None:
        config.mode = args.mode
    if args.depth is not None:
        config.search.depth = args.depth
    config = GameConfig.from_dict(vars(config))

    try:
        play_interactive(config, load_edges(args.position))
    except ValueError as exc:
        print(f"Cannot start game: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
