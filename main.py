#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py simulate [--size N] [--mines M] [--games G]
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield.agents import Evaluator, RandomAgent
from minefield.engine import EngineConfig, EngineError, GameEngine
from minefield.game import GameStatus, render_text


def play(args: argparse.Namespace) -> None:
    """Play one game in the terminal."""
    config = EngineConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    engine = GameEngine(config)

    try:
        created = engine.create_session(args.size, args.mines, "cli")
    except EngineError as exc:
        print(f"Error: {exc.message}")
        return

    print(f"Board: {created.size}x{created.size} with {created.mine_count} mines")
    print("Enter moves as 'row col' (q to quit).\n")
    print(render_text(created.grid))

    status = created.status
    while status == GameStatus.ACTIVE:
        try:
            line = input("\nmove> ").strip()
        except EOFError:
            break
        if line.lower() in ("q", "quit", "exit"):
            break

        parts = line.split()
        if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
            print("Expected two numbers: row col")
            continue

        try:
            result = engine.apply_move("cli", int(parts[0]), int(parts[1]))
        except EngineError as exc:
            print(exc.message)
            continue

        print(render_text(result.grid))
        print(result.message)
        status = result.status


def simulate(args: argparse.Namespace) -> None:
    """Evaluate the random agent over many games."""
    evaluator = Evaluator(args.size, args.mines, num_episodes=args.games)
    agent = RandomAgent(args.size, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    try:
        results = evaluator.evaluate(agent)
    except EngineError as exc:
        print(f"Error: {exc.message}")
        return

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper session engine"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (e.g. INFO, DEBUG)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    play_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    # Simulate command
    sim_parser = subparsers.add_parser(
        "simulate", help="Evaluate the random agent"
    )
    sim_parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    sim_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    sim_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    sim_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
