#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py simulate [--games N] [--rows R] [--cols C] [--mines M]
    python main.py board [--rows R] [--cols C] [--mines M] [--seed S]
"""
import argparse
import logging
import sys
from typing import Dict, Optional

from minesweeper.agents import RandomAgent
from minesweeper.game import BoardConfig, GameEngine, MinesweeperEnv


def setup_logging(verbose: bool = False) -> None:
    """Setup application logging"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def play_games(
    config: BoardConfig, games: int, seed: Optional[int] = None
) -> Dict[str, float]:
    """Play games with the random agent and collect statistics."""
    if games < 1:
        raise ValueError(f"games must be at least 1, got {games}")
    env = MinesweeperEnv(config=config)
    agent = RandomAgent(config.rows, config.cols, seed=seed)

    wins = 0
    total_reward = 0.0
    total_steps = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)
        agent.reset()
        done = False

        while not done:
            valid_actions = env.get_action_mask()
            action = agent.select_action(obs, valid_actions)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            total_reward += reward

        total_steps += info["steps"]
        if info["game_state"] == "WON":
            wins += 1

    return {
        "win_rate": wins / games,
        "avg_reward": total_reward / games,
        "avg_steps": total_steps / games,
    }


def simulate(args: argparse.Namespace) -> None:
    """Play games with the random agent and print the results."""
    config = BoardConfig(args.rows, args.cols, args.mines)
    print(
        f"Playing {args.games} games on {config.rows}x{config.cols} "
        f"with {config.total_mines} mines..."
    )
    results = play_games(config, args.games, args.seed)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")


def show_board(args: argparse.Namespace) -> None:
    """Print the content view of a generated board."""
    engine = GameEngine.init(args.rows, args.cols, args.mines, seed=args.seed)
    print(f"rows:{engine.rows} cols:{engine.cols} mines:{engine.total_mines()}")
    print(engine.debug(), end="")


def positive_int(value: str) -> int:
    """Argparse type accepting integers of at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--cols", type=int, default=9, help="Number of columns")
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (default: 15%% of cells)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper engine - simulate games and inspect boards"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play games with the random agent"
    )
    simulate_parser.add_argument(
        "--games", type=positive_int, default=100,
        help="Number of games to play",
    )
    add_board_arguments(simulate_parser)

    board_parser = subparsers.add_parser(
        "board", help="Print a generated board with its mines"
    )
    add_board_arguments(board_parser)
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.verbose)

    if args.command == "simulate":
        simulate(args)
    elif args.command == "board":
        show_board(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
