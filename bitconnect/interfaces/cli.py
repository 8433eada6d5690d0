"""
cli.py - Command-line driver for the Connect Four engine

This module provides a CLI to play two-human games, replay a sequence of
columns, and benchmark the engine with random playouts.
"""

import argparse
import random
import sys
from typing import Dict, List, Optional

from bitconnect.debug import debug
from bitconnect.game.rules import GameEngine
from bitconnect.utils import WIDTH, Outcome, Player

QUIT = -1


def parse_moves(moves_str: str) -> List[int]:
    """
    Parse a comma-separated list of 1-based columns.

    Args:
        moves_str: e.g. "4,4,3"

    Returns:
        0-based column indices

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(token) - 1 for token in moves_str.split(',') if token.strip()]


def describe_result(game: GameEngine) -> str:
    if game.outcome == Outcome.WIN:
        return f"{game.winner} wins!"
    if game.outcome == Outcome.DRAW:
        return "Draw."
    return "Game unfinished."


def random_playout(game: GameEngine, rng: random.Random) -> GameEngine:
    """Play uniformly random legal moves on a copy until the game ends."""
    game = game.copy()
    while not game.is_terminal():
        game.play(rng.choice(game.legal_actions()))
    return game


class SimpleCLI:
    """Simple command-line interface for the Connect Four engine."""

    def __init__(self, argv: Optional[List[str]] = None):
        self.game = GameEngine()
        self.argv = argv
        self.args = None

    def parse_args(self) -> None:
        parser = argparse.ArgumentParser(description='Bit-packed Connect Four engine')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='info',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging level')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game interactively')

        replay_parser = subparsers.add_parser('replay', help='Replay a sequence of moves')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help=f'Comma-separated columns (1-{WIDTH})')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark random playouts')
        benchmark_parser.add_argument('--games', type=int, default=1000,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed')

        self.args = parser.parse_args(self.argv)

        if self.args.debug:
            debug.set_from_string('debug')
        else:
            debug.set_from_string(self.args.debug_level)

    def run(self) -> int:
        """Run the command selected on the command line and return an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (1-{WIDTH}) to make a move, 'q' to quit.")

        self.game = GameEngine()
        print(self.game.render())

        while not self.game.is_terminal():
            move = self.get_human_move(self.game.player_to_move())
            if move == QUIT:
                print("Quitting game.")
                return 0
            if move is None:
                continue

            self.game.play(move)
            print(self.game.render())

        print(describe_result(self.game))
        return 0

    def get_human_move(self, player: Player) -> Optional[int]:
        """
        Read one move from standard input.

        Returns:
            0-based column, QUIT, or None if the input was rejected
        """
        user_input = input(f"Player {player} (1-{WIDTH}, q): ").strip().lower()
        if user_input == 'q':
            return QUIT

        try:
            column = int(user_input) - 1
        except ValueError:
            print("Invalid input. Please enter a column number or 'q'.")
            return None

        if not 0 <= column < WIDTH:
            print(f"Column must be between 1 and {WIDTH}.")
            return None
        if not self.game.can_play(column):
            print(f"Column {column + 1} is full.")
            return None
        return column

    def replay(self) -> int:
        try:
            moves = parse_moves(self.args.moves)
        except ValueError:
            debug.error(f"Could not parse moves '{self.args.moves}'", "cli")
            print(f"Invalid move list: {self.args.moves}")
            return 1

        self.game = GameEngine()
        for index, column in enumerate(moves, start=1):
            if self.game.is_terminal():
                print(f"Move {index}: game already over.")
                return 1
            if not 0 <= column < WIDTH or not self.game.can_play(column):
                debug.warning(f"Rejected move {index} in column {column + 1}", "cli")
                print(f"Move {index}: column {column + 1} is not playable.")
                return 1

            self.game.play(column)
            print(self.game.render())

        print(describe_result(self.game))
        return 0

    def benchmark(self) -> int:
        games = self.args.games
        rng = random.Random(self.args.seed)
        root = GameEngine()
        counts: Dict[str, int] = {'ONE': 0, 'TWO': 0, 'DRAW': 0}
        total_moves = 0

        debug.info(f"Running {games} random playouts", "cli")
        debug.start_timer("benchmark")
        for _ in range(games):
            final = random_playout(root, rng)
            total_moves += final.moves
            if final.outcome == Outcome.DRAW:
                counts['DRAW'] += 1
            else:
                counts[final.winner.name] += 1
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        print(f"Games: {games}")
        print(f"Player ONE wins: {counts['ONE']}, player TWO wins: {counts['TWO']}, draws: {counts['DRAW']}")
        if games:
            print(f"Average game length: {total_moves / games:.2f} moves")
        if elapsed > 0:
            print(f"Games per second: {games / elapsed:.1f}")
            print(f"Moves per second: {total_moves / elapsed:.1f}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
