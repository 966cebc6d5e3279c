"""
cli.py - Command-line interface for Join Dots

This module provides a terminal front end for the engine: a hot-seat game
for two players at one keyboard, and a benchmark that pushes random legal
games through a session.
"""

import argparse
import asyncio
import random
from typing import List, Optional, Union

from joindots.debug import debug, DebugLevel
from joindots.game.session import GameSession
from joindots.utils import DROP_DELAY, GameConfig, GameStatus, Player

QUIT = 'q'
RESTART = 'r'


class SimpleCLI:
    """Simple command-line interface for playing Join Dots."""

    def __init__(self, argv: Optional[List[str]] = None):
        """
        Initialize the CLI.

        Args:
            argv: Arguments to parse instead of sys.argv
        """
        self.argv = argv
        self.args = None
        self.session: Optional[GameSession] = None

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug', action='store_true',
                            help='Enable debug mode (same as --debug-level debug)')
        common.add_argument('--debug-level', default='warning',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging verbosity')

        parser = argparse.ArgumentParser(description='Join Dots - connect four in a row')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common],
                                            help='Play a two-player game in the terminal')
        play_parser.add_argument('--delay', type=float, default=DROP_DELAY,
                                 help='Seconds a dropped piece takes to land')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Time random games through the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=100,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for reproducible runs')

        self.args = parser.parse_args(self.argv)
        if getattr(self.args, 'delay', 0.0) < 0:
            parser.error(f"--delay must not be negative, got {self.args.delay}")

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

    def run(self) -> int:
        """Run the selected command and return the process exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            asyncio.run(self.play_game())
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    async def play_game(self) -> None:
        """Play a game interactively until the players quit."""
        self.session = GameSession(GameConfig(drop_delay=self.args.delay))
        cols = self.session.cols

        print("Starting a new Join Dots game!")
        print(f"Enter a column number (0-{cols - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")
        print(self.session.render())

        while True:
            if self.session.state.is_game_over():
                self.announce_result()
                if not self.ask_play_again():
                    return
                self.session.reset()
                print(self.session.render())
                continue

            move = self.get_human_move()
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                self.session.reset()
                print("Game restarted.")
                print(self.session.render())
                continue

            player = self.session.current_player
            row = self.session.preview_landing(move)
            if row is not None:
                print(f"{player} drops into column {move}, landing on row {row}...")

            result = await self.session.apply_move(move)
            if not result.success:
                print(f"Move rejected: {result.error}.")
                continue

            print(self.session.render())

    def get_human_move(self) -> Union[int, str, None]:
        """
        Read one command from the current player.

        Returns:
            A column index, QUIT, RESTART, or None if the input was not understood
        """
        player = self.session.current_player
        try:
            user_input = input(f"{player}'s move (column, q/r): ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def ask_play_again(self) -> bool:
        try:
            answer = input("Play again? (y/n): ").strip().lower()
        except EOFError:
            return False
        return answer.startswith('y')

    def announce_result(self) -> None:
        """Print the outcome of a finished game."""
        state = self.session.state
        print("Game over!")
        if state.status == GameStatus.WON:
            cells = ", ".join(f"({r}, {c})" for r, c in state.winning_cells)
            print(f"{state.winner} wins! Winning run: {cells}")
        else:
            print("It's a draw!")

    def benchmark(self) -> None:
        """Time random legal games played through a session."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} games...")

        results = {Player.RED: 0, Player.YELLOW: 0, None: 0}

        async def play_all() -> int:
            moves = 0
            session = GameSession(GameConfig(drop_delay=0.0))
            for _ in range(iterations):
                session.reset()
                while not session.state.is_game_over():
                    await session.apply_move(rng.choice(session.valid_moves()))
                    moves += 1
                results[session.state.winner] += 1
            return moves

        debug.start_timer("benchmark")
        total_moves = asyncio.run(play_all())
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        print(f"Played {iterations} games with {total_moves} moves in {elapsed:.4f} seconds")
        if iterations and total_moves:
            print(f"  {elapsed / iterations * 1000:.4f} ms per game, "
                  f"{elapsed / total_moves * 1000:.4f} ms per move")
        print(f"  Red wins: {results[Player.RED]}, Yellow wins: {results[Player.YELLOW]}, "
              f"draws: {results[None]}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    raise SystemExit(main())
