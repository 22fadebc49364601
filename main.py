"""
Console driver for the Gomoku rule engine.

Two people share one terminal and take turns typing moves.

Commands:
    ROW COL   place a stone (zero-based, e.g. "7 7")
    undo      take back the last move
    hint      suggest a cell near the center
    restart   start a new game (scores are kept)
    quit      leave
"""

import sys
import logging
from typing import Optional, Tuple, TextIO

from engine import GameEngine, EngineConfig, Outcome

logger = logging.getLogger("engine")


def configure_logging(level: int = EngineConfig.LOG_LEVEL) -> None:
    """Attach a single stream handler to the engine logger."""
    handler_exists = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not handler_exists:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(EngineConfig.LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def parse_coordinates(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "ROW COL" (or "ROW,COL") into a pair of ints.

    Returns:
        (row, col), or None if the text is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


class GomokuConsole:
    """
    Plays Gomoku in the terminal against a GameEngine it is handed.
    """

    def __init__(self, engine: GameEngine, out: Optional[TextIO] = None):
        self.engine = engine
        self.out = sys.stdout if out is None else out

    def say(self, text: str = ""):
        print(text, file=self.out)

    def show(self):
        """Print the board, scores and whose turn it is."""
        self.say()
        self.say(self.engine.render())
        scores = self.engine.get_scores()
        self.say(f"\nScore - Black: {scores.black}  White: {scores.white}")

        status = self.engine.get_status()
        if status.outcome == Outcome.WON:
            self.say(f"{status.winner.value.upper()} WINS!")
        elif status.outcome == Outcome.DRAW:
            self.say("It's a DRAW! The board is full.")
        else:
            self.say(f"Current turn: {self.engine.get_current_player().value}")

    def handle(self, command: str) -> bool:
        """
        Run one command.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        command = command.strip().lower()
        if not command:
            return True

        if command in ("quit", "exit", "q"):
            return False

        if command == "undo":
            self.engine.undo()
        elif command == "restart":
            self.engine.restart()
        elif command == "hint":
            hint = self.engine.compute_hint()
            if hint is None:
                self.say("No hint: the game is over.")
            else:
                self.say(f"Try ({hint[0]}, {hint[1]})")
        else:
            coords = parse_coordinates(command)
            if coords is None:
                self.say(f"Unknown command: {command!r}")
                return True
            result = self.engine.apply_move(*coords)
            if not result.success:
                self.say(f"Invalid move: {result.error_message}")
                return True

        self.show()
        return True

    def run(self, source: Optional[TextIO] = None):
        """Read commands until quit or end of input."""
        if source is None:
            source = sys.stdin
        self.say("=" * 60)
        self.say(f"   Gomoku {self.engine.board_size}x{self.engine.board_size}")
        self.say("   Black = X, White = O, hint = *")
        self.say("=" * 60)
        self.show()

        for line in source:
            if not self.handle(line):
                break
        self.say("Goodbye!")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player Gomoku in the terminal")
    parser.add_argument(
        "--size",
        type=int,
        default=EngineConfig.BOARD_SIZE,
        help="Board size N for an NxN board (default: %(default)s)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine events at DEBUG level"
    )

    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("--size must be at least 1")

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    console = GomokuConsole(GameEngine(board_size=args.size))
    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
