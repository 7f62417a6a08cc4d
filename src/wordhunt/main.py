"""
Command-line Word Hunt.

Usage:
    python -m wordhunt.main
    python -m wordhunt.main options.yaml --seed 7 --verbose
    python -m wordhunt.main --difficulty hard --words /usr/share/dict/words

At the prompt, enter a path of cells as "row,col" pairs (e.g. "0,0 0,1 1,2")
or type a word. Commands: hint, board, new, end, quit.
"""

import argparse
import logging
import re
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Tuple

import yaml

from .board import render_grid
from .data import load_word_list
from .engine import GameOptions, GameSession, SubmitResult, options_for_difficulty
from .errors import DictionaryLoadError
from .utils.logger import configure_logging


_CELL = re.compile(r'^(\d+),(\d+)$')


def load_config(config_path: str, difficulty: Optional[str] = None) -> GameOptions:
    """Load game options from a YAML file, optionally on top of a difficulty preset."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if difficulty:
        return options_for_difficulty(difficulty, **data)
    return GameOptions(**data)


def parse_path(line: str) -> Optional[List[Tuple[int, int]]]:
    """Parse "r,c r,c ..." into positions; None if the line is not a path."""
    cells = []
    for token in line.split():
        match = _CELL.match(token)
        if not match:
            return None
        cells.append((int(match.group(1)), int(match.group(2))))
    return cells or None


def submit_path(
    session: GameSession, cells: List[Tuple[int, int]]
) -> Tuple[SubmitResult, List[Tuple[int, int]]]:
    """
    Feed a path cell by cell and submit it.

    Returns:
        The result and the cells the session refused (off the board, already
        used, or not touching the previous cell)
    """
    rejected = [cell for cell in cells if not session.extend_selection(cell)]
    return session.submit(), rejected


def format_cells(cells: List[Tuple[int, int]]) -> str:
    return " ".join(f"{row},{col}" for row, col in cells)


def format_result(result: SubmitResult) -> str:
    line = f"{result.word or '-'}: {result.message}"
    if result.points:
        line += f" (+{result.points})"
    progress = result.progress
    return f"{line}  score {result.score}, targets {progress.found}/{progress.total}"


def print_board(session: GameSession, out: TextIO) -> None:
    print(render_grid(session.board), file=out)
    print(f"Find: {', '.join(session.target_words) or '(no words placed, try new)'}", file=out)
    if session.time_left is not None:
        print(f"Time left: {session.time_left}s", file=out)


def print_summary(session: GameSession, out: TextIO) -> None:
    summary = session.summary()
    print(file=out)
    print("=== Game Complete ===", file=out)
    print(f"Score: {summary.score}", file=out)
    print(
        f"Target words found: {summary.progress.found}/{summary.progress.total} "
        f"({summary.progress.percentage}%)",
        file=out,
    )
    print(f"Total words found: {len(summary.found_words)}", file=out)
    if summary.targets_missed:
        print(f"Missed: {', '.join(summary.targets_missed)}", file=out)


def play(
    session: GameSession,
    lines: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Run the prompt loop until 'quit' or end of input.

    Timed sessions are ticked with the whole seconds elapsed on `clock`
    before each line is handled.
    """
    print_board(session, out)
    mark = clock()
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        command = line.lower()

        if session.is_active and session.time_left is not None:
            elapsed = int(clock() - mark)
            if elapsed > 0:
                mark += elapsed
                session.tick(elapsed)
                if session.game_over:
                    print("Time's up!", file=out)
                    print_summary(session, out)

        if command == "quit":
            break
        if command == "board":
            print_board(session, out)
        elif command == "hint":
            start = session.hint()
            print(f"Try row {start.row}, col {start.col}" if start else "No hints left", file=out)
        elif command == "end":
            session.end_session()
            print_summary(session, out)
        elif command == "new":
            session.restart()
            mark = clock()
            print_board(session, out)
        else:
            cells = parse_path(line)
            if cells:
                result, rejected = submit_path(session, cells)
                if rejected:
                    print(f"Ignored cells: {format_cells(rejected)}", file=out)
            else:
                result = session.submit_word(line)
            print(format_result(result), file=out)

    if not session.game_over:
        session.end_session()
        print_summary(session, out)
    return session.score


def main():
    parser = argparse.ArgumentParser(
        description="Play Word Hunt in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example options.yaml:
  grid_size: 8
  target_word_count: 10
  target_min_length: 4
  time_limit_seconds: null
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML options file (defaults apply when omitted)"
    )
    parser.add_argument(
        "--difficulty", "-d",
        help="Difficulty preset: easy, medium or hard"
    )
    parser.add_argument(
        "--words", "-w",
        help="Plain-text word list, one word per line (default: built-in list)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible board"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log generation and session details"
    )

    args = parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.config:
            options = load_config(args.config, args.difficulty)
        elif args.difficulty:
            options = options_for_difficulty(args.difficulty)
        else:
            options = GameOptions()
    except Exception as e:
        print(f"Error loading options: {e}", file=sys.stderr)
        sys.exit(1)

    dictionary = None
    if args.words:
        try:
            dictionary = load_word_list(args.words)
        except DictionaryLoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    session = GameSession.create(options=options, dictionary=dictionary, seed=args.seed)

    try:
        play(session)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        session.end_session()
        print_summary(session, sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
