#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from padlock_words.config import lock_config
from padlock_words.core.dictionary import Dictionary
from padlock_words.core.errors import PadlockError
from padlock_words.core.solver import LockSolver
from padlock_words.core.wheels import WheelReader
from padlock_words.lock_logging.result_logger import ResultLogger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="padlock-words",
        description="List the dictionary words that can be dialled on a letter combination lock.")
    parser.add_argument("--wheels", default=lock_config.WHEELS_PATH,
                        help="Wheel configuration file (default: %(default)s)")
    parser.add_argument("--dictionary", default=lock_config.DICTIONARY_PATH,
                        help="Word list, one word per line (default: %(default)s)")
    parser.add_argument("--skip-long-lines", action="store_true",
                        help=f"Skip dictionary lines over {lock_config.MAX_WORD_LENGTH} characters instead of stopping")
    parser.add_argument("--show-alignments", action="store_true",
                        help="Print the start wheel of each alignment after the word")
    parser.add_argument("--output", type=str, help="Also write matches and the summary to this JSONL file")
    parser.add_argument("--pause", action="store_true", help="Wait for enter before exiting")
    parser.add_argument("--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser


def format_match(word: str, starts: Sequence[int], show_alignments: bool) -> str:
    if not show_alignments:
        return word
    return f"{word} {' '.join(str(start) for start in starts)}"


def run(args: argparse.Namespace, open: Callable = open) -> int:
    """Load the lock, scan the dictionary and print the report. Returns the exit status."""
    result_logger = ResultLogger(args.output, open=open)
    try:
        result_logger.start_logging()
    except OSError as e:
        print(f"{lock_config.ERROR_PREFIX}Unable to open output file {args.output}: {e.strerror}")
        return 1

    try:
        lock = WheelReader(open=open).read(args.wheels)
        result_logger.log_lock(lock.wheel_count, lock.letters_per_wheel)

        dictionary = Dictionary(lock.wheel_count, skip_long_lines=args.skip_long_lines, open=open)
        solver = LockSolver(lock)
        # Matches are printed as they are found so they survive a later fatal error.
        for match in solver.solve(dictionary.words(args.dictionary)):
            print(format_match(match.word, match.starts, args.show_alignments))
            result_logger.log_match(match.word, list(match.starts))

        report = solver.report
        print(lock_config.SUMMARY_TEMPLATE.format(total=report.total))
        result_logger.log_summary(report.total, report.distinct_words)
        return 0
    except PadlockError as e:
        logger.debug(f"Aborting run ({e.kind.value})", exc_info=True)
        print(f"{lock_config.ERROR_PREFIX}{e}")
        result_logger.log_error(e.kind.name, str(e))
        return 1
    finally:
        result_logger.stop_logging()


def pause() -> None:
    print(lock_config.PAUSE_PROMPT)
    try:
        input()
    except EOFError:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr)

    status = run(args)
    if args.pause:
        pause()
    return status


if __name__ == "__main__":
    sys.exit(main())
