"""
Command line entry point for wrd.

Usage:
    python -m src.main match "* b !ar !r *" --include ard --exclude stlen
    python -m src.main match "y e **" --dictionary wordle
    python -m src.main notwordle "p ?l !a ?t !e,p ?o l ?i t"
    python -m src.main notwordle --interactive --config config.yaml
"""

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from .config import SolverConfig, load_config
from .data import Dictionary, get_dictionary, load_words_file
from .matcher import WrdError, match_words
from .solver import Notwordle
from .utils.word_grid import format_guess_result, format_word_grid

QUIT_WORDS = {"q", "quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find words matching a pattern or a series of guess results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pattern tokens (space separated, one per letter):
  *      any letter
  **     any number of letters
  abc    one of a, b or c
  !abc   none of a, b or c

Guess result tokens (space separated, one per letter):
  p      right letter, right position
  ?l     letter is in the word, wrong position
  !a     letter is not in the word
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--dictionary", "-d",
        choices=[d.value for d in Dictionary],
        help="Bundled dictionary to search (default: common)"
    )
    parser.add_argument(
        "--words-file",
        help="Search this word list instead of a bundled dictionary"
    )
    parser.add_argument(
        "--columns",
        type=int,
        help="Words per output line (default: 14)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print extra progress information"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    match = subparsers.add_parser("match", help="Match words against a pattern")
    match.add_argument("pattern", help="Search pattern, e.g. '* b !ar !r *'")
    match.add_argument("--include", "-i", default="", help="Letters that must appear")
    match.add_argument("--exclude", "-e", default="", help="Letters that must not appear")
    match.add_argument("--within", "-w", default="", help="Only letters words may use")

    notwordle = subparsers.add_parser("notwordle", help="Narrow words from guess results")
    notwordle.add_argument(
        "results",
        nargs="?",
        help="Comma-separated guess results, e.g. 'p ?l !a ?t !e,p ?o l ?i t'"
    )
    notwordle.add_argument(
        "--interactive",
        action="store_true",
        help="Read guess results one per line until EOF or 'quit'"
    )

    return parser


def resolve_config(args: argparse.Namespace) -> SolverConfig:
    """Load the config file, if any, then apply command line overrides."""
    config = load_config(args.config) if args.config else SolverConfig()

    overrides = {}
    if args.dictionary:
        overrides["dictionary"] = args.dictionary
    if args.words_file:
        overrides["words_file"] = args.words_file
    if args.columns is not None:
        overrides["grid_columns"] = args.columns
    if args.verbose:
        overrides["verbose"] = True

    if not overrides:
        return config
    return SolverConfig(**{**config.model_dump(), **overrides})


def load_source(config: SolverConfig) -> Sequence[str]:
    if config.words_file:
        return load_words_file(config.words_file)
    return get_dictionary(config.dictionary)


def run_match(args: argparse.Namespace, config: SolverConfig, words: Sequence[str]) -> int:
    result = match_words(args.pattern, args.include, args.exclude, args.within, words)

    if config.verbose:
        print(f"{len(result)} of {len(words)} words match")
    if result:
        print(format_word_grid(result, config.grid_columns))
    return 0


def _report(notwordle: Notwordle, raw: str, config: SolverConfig) -> List[str]:
    registration = notwordle.register_guess_result(raw)
    print(f"{len(registration.matches)} remaining after {format_guess_result(registration.outcome)}")
    if config.verbose:
        state = notwordle.state
        print(f"  pattern: {' '.join(str(t) for t in state.positional)}")
        print(f"  include: {state.include or '-'}  exclude: {state.exclude or '-'}")
    return registration.matches


def run_notwordle(args: argparse.Namespace, config: SolverConfig, words: Sequence[str]) -> int:
    notwordle = Notwordle(words=list(words))
    matches: List[str] = []

    for segment in args.results.split(","):
        matches = _report(notwordle, segment, config)

    if matches:
        print(format_word_grid(matches, config.grid_columns))
    return 0


def run_interactive(
    config: SolverConfig,
    words: Sequence[str],
    read: Callable[[str], str] = input,
) -> int:
    """Prompt for guess results until EOF or a quit word; bad input keeps the session."""
    notwordle = Notwordle(words=list(words))

    print("Enter one guess result per line (e.g. 'p ?l !a ?t !e'). Type 'quit' to exit.")
    while True:
        try:
            line = read("Guess result: ").strip()
        except EOFError:
            print()
            return 0

        if line.lower() in QUIT_WORDS:
            return 0
        if not line:
            continue

        try:
            matches = _report(notwordle, line, config)
        except WrdError as e:
            print(f"Invalid guess result: {e}")
            continue

        if matches:
            print(format_word_grid(matches, config.grid_columns))
        else:
            print("No candidates remain. Check your guess results.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "notwordle" and not args.interactive and not args.results:
        parser.error("notwordle needs guess results or --interactive")

    try:
        config = resolve_config(args)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        words = load_source(config)
    except Exception as e:
        print(f"Error loading words: {e}", file=sys.stderr)
        return 1

    if config.verbose:
        source = config.words_file or config.dictionary.value
        print(f"Searching {len(words)} words from {source}")

    try:
        if args.command == "match":
            return run_match(args, config, words)
        if args.interactive:
            return run_interactive(config, words)
        return run_notwordle(args, config, words)
    except WrdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
