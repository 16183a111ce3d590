"""
Command-line driver for the Boggle engine.

Usage:
    boggle-engine [--dictionary PATH] [--board T1,T2,...] [--min-length N]
                  [--locate WORD ...] [--no-prune] [--verbose]

Examples:
    boggle-engine --dictionary words.txt --min-length 5
    boggle-engine --board A,B,C,D --locate abdc

Prints the board, every word found on it with the total score, and the
cell path of each word passed with --locate.
"""
import argparse
import logging
import sys

from boggle_engine.board import Board
from boggle_engine.errors import BoggleError
from boggle_engine.lexicon import load_lexicon
from boggle_engine.metrics import StageTimer
from boggle_engine.scoring import score_words
from boggle_engine.settings import settings
from boggle_engine.solver import find_all_words, locate_word

logger = logging.getLogger("boggle")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find and score words on a Boggle board")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help=f"Newline-delimited word list (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--board", type=str, default=None,
                        help="Comma-separated tiles in row-major order (default: built-in 4x4 board)")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--locate", action="append", default=[], metavar="WORD",
                        help="Print the cell path for WORD (repeatable)")
    parser.add_argument("--no-prune", action="store_true",
                        help="Explore every simple path instead of pruning on lexicon prefixes")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    timer = StageTimer()

    with timer.stage("board"):
        if args.board is None:
            board = Board.default()
        else:
            board = Board.from_flat_array([t.strip() for t in args.board.split(",")])
    print(board.render())

    with timer.stage("lexicon"):
        lexicon = load_lexicon(args.dictionary)
        timer.count("lexicon", len(lexicon))

    with timer.stage("solve"):
        words = find_all_words(board, lexicon, args.min_length, prune=not args.no_prune)
        timer.count("solve", len(words))
        score = score_words(words, args.min_length, lexicon)

    for word in words:
        print(word)
    print(f"{len(words)} words, score {score}")

    for word in args.locate:
        path = locate_word(board, word)
        if path:
            print(f"{word}: {' '.join(str(i) for i in path)}")
        else:
            print(f"{word}: not on board")

    logger.debug("Timings: %s counts: %s", timer.summary(), timer.counts)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        return run(args)
    except BoggleError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
