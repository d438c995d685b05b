"""
Command-line Word Hunt solver.

Usage:
    python -m scripts.solve <letters> [--dictionary PATH] [--limit N]
    python -m scripts.solve --interactive

Examples:
    python -m scripts.solve catsdogbirdfishe
    python -m scripts.solve catsdogbirdfishe --limit 20 --min-length 4
    python -m scripts.solve --interactive --dictionary words.txt

In interactive mode each input line is fed to the board:
  letters   append to the board (up to 16)
  -         remove the last letter
  (empty)   solve the board
  q         quit
"""
import argparse
import logging
import shutil
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordhunt.grid import CAPACITY, Grid
from wordhunt.session import BACKSPACE, ENTER, ESCAPE, Session
from wordhunt.settings import settings
from wordhunt.solver import find_words
from wordhunt.trie import load_trie

logger = logging.getLogger("wordhunt")


def line_to_keys(line: str) -> list[str]:
    """Translate one line of interactive input into session key events."""
    line = line.strip()
    if not line:
        return [ENTER]
    if line == "q":
        return [ESCAPE]
    if line == "-":
        return [BACKSPACE]
    return [ch for ch in line if ch.isalpha()]


def run_interactive(session: Session, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    for line in stdin:
        keep_going = True
        for key in line_to_keys(line):
            keep_going = session.handle_key(key)
            if not keep_going:
                break
        if not keep_going:
            break
        size = shutil.get_terminal_size()
        stdout.write("\n".join(session.render(size.columns, size.lines)) + "\n")
        stdout.flush()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Word Hunt Solver")
    parser.add_argument("letters", nargs="?", default=None,
                        help=f"Board letters in row-major order (up to {CAPACITY})")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help=f"Word list, one word per line (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Shortest word to report (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--limit", type=int, default=0,
                        help="Print at most this many words (default: all)")
    parser.add_argument("--interactive", action="store_true",
                        help="Read board edits from stdin, one line at a time")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.letters is None and not args.interactive:
        parser.error("letters are required unless --interactive is given")
    if args.letters is not None and len(args.letters) > CAPACITY:
        parser.error(f"board has {len(args.letters)} letters (max {CAPACITY})")

    try:
        trie = load_trie(args.dictionary, args.min_length)
    except OSError as e:
        print(f"Error: could not read dictionary {args.dictionary}: {e}", file=sys.stderr)
        return 1

    if args.interactive:
        session = Session(trie, args.min_length)
        for ch in args.letters or "":
            session.handle_key(ch)
        run_interactive(session)
        return 0

    grid = Grid.from_letters(args.letters)
    words = find_words(grid, trie, args.min_length)
    if args.limit > 0:
        words = words[:args.limit]
    for word in words:
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
