"""Entry point: ``python -m radixcomplete``."""

from __future__ import annotations

import argparse
import logging
import sys

from radixcomplete.cli import run_cli, run_queries
from radixcomplete.constants import LOG_FORMAT
from radixcomplete.dump import print_trie
from radixcomplete.trie import Trie
from radixcomplete.wordlist import load_words

log = logging.getLogger("radixcomplete")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="radixcomplete",
        description="Prefix completion lists over a compressed trie",
    )
    parser.add_argument("words", nargs="?", default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--prefix", "-p", action="append", default=None,
                        help="Print completions for PREFIX and exit (repeatable)")
    parser.add_argument("--dump", action="store_true",
                        help="Print the trie structure")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        words = load_words(args.words)
    except FileNotFoundError as exc:
        log.error("%s", exc)
        return 1

    trie = Trie.build(words)

    if args.dump:
        print_trie(trie)

    if args.prefix:
        run_queries(trie, args.prefix)
    else:
        run_cli(trie)
    return 0


if __name__ == "__main__":
    sys.exit(main())
