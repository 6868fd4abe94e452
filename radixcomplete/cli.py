"""CLI / terminal mode for radixcomplete."""

from __future__ import annotations

import time

from radixcomplete.constants import PROMPT, QUIT_COMMANDS
from radixcomplete.trie import Trie


def format_completions(trie: Trie, prefix: str) -> str:
    """One output line: the prefix and its completion list."""
    words = trie.completions(prefix)
    if words is None:
        return f"{prefix}: no match"
    return f"{prefix}: {', '.join(sorted(words))}"


def run_queries(trie: Trie, prefixes: list[str]) -> None:
    """Print the completion list for each prefix."""
    for prefix in prefixes:
        print(format_completions(trie, prefix.strip().lower()))


def run_cli(trie: Trie) -> None:
    """Prompt for prefixes until quit, an empty line, or EOF."""
    print("\n" + "=" * 60)
    print("  RADIXCOMPLETE -- Completion Lists")
    print("=" * 60)
    print()
    print(f"  {len(trie.words):,} words indexed.")
    print("  Type a prefix to list its completions, 'quit' to stop.")
    print()

    while True:
        try:
            inp = input(PROMPT).strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp or inp in QUIT_COMMANDS:
            break

        t0 = time.time()
        line = format_completions(trie, inp)
        elapsed = time.time() - t0
        print(f"  {line}")
        print(f"  ({elapsed * 1000:.2f} ms)")
