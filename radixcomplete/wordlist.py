"""Word array loading for the trie."""

from __future__ import annotations

import logging
import os

from radixcomplete.constants import DEFAULT_WORD_FILES, SAMPLE_WORDS

log = logging.getLogger("radixcomplete")


def load_words(path: str | None = None) -> list[str]:
    """Word array in file order, lowercased, blank lines dropped.

    Duplicates are kept; each line becomes its own index. An explicit
    ``path`` must exist. Without one, the default locations are searched
    and the built-in sample list is the last resort.
    """
    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"word file not found: {path}")
        return _read(path)

    for candidate in DEFAULT_WORD_FILES:
        if os.path.exists(candidate):
            words = _read(candidate)
            if words:
                return words

    log.warning("No word file found -- using built-in sample word list.")
    return list(SAMPLE_WORDS)


def _read(path: str) -> list[str]:
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                words.append(word)
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words
