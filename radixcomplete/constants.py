"""Configuration for radixcomplete."""

from __future__ import annotations

import os

LOG_FORMAT = "[%(levelname)s] %(message)s"

# Word files tried in order when none is given on the command line.
DEFAULT_WORD_FILES: list[str] = [
    "words.txt",
    "wordlist.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

# Used when no word file can be found.
SAMPLE_WORDS: list[str] = [
    "bear", "bull", "stock", "bell", "bid", "bond", "buy", "sell",
    "share", "short", "stop", "call", "cap", "cash", "trade", "trader",
]

PROMPT = "prefix> "
QUIT_COMMANDS = {"quit", "exit", "q"}
