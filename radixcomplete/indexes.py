"""Edge labels that point into the word array instead of copying text."""

from __future__ import annotations

from typing import Sequence


class Indexes:
    """Substring reference ``words[word_index][start_index:end_index + 1]``.

    Offsets are inclusive. ``start_index == end_index + 1`` is a
    zero-length label, used by leaves of words that end at an internal
    node.
    """

    __slots__ = ("word_index", "start_index", "end_index")

    def __init__(self, word_index: int, start_index: int, end_index: int):
        assert word_index >= 0 and start_index >= 0, "negative label offset"
        assert start_index <= end_index + 1, "label starts past its end"
        self.word_index = word_index
        self.start_index = start_index
        self.end_index = end_index

    @property
    def length(self) -> int:
        return self.end_index - self.start_index + 1

    def char_at(self, words: Sequence[str], offset: int) -> str:
        """Character of the underlying word at absolute ``offset``."""
        assert self.start_index <= offset <= self.end_index, "offset outside label"
        return words[self.word_index][offset]

    def text(self, words: Sequence[str]) -> str:
        """Resolve the label against the word store."""
        word = words[self.word_index]
        assert self.end_index < len(word), "label runs past the end of its word"
        return word[self.start_index:self.end_index + 1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Indexes):
            return NotImplemented
        return (self.word_index, self.start_index, self.end_index) == (
            other.word_index, other.start_index, other.end_index
        )

    def __hash__(self) -> int:
        return hash((self.word_index, self.start_index, self.end_index))

    def __repr__(self) -> str:
        return f"({self.word_index},{self.start_index},{self.end_index})"
