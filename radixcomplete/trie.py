"""Compressed (radix) trie for prefix completion over a fixed word array."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from radixcomplete.indexes import Indexes

log = logging.getLogger("radixcomplete")


class TrieNode:
    """Single node in the compressed trie.

    Children hang off ``first_child`` as a singly linked ``sibling`` chain.
    The root has no label; every other node is entered through the edge
    described by ``substr``.
    """

    __slots__ = ("substr", "first_child", "sibling")

    def __init__(
        self,
        substr: Indexes | None,
        first_child: TrieNode | None = None,
        sibling: TrieNode | None = None,
    ):
        self.substr = substr
        self.first_child = first_child
        self.sibling = sibling

    @property
    def is_leaf(self) -> bool:
        return self.first_child is None

    def children(self) -> Iterator[TrieNode]:
        node = self.first_child
        while node is not None:
            yield node
            node = node.sibling

    def append_child(self, child: TrieNode) -> None:
        """Hang ``child`` off the end of the sibling chain."""
        if self.first_child is None:
            self.first_child = child
            return
        node = self.first_child
        while node.sibling is not None:
            node = node.sibling
        node.sibling = child

    def __repr__(self) -> str:
        if self.substr is None:
            return "TrieNode(root)"
        return f"TrieNode{self.substr!r}"


class Trie:
    """Radix trie whose edge labels reference ``words`` by index and offset.

    Words are inserted in array order and never deduplicated: each index
    gets its own leaf. The word array is frozen into a tuple because every
    label depends on it staying unchanged.
    """

    def __init__(self, words: Sequence[str] = ()):
        self.words: tuple[str, ...] = tuple(words)
        self.root = TrieNode(None)
        if self.words:
            self.root.first_child = TrieNode(Indexes(0, 0, len(self.words[0]) - 1))
            for i in range(1, len(self.words)):
                self._insert(i)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Built trie over %d words (%d nodes)", len(self.words), self.node_count())

    @classmethod
    def build(cls, words: Sequence[str]) -> Trie:
        return cls(words)

    # construction

    def _insert(self, i: int) -> None:
        words = self.words
        word = words[i]
        parent = self.root
        c = 0  # characters of ``word`` consumed above ``parent``'s children

        while True:
            if parent is not self.root and parent.is_leaf:
                # An existing word ends here: push it down to a zero-length
                # leaf so the node can own the new word's remainder too.
                parent.first_child = TrieNode(
                    Indexes(parent.substr.word_index, c, c - 1),
                    sibling=TrieNode(Indexes(i, c, len(word) - 1)),
                )
                return

            if c == len(word):
                parent.append_child(TrieNode(Indexes(i, c, c - 1)))
                return

            ch = word[c]
            node = parent.first_child
            while node is not None:
                if node.substr.length and node.substr.char_at(words, c) == ch:
                    break
                node = node.sibling

            if node is None:
                parent.append_child(TrieNode(Indexes(i, c, len(word) - 1)))
                return

            label = node.substr
            edge_word = words[label.word_index]
            p = 1
            while (
                c + p <= label.end_index
                and c + p < len(word)
                and edge_word[c + p] == word[c + p]
            ):
                p += 1

            if c + p - 1 == label.end_index:
                parent, c = node, c + p
                continue

            # Split: shorten the edge and give it two children, the old
            # remainder (keeping the old subtree) and the new word's remainder.
            node.substr = Indexes(label.word_index, c, c + p - 1)
            node.first_child = TrieNode(
                Indexes(label.word_index, c + p, label.end_index),
                first_child=node.first_child,
                sibling=TrieNode(Indexes(i, c + p, len(word) - 1)),
            )
            return

    # queries

    def complete(self, prefix: str) -> list[TrieNode] | None:
        """All leaves whose word starts with ``prefix``, in no particular
        order, or None when no indexed word has that prefix."""
        if not prefix:
            return list(self.leaves()) or None

        node = self.root.first_child
        c = 0
        while node is not None:
            label = node.substr
            run = self._common_run(label, prefix, c)
            if run == 0:
                node = node.sibling
            elif run == len(prefix) - c:
                return list(_iter_leaves(node))
            elif run == label.length:
                c += run
                node = node.first_child
            else:
                return None
        return None

    def completions(self, prefix: str) -> list[str] | None:
        """Like :meth:`complete` but resolved to word texts."""
        leaves = self.complete(prefix)
        if leaves is None:
            return None
        return [self.word_of(leaf) for leaf in leaves]

    def _common_run(self, label: Indexes, prefix: str, c: int) -> int:
        edge_word = self.words[label.word_index]
        limit = min(label.length, len(prefix) - c)
        run = 0
        while run < limit and edge_word[c + run] == prefix[c + run]:
            run += 1
        return run

    # leaf helpers

    def leaves(self) -> Iterator[TrieNode]:
        if self.root.first_child is None:
            return iter(())
        return _iter_leaves(self.root)

    def index_of(self, leaf: TrieNode) -> int:
        assert leaf.is_leaf and leaf.substr is not None, "not a leaf handle"
        return leaf.substr.word_index

    def word_of(self, leaf: TrieNode) -> str:
        return self.words[self.index_of(leaf)]

    def node_count(self) -> int:
        """Number of nodes below the root."""
        count = 0
        stack = list(self.root.children())
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children())
        return count

    def __len__(self) -> int:
        return sum(1 for _ in self.leaves())

    def __contains__(self, word: str) -> bool:
        leaves = self.complete(word)
        return leaves is not None and any(self.word_of(leaf) == word for leaf in leaves)

    def __str__(self) -> str:
        from radixcomplete.dump import dump

        return dump(self)


def _iter_leaves(top: TrieNode) -> Iterator[TrieNode]:
    stack = [top]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
        else:
            stack.extend(node.children())
