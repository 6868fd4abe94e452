"""Structural dump of a trie, for debugging."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from radixcomplete.trie import Trie, TrieNode

_INDENT = "    "


def dump(trie: Trie) -> str:
    """Render every node with its full prefix text and label triple."""
    lines = ["", "TRIE", ""]
    _dump_node(trie, trie.root, 1, lines)
    return "\n".join(lines)


def print_trie(trie: Trie) -> None:
    print(dump(trie))


def _dump_node(trie: Trie, node: TrieNode, indent: int, lines: list[str]) -> None:
    pad = _INDENT * (indent - 1)
    if node.substr is None:
        lines.append(f"{pad} ---root")
    else:
        label = node.substr
        lines.append(f"{pad}      {trie.words[label.word_index][:label.end_index + 1]}")
        lines.append(f"{pad} ---{label!r}")

    for child in node.children():
        lines.append(f"{pad}     |")
        _dump_node(trie, child, indent + 1, lines)
