"""radixcomplete -- compressed trie for prefix completion lists."""

from radixcomplete.indexes import Indexes
from radixcomplete.trie import Trie, TrieNode
from radixcomplete.dump import dump, print_trie
from radixcomplete.wordlist import load_words

__all__ = [
    "Indexes",
    "Trie",
    "TrieNode",
    "dump",
    "load_words",
    "print_trie",
]
