"""Tests for the diagnostic trie dump."""

from radixcomplete.dump import dump, print_trie
from radixcomplete.trie import Trie


class TestDump:
    """Tests for dump and print_trie."""

    def test_single_word(self):
        trie = Trie.build(["a"])
        expected = "\n".join([
            "",
            "TRIE",
            "",
            " ---root",
            "     |",
            "          a",
            "     ---(0,0,0)",
        ])
        assert dump(trie) == expected

    def test_empty_trie_has_only_root(self):
        assert dump(Trie.build([])).splitlines()[-1] == " ---root"

    def test_nested_nodes_show_full_prefix_and_label(self):
        trie = Trie.build(["cat", "car"])
        lines = dump(trie).splitlines()
        assert "          ca" in lines
        assert "     ---(0,0,1)" in lines
        assert "              cat" in lines
        assert "         ---(0,2,2)" in lines
        assert "              car" in lines
        assert "         ---(1,2,2)" in lines

    def test_str_is_dump(self):
        trie = Trie.build(["bear", "bell"])
        assert str(trie) == dump(trie)

    def test_print_trie(self, capsys):
        trie = Trie.build(["stock"])
        print_trie(trie)
        out = capsys.readouterr().out
        assert "TRIE" in out
        assert "---(0,0,4)" in out
