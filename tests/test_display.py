from radixcomplete import RadixTrie, build_trie, format_trie, print_trie


def test_root_only():
    assert format_trie(build_trie([]), []) == " ---root"


def test_sample_rendering(sample_trie):
    lines = sample_trie.format().splitlines()
    assert lines[0] == " ---root"
    assert lines[1] == "     |"
    assert lines[2] == "          b"
    assert lines[3] == "     ---(0,0,0)"
    assert "              be" in lines
    assert "             ---(1,2,3)" in lines
    assert lines[-2:] == ["          stock", "     ---(3,0,4)"]


def test_children_in_sibling_order(sample_trie):
    text = sample_trie.format()
    positions = [text.index(w) for w in ("bear", "bell", "bull", "stock")]
    assert positions == sorted(positions)


def test_print_trie(capsys):
    words = ["bat", "ball"]
    print_trie(build_trie(words), words)
    out = capsys.readouterr().out
    assert "TRIE" in out
    assert "---(1,2,3)" in out
    assert RadixTrie(words).format() in out
