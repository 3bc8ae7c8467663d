import logging

from radixcomplete.wordlist import WordList, is_valid_word, prune_prefixes


def test_is_valid_word():
    assert is_valid_word("bear")
    assert not is_valid_word("")
    assert not is_valid_word("Bear")
    assert not is_valid_word("don't")
    assert not is_valid_word("café")


def test_prune_prefixes_keeps_order():
    words = ["start", "bear", "star", "be", "stock", "bear"]
    assert prune_prefixes(words) == ["start", "bear", "stock"]


def test_load_from_file(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("bear\nBell\n\nbull\nbear\nbe\n  stock  \nx-ray\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="radixcomplete"):
        wordlist = WordList(str(path))
    assert wordlist.words == ("bear", "bull", "stock")
    assert wordlist.path == str(path)
    assert len(wordlist) == 3
    assert list(wordlist) == ["bear", "bull", "stock"]
    assert "bull" in wordlist
    assert "Loaded 3 words" in caplog.text


def test_missing_file_falls_back(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("radixcomplete.wordlist._DEFAULT_PATHS", ())
    with caplog.at_level(logging.WARNING, logger="radixcomplete"):
        wordlist = WordList(str(tmp_path / "nope.txt"))
    assert wordlist.path is None
    assert "bear" in wordlist
    assert "car" not in wordlist  # prefix of "cart"
    assert "built-in minimal word list" in caplog.text


def test_build(tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("bear\nbell\nbull\nstock\n", encoding="utf-8")
    trie = WordList(str(path)).build()
    assert trie.completions("be") == ["bear", "bell"]
