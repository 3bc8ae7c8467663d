import pytest

from radixcomplete.cli import main


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("bear\nbell\nbull\nstock\n", encoding="utf-8")
    return str(path)


def test_prefix_arguments(word_file, capsys):
    main(["--words", word_file, "be", "cow"])
    out = capsys.readouterr().out
    assert "2 completion(s) for 'be':" in out
    assert "  bear\n  bell\n" in out
    assert "No completions for 'cow'." in out


def test_tree_flag(word_file, capsys):
    main(["--words", word_file, "--tree", "b"])
    out = capsys.readouterr().out
    assert " ---root" in out
    assert "3 completion(s) for 'b':" in out


def test_invalid_prefix_argument_is_skipped(word_file, capsys):
    main(["--words", word_file, "B", "st"])
    out = capsys.readouterr().out
    assert "'B'" not in out
    assert "1 completion(s) for 'st':" in out


def test_interactive(word_file, capsys, monkeypatch):
    answers = iter(["bu", "Nope", "tree", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    main(["--words", word_file])
    out = capsys.readouterr().out
    assert "1 completion(s) for 'bu':" in out
    assert "Invalid." in out
    assert "---(3,0,4)" in out


def test_interactive_stops_on_eof(word_file, capsys, monkeypatch):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    main(["--words", word_file])
    assert "Prefix Completion" in capsys.readouterr().out
