from boggle_engine.cli import main


def _write_dictionary(tmp_path, words) -> str:
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(dict_file)


def test_solve_and_locate(tmp_path, capsys):
    path = _write_dictionary(tmp_path, ["ab", "ad", "abc", "abd", "abdc"])
    code = main(["--dictionary", path, "--board", "A,B,C,D", "--min-length", "2",
                 "--locate", "abdc", "--locate", "zz"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("A B\nC D\n")
    assert "5 words, score 9" in out
    assert "abdc: 0 1 3 2" in out
    assert "zz: not on board" in out


def test_default_board(tmp_path, capsys):
    path = _write_dictionary(tmp_path, ["peace", "place", "zebra"])
    code = main(["--dictionary", path, "--min-length", "5"])
    assert code == 0
    out = capsys.readouterr().out
    assert "E E C A" in out
    assert "peace\n" in out
    assert "zebra" not in out


def test_missing_dictionary_exits_with_error(tmp_path, capsys):
    code = main(["--dictionary", str(tmp_path / "missing.txt"), "--board", "A,B,C,D"])
    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_bad_board_exits_with_error(tmp_path, capsys):
    path = _write_dictionary(tmp_path, ["ab"])
    code = main(["--dictionary", path, "--board", "A,B,C"])
    assert code == 2
    assert "error:" in capsys.readouterr().err
