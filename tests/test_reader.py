import pytest

from huffcode.reader import Reader, TxtReader


def test_read_txt(tmp_path):
    path = tmp_path / "phrase.txt"
    path.write_text("go go gophers\n", encoding="utf-8")
    assert Reader.read_from_file(str(path)) == "go go gophers"


def test_read_txt_keeps_inner_whitespace(tmp_path):
    path = tmp_path / "phrase.txt"
    path.write_text("  two\nlines \r\n", encoding="utf-8")
    assert TxtReader().read(str(path)) == "  two\nlines "


def test_read_unknown_format(tmp_path):
    with pytest.raises(NotImplementedError):
        Reader.read_from_file(str(tmp_path / "phrase.csv"))


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Reader.read_from_file(str(tmp_path / "missing.txt"))
