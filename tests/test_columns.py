import pytest

from algonotes.columns import ColumnError, check_columns, main


def test_all_lines_correct():
    assert check_columns(["a|b|c\n", "d|e|f\n", "||"], 2) == 3


def test_empty_input():
    assert check_columns([], 4) == 0


def test_first_bad_line_reported():
    with pytest.raises(ColumnError) as info:
        check_columns(["a|b", "c|d", "ef", "g"], 1)
    assert info.value.line_number == 3
    assert info.value.count == 0
    assert info.value.line == "ef"
    assert str(info.value) == "Error on line 3, it contains 0 separators"


def test_trailing_newline_stripped_from_reported_line():
    with pytest.raises(ColumnError) as info:
        check_columns(["a|b|c\n"], 1)
    assert info.value.line == "a|b|c"
    assert info.value.count == 2


def test_main_usage(capsys):
    assert main(["only-one"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_correct_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("a|b\nc|d\n", encoding="utf-8")
    assert main([str(path), "1"]) == 0
    out = capsys.readouterr().out
    assert f"Checking file:{path}" in out
    assert "File is correct !" in out


def test_main_bad_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("a|b\ncd\n", encoding="utf-8")
    assert main([str(path), "1"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert "Error on line 2, it contains 0 separators" in lines
    assert lines[-1] == "cd"


def test_main_non_numeric_count_means_zero(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("abc\ndef\n", encoding="utf-8")
    assert main([str(path), "columns"]) == 0
    assert "File is correct !" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "1"]) == 1