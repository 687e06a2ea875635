import io
import re

import pytest

from workbench.grep_lite import main, process_lines


def test_process_lines_finds_matching_lines():
    lines = ["apple", "banana", "cherry", "mango"]
    assert list(process_lines(lines, "an")) == [(1, "banana"), (3, "mango")]


def test_process_lines_accepts_compiled_pattern():
    lines = ["one", "two", "three"]
    assert list(process_lines(lines, re.compile(r"^t"))) == [(1, "two"), (2, "three")]


def test_process_lines_strips_line_endings():
    lines = ["alpha\n", "beta\r\n", "gamma"]
    assert list(process_lines(lines, "a")) == [
        (0, "alpha"),
        (1, "beta"),
        (2, "gamma"),
    ]


def test_process_lines_no_match_is_empty():
    assert list(process_lines(["x", "y"], "z")) == []


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("apple\nbanana\ncherry\n", encoding="utf-8")
    assert main(["an", str(path)]) == 0
    assert capsys.readouterr().out == "1: banana\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("red\ngreen\nblue\n"))
    assert main(["e"]) == 0
    assert capsys.readouterr().out == "0: red\n1: green\n2: blue\n"


def test_main_requires_pattern():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_main_rejects_invalid_pattern():
    with pytest.raises(SystemExit) as info:
        main(["("])
    assert info.value.code == 2