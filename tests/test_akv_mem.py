import pytest

from workbench.actionkv import ActionKV
from workbench.akv_mem import Action, main, parse_action


@pytest.mark.parametrize(
    "text, expected",
    [
        ("get", Action.GET),
        ("DELETE", Action.DELETE),
        ("Insert", Action.INSERT),
        ("update", Action.UPDATE),
    ],
)
def test_parse_action(text, expected):
    assert parse_action(text) is expected


def test_parse_action_invalid():
    with pytest.raises(ValueError, match="Invalid Action"):
        parse_action("remove")


def test_insert_then_get(tmp_path, capsys):
    path = str(tmp_path / "db")
    assert main([path, "insert", "k", "hi"]) == 0
    assert main([path, "get", "k"]) == 0
    assert capsys.readouterr().out.strip() == str(list(b"hi"))


def test_insert_writes_to_store(tmp_path):
    path = tmp_path / "db"
    assert main([str(path), "insert", "name", "value"]) == 0
    with ActionKV(path) as store:
        store.load()
        assert store.get(b"name") == b"value"


def test_update_and_delete(tmp_path, capsys):
    path = str(tmp_path / "db")
    main([path, "insert", "k", "a"])
    main([path, "update", "k", "b"])
    main([path, "get", "k"])
    assert capsys.readouterr().out.strip() == str(list(b"b"))
    main([path, "delete", "k"])
    main([path, "get", "k"])
    assert capsys.readouterr().out.strip() == "[]"


def test_get_missing_reports_not_found(tmp_path, capsys):
    path = str(tmp_path / "db")
    assert main([path, "get", "nope"]) == 0
    captured = capsys.readouterr()
    assert captured.err.strip() == f"{list(b'nope')} not found"
    assert captured.out == ""


def test_missing_arguments_print_usage(tmp_path, capsys):
    assert main([str(tmp_path / "db"), "get"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_insert_without_value_prints_usage(tmp_path, capsys):
    path = tmp_path / "db"
    assert main([str(path), "insert", "k"]) == 1
    assert "akv_mem FILE insert KEY VALUE" in capsys.readouterr().err
    assert not path.exists()


def test_invalid_action(tmp_path, capsys):
    assert main([str(tmp_path / "db"), "frobnicate", "k"]) == 1
    assert "Invalid Action" in capsys.readouterr().err