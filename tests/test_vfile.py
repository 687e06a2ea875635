import pytest

from workbench.vfile import File, FileNotOpenError, FileState, main


def test_new_file_is_closed():
    assert File("a.txt").state is FileState.CLOSE


def test_read_closed_file_raises():
    with pytest.raises(FileNotOpenError, match="File must be open for reading"):
        File("a.txt", b"abc").read()


def test_open_read_round_trip():
    f = File("a.txt", b"hello").open()
    assert f.state is FileState.OPEN
    assert f.read() == b"hello"


def test_close_after_open():
    f = File("a.txt").open().close()
    assert f.state is FileState.CLOSE
    with pytest.raises(FileNotOpenError):
        f.read()


def test_display_format():
    f = File("f5.txt")
    assert str(f) == "<f5.txt, CLOSED>"
    assert str(f.open()) == "<f5.txt, OPEN>"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Error checking is working"
    assert "<f5.txt, CLOSED>" in out
    assert "f5.txt is 0 bytes long" in out