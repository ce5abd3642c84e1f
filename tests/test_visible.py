import io

import pytest

from krtools.visible import main, make_visible, parse_args


def test_parse_octal():
    assert parse_args(["-o"]) is True


def test_parse_hex():
    assert parse_args(["-x"]) is False


@pytest.mark.parametrize("args", [[], ["-z"], ["-o", "-x"], ["o"]])
def test_parse_invalid(args):
    with pytest.raises(ValueError):
        parse_args(args)


def test_newline_becomes_space():
    assert make_visible(b"ab\ncd", True) == "ab cd\n"


def test_octal_escape():
    assert make_visible(b"\xff", True) == "\\377\n"


def test_hex_escape():
    assert make_visible(b"\xff", False) == "\\ff\n"


def test_no_fold_without_blanks():
    assert make_visible(b"a" * 100, True) == "a" * 100 + "\n"


def test_fold_only_inserts_newlines_after_blanks():
    data = b"a " * 60
    out = make_visible(data, True)
    lines = out.split("\n")
    assert len(lines) > 2
    assert all(line.endswith(" ") for line in lines[:-2])
    assert "".join(lines) == data.decode()


def test_main_reads_bytes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"x\x80y")))
    assert main(["-x"]) == 0
    assert capsys.readouterr().out == make_visible(b"x\x80y", False)


def test_main_invalid(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error: invalid arguments.\n"