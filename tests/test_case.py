import io

import pytest

from krtools.case import convert_case, converter_for, main

TEXT = "Hello, World! 123 abc_XYZ\n"


def test_upper():
    assert convert_case(TEXT, "upper") == TEXT.upper()


def test_lower():
    assert convert_case(TEXT, "lower") == TEXT.lower()


def test_only_ascii_letters_change():
    assert convert_case("straße É", "upper") == "STRAßE É"


def test_round_trip_is_idempotent():
    once = convert_case(TEXT, "lower")
    assert convert_case(once, "lower") == once


@pytest.mark.parametrize("name", ["./upper", "UPPER", "", "case"])
def test_unknown_name(name):
    with pytest.raises(ValueError):
        converter_for(name)


def test_main_converts_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    assert main(["lower"]) == 0
    assert capsys.readouterr().out == TEXT.lower()


def test_main_rejects_unknown_name(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    assert main(["case"]) == 1
    assert capsys.readouterr().out == "Error: invalid arguments.\n"