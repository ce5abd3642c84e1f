import pytest

from krtools.minprintf import main, minprintf


def test_signed_integers():
    assert minprintf("%d, %i", 2, 3) == "2, 3"


@pytest.mark.parametrize("value", [0, 8, 511, 123456])
def test_octal_round_trip(value):
    assert int(minprintf("%o", value), 8) == value


@pytest.mark.parametrize("value", [0, 16, 255, 0xABCDEF])
def test_hex_round_trip_and_case(value):
    lower = minprintf("%x", value)
    assert int(lower, 16) == value
    assert minprintf("%X", value) == lower
    assert lower == lower.lower()


def test_unsigned_wraps_negative():
    assert minprintf("%u", -1) == "4294967295"


def test_char():
    assert minprintf("%c", ord("a")) == "a"


def test_string():
    assert minprintf("say %s!", "hello, world") == "say hello, world!"


def test_fixed_point():
    assert minprintf("%f", 3.14159) == "3.141590"


def test_exponent_upper_prints_lower():
    out = minprintf("%E", 0.0025)
    assert out == out.lower()
    assert float(out) == pytest.approx(0.0025)


def test_general_float():
    assert float(minprintf("%g", 0.0023)) == pytest.approx(0.0023)


def test_pointer():
    out = minprintf("%p", 4096)
    assert out.startswith("0x")
    assert int(out, 16) == 4096


def test_percent_and_unknown_conversions():
    assert minprintf("100%% sure %q") == "100% sure q"


def test_trailing_percent_is_dropped():
    assert minprintf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(ValueError):
        minprintf("%d %d", 1)


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Let's print 2, 3, ")
    assert out.endswith("and hello, world.\n")
    assert ", 4294967295, a, " in out