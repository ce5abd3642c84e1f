from krtools.isupper import is_upper_v1, is_upper_v2, main


def test_versions_agree_on_ascii():
    for code in range(128):
        c = chr(code)
        assert is_upper_v1(c) == is_upper_v2(c)


def test_upper_letters():
    assert is_upper_v1("C") and is_upper_v2("C")
    assert is_upper_v1("Z") and is_upper_v2("A")


def test_non_upper():
    assert not is_upper_v1("c")
    assert not is_upper_v2("c")
    assert not is_upper_v1("[")
    assert not is_upper_v2("@")


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "is_upper_v1: This letter is lowercase.\n"
        "is_upper_v2: This letter is lowercase.\n"
    )