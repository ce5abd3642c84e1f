import pytest

from krtools.symtab import HASH_SIZE, SymbolTable, hash_name, main

COLLIDING = ["TSHe", "UPXD", "9iww", "mY1a", "uuoT"]


def test_hash_of_test():
    assert hash_name("TEST") == 51


@pytest.mark.parametrize("name", COLLIDING)
def test_names_collide_with_test(name):
    assert hash_name(name) == hash_name("TEST")


@pytest.mark.parametrize("name", ["", "a", "identifier", "é", "x" * 500])
def test_hash_in_range(name):
    assert 0 <= hash_name(name) < HASH_SIZE


def test_install_and_lookup():
    table = SymbolTable()
    table.install("NAME", "value")
    entry = table.lookup("NAME")
    assert entry.name == "NAME"
    assert entry.definition == "value"
    assert table.lookup("OTHER") is None


def test_reinstall_replaces_definition():
    table = SymbolTable()
    first = table.install("N", "one")
    second = table.install("N", "two")
    assert first is second
    assert table.lookup("N").definition == "two"


def test_undef_in_chain_keeps_neighbours():
    table = SymbolTable()
    table.install("TEST", "test")
    for name in COLLIDING:
        table.install(name, name.lower())
    assert table.undef("UPXD") is True
    assert table.lookup("UPXD") is None
    for name in ["TEST", "TSHe", "9iww", "mY1a", "uuoT"]:
        assert table.lookup(name).name == name


@pytest.mark.parametrize("victim", ["TEST", "uuoT"])
def test_undef_head_and_tail(victim):
    table = SymbolTable()
    table.install("TEST", "test")
    for name in COLLIDING:
        table.install(name, name)
    assert table.undef(victim) is True
    assert victim not in table
    assert table.undef(victim) is False


def test_undef_missing():
    assert SymbolTable().undef("nothing") is False


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "TEST: test\n'TEST' was undefined successfully.\n"