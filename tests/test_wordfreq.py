import io
from collections import Counter

from krtools.wordfreq import format_frequencies, main, word_frequencies

TEXT = "b a b c b a\nc d e b\n"


def test_counts_match_words():
    pairs = word_frequencies(TEXT)
    assert dict(pairs) == dict(Counter(TEXT.split()))


def test_sorted_by_count_descending():
    counts = [n for _, n in word_frequencies(TEXT)]
    assert counts == sorted(counts, reverse=True)


def test_most_frequent_first():
    assert word_frequencies("b a b c b a")[0] == ("b", 3)


def test_non_alpha_words_ignored():
    assert word_frequencies("_x 9 ab") == [("ab", 1)]


def test_empty_text():
    assert word_frequencies("") == []


def test_format_frequencies():
    assert format_frequencies([("b", 3)]) == "   3 b\n"


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    assert main([]) == 0
    assert capsys.readouterr().out == format_frequencies(word_frequencies(TEXT))