import pytest

from wordfreq.app.frequency import (
    WordCount, analyze, count_words, rank, summarize, tokenize
)

SAMPLE = "The quick brown fox\tjumps over\r\nthe lazy dog.\nThe DOG sleeps,  the fox   runs\n"

def test_tokenize_splits_on_whitespace_and_lowercases():
    assert list(tokenize("Hello  World\tFOO\r\nbar\n")) == ["hello", "world", "foo", "bar"]

def test_tokenize_keeps_punctuation_attached():
    assert list(tokenize("dog. dog, dog")) == ["dog.", "dog,", "dog"]

def test_tokenize_only_four_delimiters():
    # form feed y NBSP internos no separan
    assert list(tokenize("a\fb c\u00a0d")) == ["a\fb", "c\u00a0d"]

def test_tokenize_trims_other_whitespace_and_drops_empty():
    assert list(tokenize("\u00a0word\u3000 \u00a0")) == ["word"]

def test_tokenize_is_lazy():
    it = tokenize("a b")
    assert next(it) == "a"
    assert next(it) == "b"
    with pytest.raises(StopIteration):
        next(it)

def test_tokenize_lower_is_not_casefold():
    assert list(tokenize("STRASSE Straße")) == ["strasse", "straße"]

@pytest.mark.parametrize("text", ["", "   ", "\n\r\n\t"])
def test_tokenize_blank_input(text):
    assert list(tokenize(text)) == []

def test_count_words_merges_case_even_without_tokenizer():
    counts = count_words(["Cat", "cat", "CAT"])
    assert dict(counts) == {"cat": 3}

def test_rank_orders_by_count_then_word():
    report = rank(count_words(["b", "a", "b", "a", "c"]))
    assert report == [WordCount("a", 2), WordCount("b", 2), WordCount("c", 1)]

def test_rank_ignores_insertion_order():
    from collections import Counter
    first = rank(Counter({"z": 1, "y": 1, "x": 3}))
    second = rank(Counter({"x": 3, "y": 1, "z": 1}))
    assert first == second == [WordCount("x", 3), WordCount("y", 1), WordCount("z", 1)]

def test_rank_is_ordinal():
    # orden por code point, sin collation
    report = rank(count_words(["é", "e", "z", "1", "!"]))
    assert [wc.word for wc in report] == ["!", "1", "e", "z", "é"]

def test_analyze_case_insensitive():
    assert analyze("Cat cat CAT") == [WordCount("cat", 3)]

def test_analyze_tie_break():
    assert [wc.line() for wc in analyze("b a b a c")] == ["a:2", "b:2", "c:1"]

def test_sum_of_counts_equals_token_count():
    report = analyze(SAMPLE)
    total, distinct = summarize(report)
    assert total == len(SAMPLE.split())
    assert distinct == len(report)

def test_words_are_lowercase_and_trimmed():
    for wc in analyze(SAMPLE):
        assert wc.word == wc.word.lower()
        assert wc.word == wc.word.strip()
        assert wc.word

def test_report_is_strictly_sorted():
    report = analyze(SAMPLE)
    for a, b in zip(report, report[1:]):
        assert a.count > b.count or (a.count == b.count and a.word < b.word)

def test_analyze_sample_head():
    report = analyze(SAMPLE)
    assert report[:2] == [WordCount("the", 4), WordCount("fox", 2)]

def test_summarize_empty():
    assert summarize([]) == (0, 0)

def test_tokenize_consumes_matches_on_demand(monkeypatch):
    from wordfreq.app import frequency
    consumed = []
    real = frequency.FRAGMENT
    class Recording:
        def finditer(self, text):
            for m in real.finditer(text):
                consumed.append(m.group())
                yield m
    monkeypatch.setattr(frequency, "FRAGMENT", Recording())
    it = tokenize("uno dos tres cuatro")
    assert next(it) == "uno"
    assert consumed == ["uno"]
