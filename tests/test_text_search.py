import pytest

from algokit.text_search import find_match

PAIRS = [
    ("lo", "hello"),
    ("hello", "hello"),
    ("xyz", "hello"),
    ("abab", "ababab"),
    ("a", "banana"),
    ("ana", "banana"),
    ("образец", "текст с образцом внутри"),
    ("образ", "текст с образцом внутри"),
]


@pytest.mark.parametrize("pattern, text", PAIRS)
def test_agrees_with_str_find(pattern, text):
    assert find_match(pattern, text) == text.find(pattern)


@pytest.mark.parametrize("pattern, text", [p for p in PAIRS if p[0] in p[1]])
def test_found_position_holds_the_pattern(pattern, text):
    position = find_match(pattern, text)
    assert text[position:position + len(pattern)] == pattern
    assert pattern not in text[:position + len(pattern) - 1]


def test_empty_pattern_matches_at_start():
    assert find_match("", "anything") == 0
    assert find_match("", "") == 0


def test_pattern_longer_than_text_is_not_found():
    assert find_match("longer pattern", "short") == -1


def test_missing_pattern_returns_minus_one():
    assert find_match("q", "abcdef") == -1


def test_works_on_lists():
    text = [1, 2, 3, 2, 3, 4]
    position = find_match([2, 3, 4], text)
    assert text[position:position + 3] == [2, 3, 4]