from itertools import groupby

import pytest

from algokit.strings import (
    kth_character,
    longest_palindrome,
    possible_string_count,
    reverse_words,
)

WORD_SAMPLES = ["the sky is blue", "  hello world  ", "a good   example", "single", "", "   "]


def test_reverse_words_example():
    assert reverse_words("the sky is blue") == "blue is sky the"


@pytest.mark.parametrize("s", WORD_SAMPLES)
def test_reverse_words_reverses_split(s):
    assert reverse_words(s).split() == list(reversed(s.split()))


def test_reverse_words_keeps_tabs_inside_words():
    assert reverse_words("a\tb c") == "c a\tb"


PALINDROME_SAMPLES = ["babad", "cbbd", "a", "ac", "forgeeksskeegfor", "abacdfgdcaba", "^#$", "a#a"]


@pytest.mark.parametrize("s", PALINDROME_SAMPLES)
def test_longest_palindrome_is_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    assert len(result) >= 1


def test_longest_palindrome_prefers_leftmost():
    assert longest_palindrome("babad") == "bab"


@pytest.mark.parametrize("s", ["racecar", "abba", "a#a", "zz"])
def test_longest_palindrome_whole_string(s):
    assert longest_palindrome(s) == s


def test_longest_palindrome_empty():
    assert not longest_palindrome("")


def test_kth_character_first():
    assert kth_character(1) == "a"


@pytest.mark.parametrize("power", range(6))
def test_kth_character_second_half_is_successor(power):
    half = 2**power
    for k in range(1, half + 1):
        assert kth_character(k + half) == chr(ord(kth_character(k)) + 1)


@pytest.mark.parametrize("k", [0, -3])
def test_kth_character_rejects_non_positive(k):
    with pytest.raises(ValueError):
        kth_character(k)


@pytest.mark.parametrize("word", ["abbcccc", "abcd", "aaaa", "x", "", "aabbaa"])
def test_possible_string_count_matches_runs(word):
    repeats = sum(len(list(run)) - 1 for _, run in groupby(word))
    assert possible_string_count(word) == 1 + repeats