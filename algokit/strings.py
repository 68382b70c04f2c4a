"""String algorithms."""

from __future__ import annotations

_START = object()
_END = object()


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words, collapsing extra spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def longest_palindrome(s: str) -> str:
    """The longest palindromic substring; the leftmost one wins a tie."""
    if not s:
        return ""
    # Characters interleaved with None separators, framed by distinct sentinels.
    t: list[object] = [_START, None]
    for ch in s:
        t.extend((ch, None))
    t.append(_END)

    n = len(t)
    radius = [0] * n
    center = right = 0
    best_len = best_center = 0
    for i in range(1, n - 1):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while t[i + 1 + radius[i]] == t[i - 1 - radius[i]]:
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
        if radius[i] > best_len:
            best_len, best_center = radius[i], i
    start = (best_center - best_len) // 2
    return s[start : start + best_len]


def kth_character(k: int) -> str:
    """The k-th character (1-based) of the string grown from "a" by appending its successor."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    word = "a"
    while len(word) < k:
        word += "".join(chr(ord(ch) + 1) for ch in word)
    return word[k - 1]


def possible_string_count(word: str) -> int:
    """How many original strings could have been typed with at most one held key."""
    return 1 + sum(1 for prev, cur in zip(word, word[1:]) if prev == cur)