import random
import re

import pytest

from algokit.searching import binary_search, build_lps, kmp_search, rabin_karp

PAIRS = [
    ("abracadabra", "abra"),
    ("aaaaaa", "aa"),
    ("mississippi", "issi"),
    ("hello", "world"),
    ("abc", "abc"),
    ("abababab", "abab"),
    ("xyz", "z"),
]


def _occurrences(text, pattern):
    return [m.start() for m in re.finditer(f"(?={re.escape(pattern)})", text)]


def test_binary_search_finds_every_element():
    rng = random.Random(7)
    items = sorted(rng.sample(range(1000), 60))
    for key in items:
        index = binary_search(items, key)
        assert items[index] == key


def test_binary_search_missing_key():
    items = [1, 3, 5, 7]
    assert binary_search(items, 4) is None
    assert binary_search(items, 0) is None
    assert binary_search(items, 8) is None
    assert binary_search([], 1) is None


@pytest.mark.parametrize("text,pattern", PAIRS)
def test_rabin_karp_matches_regex(text, pattern):
    assert rabin_karp(text, pattern) == _occurrences(text, pattern)


@pytest.mark.parametrize("text,pattern", PAIRS)
def test_kmp_matches_regex(text, pattern):
    assert kmp_search(text, pattern) == _occurrences(text, pattern)


def test_searches_agree_on_random_text():
    rng = random.Random(99)
    for _ in range(50):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 40)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        assert rabin_karp(text, pattern) == kmp_search(text, pattern)


def test_kmp_reports_overlapping_matches():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


def test_pattern_longer_than_text():
    assert not rabin_karp("ab", "abc")
    assert not kmp_search("ab", "abc")


def test_build_lps_known_value():
    assert build_lps("AAACAAAA") == [0, 1, 2, 0, 1, 2, 3, 3]


@pytest.mark.parametrize("pattern", ["ABABCABAB", "aabaaab", "abcd", "zzzz", "a"])
def test_build_lps_is_border_length(pattern):
    lps = build_lps(pattern)
    assert len(lps) == len(pattern)
    for i, length in enumerate(lps):
        assert 0 <= length <= i
        prefix = pattern[: i + 1]
        assert prefix[:length] == prefix[len(prefix) - length:]


def test_build_lps_empty():
    assert not build_lps("")