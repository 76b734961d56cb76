"""String drills: palindromes, anagrams, brackets, prefixes and keypad codes."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable
from itertools import groupby
from os.path import commonprefix

__all__ = [
    "is_palindrome",
    "is_anagram",
    "is_valid_brackets",
    "remove_consecutive_duplicates",
    "longest_common_prefix",
    "keypad_sequence",
    "duplicate_counts",
]

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

_PAIRS = {")": "(", "]": "[", "}": "{"}

_KEYPAD = dict(
    zip(
        string.ascii_uppercase,
        [
            "2", "22", "222",
            "3", "33", "333",
            "4", "44", "444",
            "5", "55", "555",
            "6", "66", "666",
            "7", "77", "777", "7777",
            "8", "88", "888",
            "9", "99", "999", "9999",
        ],
    )
)


def is_palindrome(text: str) -> bool:
    """Tell whether the ASCII letters and digits of text read the same both ways.

    Letter case is ignored and every other character is skipped.
    """
    cleaned = "".join(ch.lower() for ch in text if ch in _ALPHANUMERIC)
    return cleaned == cleaned[::-1]


def is_anagram(first: str, second: str) -> bool:
    """Tell whether second uses exactly the characters of first."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def is_valid_brackets(text: str) -> bool:
    """Tell whether every bracket is closed by its own kind in the right order.

    Any character other than the six brackets makes the text invalid.
    """
    stack: list[str] = []
    for ch in text:
        opener = _PAIRS.get(ch)
        if opener is not None and stack and stack[-1] == opener:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse every run of a repeated character to a single character."""
    return "".join(ch for ch, _ in groupby(text))


def longest_common_prefix(words: Iterable[str]) -> str:
    """Return the longest prefix shared by all words, or an empty string."""
    items = list(words)
    if not items:
        raise ValueError("at least one word is needed")
    return commonprefix(items)


def keypad_sequence(text: str) -> str:
    """Spell upper-case text as the key presses of a mobile phone keypad."""
    try:
        return "".join(_KEYPAD[ch] for ch in text)
    except KeyError as error:
        raise ValueError(
            f"only upper-case letters A-Z can be typed, got {error.args[0]!r}"
        ) from None


def duplicate_counts(text: str) -> dict[str, int]:
    """Map each character that occurs more than once to its count, in character order."""
    counts = Counter(text)
    return {ch: counts[ch] for ch in sorted(counts) if counts[ch] > 1}