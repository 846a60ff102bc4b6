"""String and array drills: letter positions, letter frequency, repetition and dialing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from string import ascii_lowercase, ascii_uppercase


def letter_positions(word: str) -> list[int]:
    """Return, for each letter a..z, the index of its first occurrence in ``word`` or -1.

    ``word`` must consist of lowercase ASCII letters.
    """
    positions = dict.fromkeys(ascii_lowercase, -1)
    for index, char in enumerate(word):
        if char not in positions:
            raise ValueError(f"not a lowercase letter: {char!r}")
        if positions[char] == -1:
            positions[char] = index
    return list(positions.values())


def most_frequent_letter(word: str) -> str:
    """Return the most used letter of ``word`` in upper case, ignoring case.

    Returns ``'?'`` when several letters share the highest count.
    """
    upper = word.upper()
    invalid = [char for char in upper if char not in ascii_uppercase]
    if invalid:
        raise ValueError(f"not a letter: {invalid[0]!r}")
    counts = Counter(upper)
    best = max(counts.values(), default=0)
    leaders = [letter for letter in ascii_uppercase if counts.get(letter, 0) == best]
    return leaders[0] if len(leaders) == 1 else "?"


def repeat_chars(times: int, word: str) -> str:
    """Return ``word`` with every character repeated ``times`` times."""
    if times < 0:
        raise ValueError("repeat count must not be negative")
    return "".join(char * times for char in word)


def _dial_seconds(letter: str) -> int:
    offset = ord(letter) - ord("A")
    if offset <= 14:
        return offset // 3 + 3
    if offset <= 18:
        return 8
    if offset <= 21:
        return 9
    return 10


def dial_time(word: str) -> int:
    """Return the seconds needed to dial the uppercase letters of ``word`` on a rotary phone."""
    total = 0
    for char in word:
        if char not in ascii_uppercase:
            raise ValueError(f"not an uppercase letter: {char!r}")
        total += _dial_seconds(char)
    return total


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    return min(items), max(items)