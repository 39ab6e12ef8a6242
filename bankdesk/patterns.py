"""Number and letter sequences: perfect numbers, digit listings and patterns."""

from __future__ import annotations

import string
from collections.abc import Iterator
from itertools import product

from bankdesk.mathutil import is_perfect_number


def perfect_numbers_up_to(limit: int) -> list[int]:
    """All perfect numbers from 1 to ``limit``."""
    return [i for i in range(1, limit + 1) if is_perfect_number(i)]


def digits_reversed(number: int) -> list[int]:
    """Digits of a positive number from the last to the first."""
    digits = []
    while number > 0:
        number, digit = divmod(number, 10)
        digits.append(digit)
    return digits


def count_digit_frequency(digit: int, number: int) -> int:
    """How many times ``digit`` appears in a positive number."""
    return digits_reversed(number).count(digit)


def digit_frequencies(number: int) -> dict[int, int]:
    """Counts of each digit that appears, in ascending digit order."""
    frequencies = {d: count_digit_frequency(d, number) for d in range(10)}
    return {d: count for d, count in frequencies.items() if count > 0}


def inverted_number_pattern(size: int) -> list[str]:
    """Lines from ``size`` repeated ``size`` times down to a single 1."""
    return [str(i) * i for i in range(size, 0, -1)]


def number_pattern(size: int) -> list[str]:
    """Lines from a single 1 up to ``size`` repeated ``size`` times."""
    return [str(i) * i for i in range(1, size + 1)]


def letter_pattern(size: int) -> list[str]:
    """Lines A, BB, CCC and so on for ``size`` letters."""
    return [chr(ord("A") + k) * (k + 1) for k in range(size)]


def words_aaa_to_zzz() -> Iterator[str]:
    """Every three-letter capital word in alphabetical order."""
    for letters in product(string.ascii_uppercase, repeat=3):
        yield "".join(letters)