"""String helpers: case changes, counting, splitting, trimming and word edits."""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable
from enum import Enum

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SWAP_CASE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)
_VOWELS = frozenset("aeiou")
_PUNCTUATION = frozenset(string.punctuation)


class WhatToCount(Enum):
    """Which letters :func:`count_letters` counts."""

    SMALL_LETTERS = 0
    CAPITAL_LETTERS = 1
    ALL = 3


def _is_upper(char: str) -> bool:
    return char in string.ascii_uppercase


def _is_lower(char: str) -> bool:
    return char in string.ascii_lowercase


def _map_word_starts(text: str, convert: Callable[[str], str]) -> str:
    result = []
    at_word_start = True
    for char in text:
        if char != " " and at_word_start:
            char = convert(char)
        result.append(char)
        at_word_start = char == " "
    return "".join(result)


def count_words(text: str) -> int:
    """Count the non-empty words separated by spaces."""
    return sum(1 for word in text.split(" ") if word)


def upper_first_letter_of_each_word(text: str) -> str:
    """Upper-case the first letter of every space-separated word."""
    return _map_word_starts(text, upper_all)


def lower_first_letter_of_each_word(text: str) -> str:
    """Lower-case the first letter of every space-separated word."""
    return _map_word_starts(text, lower_all)


def upper_all(text: str) -> str:
    """Upper-case every ASCII letter."""
    return text.translate(_TO_UPPER)


def lower_all(text: str) -> str:
    """Lower-case every ASCII letter."""
    return text.translate(_TO_LOWER)


def invert_letter_case(char: str) -> str:
    """Swap the case of a single ASCII letter."""
    return char.translate(_SWAP_CASE)


def invert_all_letters_case(text: str) -> str:
    """Swap the case of every ASCII letter."""
    return text.translate(_SWAP_CASE)


def count_letters(text: str, what: WhatToCount = WhatToCount.ALL) -> int:
    """Count all characters, or only the capital or small letters."""
    if what is WhatToCount.ALL:
        return len(text)
    if what is WhatToCount.CAPITAL_LETTERS:
        return count_capital_letters(text)
    return count_small_letters(text)


def count_capital_letters(text: str) -> int:
    """Count the upper-case ASCII letters."""
    return sum(1 for char in text if _is_upper(char))


def count_small_letters(text: str) -> int:
    """Count the lower-case ASCII letters."""
    return sum(1 for char in text if _is_lower(char))


def count_specific_letter(text: str, letter: str, match_case: bool = True) -> int:
    """Count occurrences of one letter, optionally ignoring case."""
    if match_case:
        return sum(1 for char in text if char == letter)
    wanted = lower_all(letter)
    return sum(1 for char in text if lower_all(char) == wanted)


def is_vowel(char: str) -> bool:
    """Whether the character is one of a, e, i, o, u in either case."""
    return lower_all(char) in _VOWELS


def count_vowels(text: str) -> int:
    """Count the vowels in the text."""
    return sum(1 for char in text if is_vowel(char))


def split(text: str, delim: str) -> list[str]:
    """Split on a delimiter, keeping empty pieces except a trailing one."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim_left(text: str) -> str:
    """Remove leading spaces."""
    return text.lstrip(" ")


def trim_right(text: str) -> str:
    """Remove trailing spaces."""
    return text.rstrip(" ")


def trim(text: str) -> str:
    """Remove leading and trailing spaces."""
    return text.strip(" ")


def join_string(parts: Iterable[str], delim: str) -> str:
    """Join the parts with the delimiter between them."""
    return delim.join(parts)


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words."""
    return " ".join(reversed(split(text, " ")))


def replace_word(text: str, old: str, new: str, match_case: bool = True) -> str:
    """Replace whole space-separated words equal to ``old`` with ``new``."""
    if match_case:
        matches = lambda word: word == old  # noqa: E731
    else:
        target = lower_all(old)
        matches = lambda word: lower_all(word) == target  # noqa: E731
    return " ".join(new if matches(word) else word for word in split(text, " "))


def remove_punctuations(text: str) -> str:
    """Drop every ASCII punctuation character."""
    return "".join(char for char in text if char not in _PUNCTUATION)