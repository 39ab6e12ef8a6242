"""Random values, keys, number spelling and simple text encryption."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from enum import IntEnum

_ONES = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven",
    "Eight", "Nine", "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")


class CharType(IntEnum):
    """Kind of character produced by :func:`random_character`."""

    SMALL_LETTER = 1
    CAPITAL_LETTER = 2
    DIGIT = 3
    MIX_CHARS = 4
    SPECIAL_CHARACTER = 5


_CHAR_RANGES = {
    CharType.SMALL_LETTER: (97, 122),
    CharType.CAPITAL_LETTER: (65, 90),
    CharType.DIGIT: (48, 57),
    CharType.SPECIAL_CHARACTER: (33, 47),
}
_MIXABLE = (CharType.SMALL_LETTER, CharType.CAPITAL_LETTER, CharType.DIGIT)


def random_number(low: int, high: int) -> int:
    """A random integer from ``low`` to ``high`` inclusive."""
    if low > high:
        raise ValueError(f"empty range: {low}..{high}")
    return random.randint(low, high)


def random_character(char_type: CharType) -> str:
    """One random character of the given kind; mixed picks a letter or digit."""
    char_type = CharType(char_type)
    if char_type is CharType.MIX_CHARS:
        char_type = random.choice(_MIXABLE)
    low, high = _CHAR_RANGES[char_type]
    return chr(random_number(low, high))


def generate_word(char_type: CharType, length: int) -> str:
    """A random word of ``length`` characters of the given kind."""
    return "".join(random_character(char_type) for _ in range(length))


def generate_key(char_type: CharType = CharType.CAPITAL_LETTER) -> str:
    """Four groups of four random characters joined by dashes."""
    return "-".join(generate_word(char_type, 4) for _ in range(4))


def generate_keys(count: int, char_type: CharType = CharType.CAPITAL_LETTER) -> list[str]:
    """Numbered key lines of the form ``Key [n] : XXXX-XXXX-XXXX-XXXX``."""
    return [f"Key [{i}] : {generate_key(char_type)}" for i in range(1, count + 1)]


def random_numbers(count: int, low: int, high: int) -> list[int]:
    """``count`` random integers in ``low..high``."""
    return [random_number(low, high) for _ in range(count)]


def random_words(count: int, char_type: CharType, word_length: int) -> list[str]:
    """``count`` random words of ``word_length`` characters."""
    return [generate_word(char_type, word_length) for _ in range(count)]


def random_keys(count: int, char_type: CharType = CharType.CAPITAL_LETTER) -> list[str]:
    """``count`` random keys."""
    return [generate_key(char_type) for _ in range(count)]


def shuffle(items: MutableSequence) -> None:
    """Shuffle in place by swapping random pairs, once per element."""
    size = len(items)
    for _ in range(size):
        a = random_number(1, size) - 1
        b = random_number(1, size) - 1
        items[a], items[b] = items[b], items[a]


def tabs(count: int) -> str:
    """A run of ``count - 1`` tab characters."""
    return "\t" * max(count - 1, 0)


def number_to_text(number: int) -> str:
    """Spell a non-negative whole number in English words; 0 gives ''."""
    number = int(number)
    if number < 0:
        raise ValueError(f"cannot spell a negative number: {number}")
    if number == 0:
        return ""
    if number <= 19:
        return _ONES[number] + " "
    if number <= 99:
        return _TENS[number // 10] + " " + number_to_text(number % 10)
    if number <= 199:
        return "One Hundred " + number_to_text(number % 100)
    if number <= 999:
        return number_to_text(number // 100) + "Hundreds " + number_to_text(number % 100)
    if number <= 1999:
        return "One Thousand " + number_to_text(number % 1000)
    if number <= 999_999:
        return number_to_text(number // 1000) + "Thousands " + number_to_text(number % 1000)
    if number <= 1_999_999:
        return "One Million " + number_to_text(number % 1_000_000)
    if number <= 999_999_999:
        return (
            number_to_text(number // 1_000_000) + "Millions "
            + number_to_text(number % 1_000_000)
        )
    if number <= 1_999_999_999:
        return "One Billion " + number_to_text(number % 1_000_000_000)
    return (
        number_to_text(number // 1_000_000_000) + "Billions "
        + number_to_text(number % 1_000_000_000)
    )


def encrypt_text(text: str, key: int = 2) -> str:
    """Shift every character's code point up by ``key``."""
    return "".join(chr(ord(char) + key) for char in text)


def decrypt_text(text: str, key: int = 2) -> str:
    """Undo :func:`encrypt_text` with the same key."""
    return "".join(chr(ord(char) - key) for char in text)