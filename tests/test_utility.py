import re
import string

import pytest

from bankdesk.utility import (
    CharType,
    decrypt_text,
    encrypt_text,
    generate_key,
    generate_keys,
    generate_word,
    number_to_text,
    random_character,
    random_keys,
    random_number,
    random_numbers,
    random_words,
    shuffle,
    tabs,
)


def test_random_number_in_range():
    values = [random_number(3, 7) for _ in range(200)]
    assert all(3 <= v <= 7 for v in values)


def test_random_number_single_value():
    assert random_number(4, 4) == 4


def test_random_number_empty_range():
    with pytest.raises(ValueError):
        random_number(5, 1)


@pytest.mark.parametrize(
    "char_type, allowed",
    [
        (CharType.SMALL_LETTER, string.ascii_lowercase),
        (CharType.CAPITAL_LETTER, string.ascii_uppercase),
        (CharType.DIGIT, string.digits),
        (CharType.SPECIAL_CHARACTER, "".join(chr(c) for c in range(33, 48))),
        (CharType.MIX_CHARS, string.ascii_letters + string.digits),
    ],
)
def test_random_character_kinds(char_type, allowed):
    chars = [random_character(char_type) for _ in range(100)]
    assert all(c in allowed for c in chars)


def test_generate_word_length():
    word = generate_word(CharType.SMALL_LETTER, 9)
    assert len(word) == 9 and word.islower()


def test_generate_key_format():
    key = generate_key()
    parts = key.split("-")
    assert [len(part) for part in parts] == [4, 4, 4, 4]
    assert set("".join(parts)) <= set(string.ascii_uppercase)


def test_generate_key_digits():
    key = generate_key(CharType.DIGIT)
    parts = key.split("-")
    assert [len(part) for part in parts] == [4, 4, 4, 4]
    assert set("".join(parts)) <= set(string.digits)


def test_generate_keys_lines():
    lines = generate_keys(3, CharType.CAPITAL_LETTER)
    assert len(lines) == 3
    for i, line in enumerate(lines, start=1):
        assert line.startswith(f"Key [{i}] : ")
        assert re.fullmatch(r"[A-Z]{4}(-[A-Z]{4}){3}", line.split(" : ")[1])


def test_random_collections():
    assert all(1 <= n <= 10 for n in random_numbers(20, 1, 10))
    assert len(random_numbers(20, 1, 10)) == 20
    words = random_words(5, CharType.DIGIT, 3)
    assert len(words) == 5 and all(len(w) == 3 and w.isdigit() for w in words)
    keys = random_keys(4)
    assert len(keys) == 4 and all(len(k) == 19 for k in keys)


def test_shuffle_keeps_elements():
    items = list(range(30))
    shuffle(items)
    assert sorted(items) == list(range(30))


def test_shuffle_empty():
    items = []
    shuffle(items)
    assert items == []


def test_tabs():
    assert tabs(3) == "\t\t"
    assert tabs(0) == ""
    assert len(tabs(10)) == 9


def test_number_to_text_zero():
    assert number_to_text(0) == ""


@pytest.mark.parametrize(
    "number, text",
    [
        (100, "One Hundred "),
        (1000, "One Thousand "),
        (1_000_000, "One Million "),
        (1_000_000_000, "One Billion "),
    ],
)
def test_number_to_text_round_values(number, text):
    assert number_to_text(number) == text


def test_number_to_text_twenty_one():
    assert number_to_text(21) == "Twenty One "


def test_number_to_text_composition():
    assert number_to_text(1234) == "One Thousand " + number_to_text(234)
    assert number_to_text(5000).endswith("Thousands ")
    assert number_to_text(300).endswith("Hundreds ")


def test_number_to_text_truncates_floats():
    assert number_to_text(100.9) == number_to_text(100)


def test_number_to_text_negative():
    with pytest.raises(ValueError):
        number_to_text(-5)


def test_encrypt_default_key():
    assert encrypt_text("abc") == "cde"


@pytest.mark.parametrize("key", [1, 2, 7])
def test_encrypt_round_trip(key):
    text = "Hello, World 123"
    encrypted = encrypt_text(text, key)
    assert encrypted != text
    assert decrypt_text(encrypted, key) == text