import string

import pytest

from bankdesk.textutil import (
    WhatToCount,
    count_capital_letters,
    count_letters,
    count_small_letters,
    count_specific_letter,
    count_vowels,
    count_words,
    invert_all_letters_case,
    invert_letter_case,
    is_vowel,
    join_string,
    lower_all,
    lower_first_letter_of_each_word,
    remove_punctuations,
    replace_word,
    reverse_words,
    split,
    trim,
    trim_left,
    trim_right,
    upper_all,
    upper_first_letter_of_each_word,
)

SAMPLE = "Hello brave New world, 42 times!"


@pytest.mark.parametrize("words", [["one"], ["alpha", "beta", "gamma"], []])
def test_count_words_matches_word_list(words):
    assert count_words(" ".join(words)) == len(words)


def test_count_words_ignores_repeated_spaces():
    assert count_words("  alpha   beta  ") == count_words("alpha beta")


def test_upper_first_letter_of_each_word():
    result = upper_first_letter_of_each_word("bank desk system")
    assert all(word[0] in string.ascii_uppercase for word in result.split(" "))
    assert lower_all(result) == "bank desk system"


def test_lower_first_letter_of_each_word():
    result = lower_first_letter_of_each_word("BANK DESK SYSTEM")
    assert all(word[0] in string.ascii_lowercase for word in result.split(" "))
    assert upper_all(result) == "BANK DESK SYSTEM"


def test_upper_and_lower_round_trip():
    assert count_small_letters(upper_all(SAMPLE)) == 0
    assert count_capital_letters(lower_all(SAMPLE)) == 0
    assert lower_all(upper_all(SAMPLE)) == lower_all(SAMPLE)


def test_non_ascii_untouched():
    assert upper_all("ß") == "ß"


def test_invert_letter_case():
    assert invert_letter_case(invert_letter_case("q")) == "q"
    assert invert_letter_case("7") == "7"
    assert invert_letter_case("q") == upper_all("q")


def test_invert_all_letters_case():
    inverted = invert_all_letters_case(SAMPLE)
    assert invert_all_letters_case(inverted) == SAMPLE
    assert count_capital_letters(inverted) == count_small_letters(SAMPLE)


def test_count_letters_modes():
    assert count_letters(SAMPLE) == len(SAMPLE)
    assert count_letters(SAMPLE, WhatToCount.CAPITAL_LETTERS) == count_capital_letters(SAMPLE)
    assert count_letters(SAMPLE, WhatToCount.SMALL_LETTERS) == count_small_letters(SAMPLE)


def test_capital_and_small_partition_letters():
    letters = sum(1 for c in SAMPLE if c in string.ascii_letters)
    assert count_capital_letters(SAMPLE) + count_small_letters(SAMPLE) == letters


def test_count_specific_letter_case_insensitive():
    text = "Anna has a Banana"
    assert count_specific_letter(text, "a", False) == (
        count_specific_letter(text, "a") + count_specific_letter(text, "A")
    )


def test_is_vowel():
    assert all(is_vowel(c) for c in "aeiouAEIOU")
    assert not any(is_vowel(c) for c in "bcdxyzBZ1 ")


def test_count_vowels():
    expected = sum(count_specific_letter(SAMPLE, v, False) for v in "aeiou")
    assert count_vowels(SAMPLE) == expected


def test_split_basic():
    assert split("a#//#b#//#c", "#//#") == ["a", "b", "c"]


def test_split_drops_trailing_only():
    assert split("a,b,", ",") == ["a", "b"]
    assert split(",a", ",") == ["", "a"]
    assert split("", ",") == []


def test_split_join_round_trip():
    text = "first#//#second#//##//#fourth"
    assert join_string(split(text, "#//#"), "#//#") == text


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        split("abc", "")


def test_trim_family():
    assert trim("  x y  ") == "x y"
    assert trim_left("  x y  ") == "x y  "
    assert trim_right("  x y  ") == "  x y"
    assert trim("     ") == ""


def test_trim_is_idempotent():
    once = trim_left("   padded")
    assert trim_left(once) == once
    assert not once.startswith(" ")


def test_reverse_words():
    assert reverse_words("one two three") == "three two one"
    assert reverse_words(reverse_words("one two three")) == "one two three"


def test_replace_word_match_case():
    assert replace_word("the cat and the dog", "the", "a") == "a cat and a dog"
    assert replace_word("The cat", "the", "a") == "The cat"


def test_replace_word_ignore_case():
    result = replace_word("The cat", "the", "a", match_case=False)
    assert result.split(" ") == ["a", "cat"]


def test_remove_punctuations():
    assert remove_punctuations("a,b.c!") == "abc"
    cleaned = remove_punctuations(SAMPLE)
    assert not any(c in string.punctuation for c in cleaned)
    assert remove_punctuations("plain words") == "plain words"