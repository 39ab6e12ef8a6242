"""List helpers: counting, searching, filtering, copying and formatting numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bankdesk.inputs import InputReader
from bankdesk.mathutil import is_prime
from bankdesk.utility import generate_key, random_number, shuffle

ADD_ELEMENT_PROMPT = "Enter the element that you want to add:"
ADD_MORE_PROMPT = "\nDo you want to add more numbers? [0]:No,[1]:yes? "


def times_repeated(number: int, items: Iterable[int]) -> int:
    """How many times ``number`` occurs in the items."""
    return sum(1 for item in items if item == number)


def max_number(items: Iterable[int]) -> int:
    """The largest item, never less than 0 (0 for an empty or all-negative list)."""
    return max(items, default=0) if False else max([0, *items])


def min_number(items: Sequence[int]) -> int:
    """The smallest item; an empty list raises ValueError."""
    if not items:
        raise ValueError("min_number() of an empty list")
    return min(items)


def sum_numbers(items: Iterable[int]) -> int:
    """Sum of the items."""
    return sum(items)


def average(items: Sequence[int]) -> float:
    """Arithmetic mean; an empty list raises ValueError."""
    if not items:
        raise ValueError("average() of an empty list")
    return sum(items) / len(items)


def find_position(number: int, items: Sequence[int]) -> int:
    """Index of the first occurrence of ``number``, or -1 when it is absent."""
    return next((index for index, item in enumerate(items) if item == number), -1)


def contains(number: int, items: Sequence[int]) -> bool:
    """Whether ``number`` occurs in the items."""
    return find_position(number, items) != -1


def is_palindrome(items: Sequence[int]) -> bool:
    """Whether the items read the same backwards."""
    return list(items) == list(reversed(items))


def odd_count(items: Iterable[int]) -> int:
    """Number of odd items."""
    return sum(1 for item in items if item % 2 != 0)


def even_count(items: Iterable[int]) -> int:
    """Number of even items."""
    return sum(1 for item in items if item % 2 == 0)


def positive_count(items: Iterable[int]) -> int:
    """Number of items that are zero or greater."""
    return sum(1 for item in items if item >= 0)


def negative_count(items: Iterable[int]) -> int:
    """Number of items below zero."""
    return sum(1 for item in items if item < 0)


def random_fill(length: int) -> list[int]:
    """``length`` random numbers from 1 to 100."""
    return [random_number(1, 100) for _ in range(length)]


def primes_only(items: Iterable[int]) -> list[int]:
    """The items that pass the prime check, in order."""
    return [item for item in items if is_prime(item)]


def odd_numbers(items: Iterable[int]) -> list[int]:
    """The odd items, in order."""
    return [item for item in items if item % 2 != 0]


def distinct_numbers(items: Iterable[int]) -> list[int]:
    """The items with repeats dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def sum_of_two(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Element-wise sums; lists of different lengths raise ValueError."""
    return [a + b for a, b in zip(first, second, strict=True)]


def shuffled(items: Iterable[int]) -> list[int]:
    """A shuffled copy of the items."""
    result = list(items)
    shuffle(result)
    return result


def reversed_copy(items: Sequence[int]) -> list[int]:
    """The items in reverse order."""
    return list(reversed(items))


def random_key_list(length: int) -> list[str]:
    """``length`` random keys."""
    return [generate_key() for _ in range(length)]


def one_to_n(count: int) -> list[int]:
    """The numbers 1 to ``count``."""
    return list(range(1, count + 1))


def format_array(items: Iterable[object]) -> str:
    """Each item followed by a space, then a newline."""
    return "".join(f"{item} " for item in items) + "\n"


def format_string_array(items: Iterable[str]) -> str:
    """A numbered listing of the items."""
    lines = "".join(f"Array[{index}] : {item}\n" for index, item in enumerate(items))
    return "\nArray elements:\n\n" + lines + "\n"


def describe_position(number: int, items: Sequence[int]) -> str:
    """Text telling where ``number`` is found, by index and by order."""
    position = find_position(number, items)
    if position == -1:
        return "The number is not found :-(\n"
    return (
        f"The number found at position: {position}\n"
        f"The number found its order: {position + 1}\n"
    )


def describe_found(number: int, items: Sequence[int]) -> str:
    """Text telling whether ``number`` is found."""
    header = f"\nNumber you are looking for is: {number}\n"
    if contains(number, items):
        return header + "Yes, it is found :-)\n"
    return header + "No, The number is not found :-(\n"


def read_user_numbers(reader: InputReader) -> list[int]:
    """Read numbers from the user until they answer anything but 1."""
    numbers: list[int] = []
    while True:
        reader.stdout.write(ADD_ELEMENT_PROMPT)
        reader.stdout.flush()
        numbers.append(reader.read_int())
        reader.stdout.write(ADD_MORE_PROMPT)
        reader.stdout.flush()
        if reader.read_int() != 1:
            return numbers