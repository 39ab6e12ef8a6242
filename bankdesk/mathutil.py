"""Small number helpers: primes, perfect numbers, digit reversal and rounding."""

from __future__ import annotations

import math


def is_prime(number: int) -> bool:
    """Whether no divisor from 2 up to half the number divides it."""
    return not any(number % divisor == 0 for divisor in range(2, number // 2 + 1))


def is_perfect_number(number: int) -> bool:
    """Whether the number equals the sum of its proper divisors."""
    return number == sum(i for i in range(1, number) if number % i == 0)


def reverse_number(number: int) -> int:
    """Reverse the decimal digits of a positive number; 0 for the rest."""
    reversed_value = 0
    while number > 0:
        number, digit = divmod(number, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome_number(number: int) -> bool:
    """Whether the number reads the same reversed."""
    return number == reverse_number(number)


def my_abs(number: float) -> float:
    """Absolute value."""
    return number if number > 0 else -number


def fraction_part(number: float) -> float:
    """The part after the decimal point, with the number's sign."""
    return number - int(number)


def my_round(number: float) -> int:
    """Round half away from zero for positives; negatives are truncated."""
    whole = int(number)
    if fraction_part(number) >= 0.5:
        return whole + 1 if number > 0 else whole - 1
    return whole


def my_floor(number: float) -> int:
    """Truncate positives; step one below the truncated value otherwise."""
    return int(number) if number > 0 else int(number) - 1


def my_ceil(number: float) -> int:
    """Round up for positive fractions; truncate everything else."""
    if my_abs(fraction_part(number)) > 0 and number > 0:
        return int(number) + 1
    return int(number)


def my_sqrt(number: float) -> int:
    """Integer part of the square root; negative input raises ValueError."""
    return int(math.sqrt(number))