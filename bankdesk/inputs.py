"""Range checks and a console reader that retries on invalid input."""

from __future__ import annotations

import sys
from typing import Callable, TextIO, TypeVar

from bankdesk.dates import Date

_T = TypeVar("_T")

INVALID_NUMBER = "Invalid Number, Enter again\n"
OUT_OF_RANGE = "Number is not within range, Enter again:\n"
INVALID_POSITIVE = "please enter a valid number: "


def is_number_between(number: float, low: float, high: float) -> bool:
    """Whether ``low <= number <= high``."""
    return low <= number <= high


def is_date_between(date: Date, start: Date, end: Date) -> bool:
    """Whether the date lies between the two bounds, in either order, inclusive."""
    return start <= date <= end or end <= date <= start


class InputReader:
    """Reads whitespace-separated numbers and whole lines from a text stream."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._rest = ""

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _fill(self) -> None:
        """Make sure the buffer holds some non-whitespace text."""
        while not self._rest.strip():
            line = self.stdin.readline()
            if not line:
                raise EOFError("input ended")
            self._rest = line

    def _next_token(self) -> str:
        self._fill()
        stripped = self._rest.lstrip()
        parts = stripped.split(None, 1)
        token = parts[0]
        self._rest = stripped[len(token):]
        return token

    def _read_parsed(self, parse: Callable[[str], _T], error_message: str) -> _T:
        while True:
            token = self._next_token()
            try:
                return parse(token)
            except ValueError:
                self._rest = ""
                self._write(error_message)

    def read_int(self, error_message: str = INVALID_NUMBER) -> int:
        """Read an integer, discarding the rest of the line after a bad entry."""
        return self._read_parsed(int, error_message)

    def read_int_between(
        self, low: int, high: int, error_message: str = OUT_OF_RANGE
    ) -> int:
        """Read integers until one lies in ``low..high``."""
        number = self.read_int()
        while not is_number_between(number, low, high):
            self._write(error_message)
            number = self.read_int()
        return number

    def read_float(self, error_message: str = INVALID_NUMBER) -> float:
        """Read a number, discarding the rest of the line after a bad entry."""
        return self._read_parsed(float, error_message)

    def read_float_between(
        self, low: float, high: float, error_message: str = OUT_OF_RANGE
    ) -> float:
        """Read numbers until one lies in ``low..high``."""
        number = self.read_float()
        while not is_number_between(number, low, high):
            self._write(error_message)
            number = self.read_float()
        return number

    def read_positive_int(self, message: str) -> int:
        """Prompt with ``message`` until a positive integer is entered."""
        while True:
            self._write(message + "\n")
            number = self.read_int(INVALID_POSITIVE)
            if number > 0:
                return number

    def read_string(self) -> str:
        """Skip leading whitespace, then read the rest of the line."""
        self._fill()
        text = self._rest.lstrip()
        self._rest = ""
        return text.rstrip("\r\n")