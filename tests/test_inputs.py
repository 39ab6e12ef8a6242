import io

import pytest

from bankdesk.dates import Date
from bankdesk.inputs import InputReader, is_date_between, is_number_between


def make_reader(text):
    out = io.StringIO()
    return InputReader(io.StringIO(text), out), out


def test_is_number_between_inclusive():
    assert is_number_between(1, 1, 5)
    assert is_number_between(5, 1, 5)
    assert not is_number_between(6, 1, 5)
    assert is_number_between(2.5, 2.0, 3.0)


def test_is_date_between_either_order():
    start = Date(1, 1, 2022)
    end = Date(31, 12, 2022)
    inside = Date(15, 6, 2022)
    assert is_date_between(inside, start, end)
    assert is_date_between(inside, end, start)
    assert is_date_between(start, start, end)
    assert not is_date_between(Date(1, 1, 2023), start, end)


def test_read_int_simple():
    reader, out = make_reader("42\n")
    assert reader.read_int() == 42
    assert out.getvalue() == ""


def test_read_int_discards_bad_line():
    reader, out = make_reader("abc 5\n7\n")
    assert reader.read_int() == 7
    assert out.getvalue() == "Invalid Number, Enter again\n"


def test_read_int_custom_error():
    reader, out = make_reader("x\n3\n")
    assert reader.read_int("bad\n") == 3
    assert out.getvalue() == "bad\n"


def test_read_int_several_tokens_on_line():
    reader, _ = make_reader("1 2\n3\n")
    assert [reader.read_int() for _ in range(3)] == [1, 2, 3]


def test_read_int_between_retries():
    reader, out = make_reader("9\n0\n3\n")
    assert reader.read_int_between(1, 5) == 3
    assert out.getvalue().count("Number is not within range, Enter again:\n") == 2


def test_read_float():
    reader, _ = make_reader("  2.5\n")
    assert reader.read_float() == 2.5


def test_read_float_between():
    reader, out = make_reader("10.5\n1.5\n")
    assert reader.read_float_between(0.0, 2.0) == 1.5
    assert "Number is not within range" in out.getvalue()


def test_read_positive_int():
    reader, out = make_reader("-1\n0\n4\n")
    assert reader.read_positive_int("Enter a number") == 4
    assert out.getvalue().count("Enter a number\n") == 3


def test_read_positive_int_invalid_token():
    reader, out = make_reader("oops\n8\n")
    assert reader.read_positive_int("Enter") == 8
    assert "please enter a valid number: " in out.getvalue()


def test_read_string_skips_whitespace():
    reader, _ = make_reader("\n   hello world\n")
    assert reader.read_string() == "hello world"


def test_read_string_after_number():
    reader, _ = make_reader("12 rest of line\nnext\n")
    assert reader.read_int() == 12
    assert reader.read_string() == "rest of line"
    assert reader.read_string() == "next"


def test_end_of_input_raises():
    reader, _ = make_reader("")
    with pytest.raises(EOFError):
        reader.read_int()
    with pytest.raises(EOFError):
        reader.read_string()