"""Calendar arithmetic on day/month/year dates."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import IntEnum
from functools import total_ordering

from bankdesk.textutil import split

_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_RULE = "  _________________________________"


class DateCompare(IntEnum):
    """Result of comparing two dates."""

    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Day count of a year as the ledger counts it: 365 for leap years, else 364."""
    return 365 if is_leap_year(year) else 364


def hours_in_year(year: int) -> int:
    """Hours in the year, from :func:`days_in_year`."""
    return days_in_year(year) * 24


def minutes_in_year(year: int) -> int:
    """Minutes in the year."""
    return hours_in_year(year) * 60


def seconds_in_year(year: int) -> int:
    """Seconds in the year."""
    return minutes_in_year(year) * 60


def days_in_month(month: int, year: int) -> int:
    """Days in the month; 0 when the month is outside 1..12."""
    if not 1 <= month <= 12:
        return 0
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _MONTH_DAYS[month - 1]


def hours_in_month(month: int, year: int) -> int:
    """Hours in the month."""
    return days_in_month(month, year) * 24


def minutes_in_month(month: int, year: int) -> int:
    """Minutes in the month."""
    return hours_in_month(month, year) * 60


def seconds_in_month(month: int, year: int) -> int:
    """Seconds in the month."""
    return minutes_in_month(month, year) * 60


def day_of_week_order(day: int, month: int, year: int) -> int:
    """Weekday index of a date, 0 for Sunday through 6 for Saturday."""
    a = (14 - month) // 12
    y = year - a
    m = month + 12 * a - 2
    return (day + y + y // 4 - y // 100 + y // 400 + (31 * m) // 12) % 7


def day_short_name(order: int) -> str:
    """Three-letter name of the weekday index."""
    if not 0 <= order < len(_DAY_NAMES):
        raise ValueError(f"weekday index out of range: {order}")
    return _DAY_NAMES[order]


def month_short_name(month: int) -> str:
    """Three-letter name of the month number."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return _MONTH_NAMES[month - 1]


def month_calendar(month: int, year: int) -> str:
    """A printable calendar grid for one month."""
    first = day_of_week_order(1, month, year)
    parts = [
        f"\n  _______________{month_short_name(month)}_______________\n\n",
        "  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n",
        "     " * first,
    ]
    column = first
    for day in range(1, days_in_month(month, year) + 1):
        parts.append(f"{day:5d}")
        column += 1
        if column == 7:
            column = 0
            parts.append("\n")
    parts.append(f"\n{_RULE}\n")
    return "".join(parts)


def year_calendar(year: int) -> str:
    """A printable calendar of all twelve months of a year."""
    header = f"\n{_RULE}\n\n           Calendar - {year}\n{_RULE}\n"
    return header + "".join(month_calendar(month, year) for month in range(1, 13))


def system_date() -> Date:
    """Today's local date."""
    now = time.localtime()
    return Date(now.tm_mday, now.tm_mon, now.tm_year)


def system_datetime_string() -> str:
    """Local date and time as ``d/m/yyyy - h:m:s`` without zero padding."""
    now = time.localtime()
    return (
        f"{now.tm_mday}/{now.tm_mon}/{now.tm_year} - "
        f"{now.tm_hour}:{now.tm_min}:{now.tm_sec}"
    )


def parse_date(text: str) -> Date:
    """Parse a ``d/m/yyyy`` string."""
    parts = split(text, "/")
    if len(parts) < 3:
        raise ValueError(f"not a d/m/y date: {text!r}")
    try:
        day, month, year = (int(part) for part in parts[:3])
    except ValueError as error:
        raise ValueError(f"not a d/m/y date: {text!r}") from error
    return Date(day, month, year)


def date_from_day_order(order: int, year: int) -> Date:
    """The date that is the ``order``-th day of the year (1-based)."""
    month = 1
    remaining = order
    while remaining > (month_days := days_in_month(month, year)):
        remaining -= month_days
        month += 1
        if month > 12:
            raise ValueError(f"day {order} is beyond the end of {year}")
    return Date(remaining, month, year)


def is_before(first: Date, second: Date) -> bool:
    """Whether ``first`` comes before ``second``."""
    return first < second


def is_equal(first: Date, second: Date) -> bool:
    """Whether both dates are the same day."""
    return first == second


def is_after(first: Date, second: Date) -> bool:
    """Whether ``first`` comes after ``second``."""
    return first > second


def compare_dates(first: Date, second: Date) -> DateCompare:
    """Order of ``first`` relative to ``second``."""
    if first < second:
        return DateCompare.BEFORE
    if first == second:
        return DateCompare.EQUAL
    return DateCompare.AFTER


def difference_in_days(first: Date, second: Date, include_end_day: bool = False) -> int:
    """Days from ``first`` to ``second``; negative when ``first`` is not earlier.

    With ``include_end_day`` the count grows by one day in the direction of the sign,
    so equal dates give -1.
    """
    sign = 1
    if not first < second:
        first, second = second, first
        sign = -1
    days = 0
    while first < second:
        days += 1
        first = first.add_one_day()
    if include_end_day:
        days += 1
    return days * sign


def business_days(start: Date, end: Date) -> int:
    """Business days from ``start`` up to, but not including, ``end``."""
    days = 0
    while start < end:
        if start.is_business_day():
            days += 1
        start = start.add_one_day()
    return days


def vacation_return_date(start: Date, vacation_days: int) -> Date:
    """Return date after a vacation, pushed back by the weekend days it spans."""
    weekend_days = 0
    current = start
    for _ in range(vacation_days):
        if current.is_weekend():
            weekend_days += 1
        current = current.add_one_day()
    for _ in range(weekend_days):
        current = current.add_one_day()
    return current


@total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar date; arithmetic returns new dates."""

    day: int
    month: int
    year: int

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return self.to_string()

    def is_valid(self) -> bool:
        """Whether the day and month exist in that year."""
        if not 1 <= self.day <= 31 or not 1 <= self.month <= 12:
            return False
        return self.day <= days_in_month(self.month, self.year)

    def to_string(self) -> str:
        """The date as ``d/m/yyyy``."""
        return f"{self.day}/{self.month}/{self.year}"

    def day_of_week_order(self) -> int:
        """Weekday index, 0 for Sunday."""
        return day_of_week_order(self.day, self.month, self.year)

    def day_short_name(self) -> str:
        """Three-letter weekday name."""
        return day_short_name(self.day_of_week_order())

    def month_short_name(self) -> str:
        """Three-letter month name."""
        return month_short_name(self.month)

    def days_from_beginning_of_year(self) -> int:
        """1-based position of the day within its year."""
        before = sum(days_in_month(month, self.year) for month in range(1, self.month))
        return before + self.day

    def is_last_day_in_month(self) -> bool:
        """Whether this is the month's last day."""
        return self.day == days_in_month(self.month, self.year)

    def add_one_day(self) -> Date:
        """The following day."""
        if self.is_last_day_in_month():
            if self.month == 12:
                return Date(1, 1, self.year + 1)
            return Date(1, self.month + 1, self.year)
        return replace(self, day=self.day + 1)

    def add_days(self, days: int) -> Date:
        """The date ``days`` days later."""
        remaining = days + self.days_from_beginning_of_year()
        month, year = 1, self.year
        while remaining > (month_days := days_in_month(month, year)):
            remaining -= month_days
            month += 1
            if month > 12:
                month = 1
                year += 1
        return Date(remaining, month, year)

    def add_weeks(self, weeks: int) -> Date:
        """The date ``weeks`` weeks later."""
        current = self
        for _ in range(7 * weeks):
            current = current.add_one_day()
        return current

    def _add_one_month(self) -> Date:
        month, year = (1, self.year + 1) if self.month == 12 else (self.month + 1, self.year)
        return Date(min(self.day, days_in_month(month, year)), month, year)

    def add_months(self, months: int) -> Date:
        """Step forward month by month, clamping the day to each month's length."""
        current = self
        for _ in range(months):
            current = current._add_one_month()
        return current

    def add_years(self, years: int) -> Date:
        """Same day and month, ``years`` later."""
        return replace(self, year=self.year + years)

    def subtract_one_day(self) -> Date:
        """The previous day."""
        if self.day == 1:
            if self.month == 1:
                return Date(31, 12, self.year - 1)
            month = self.month - 1
            return Date(days_in_month(month, self.year), month, self.year)
        return replace(self, day=self.day - 1)

    def subtract_days(self, days: int) -> Date:
        """The date ``days`` days earlier."""
        current = self
        for _ in range(days):
            current = current.subtract_one_day()
        return current

    def subtract_weeks(self, weeks: int) -> Date:
        """The date ``weeks`` weeks earlier."""
        return self.subtract_days(7 * weeks)

    def _subtract_one_month(self) -> Date:
        month, year = (12, self.year - 1) if self.month == 1 else (self.month - 1, self.year)
        return Date(min(self.day, days_in_month(month, year)), month, year)

    def subtract_months(self, months: int) -> Date:
        """Step back month by month, clamping the day to each month's length."""
        current = self
        for _ in range(months):
            current = current._subtract_one_month()
        return current

    def subtract_years(self, years: int) -> Date:
        """Same day and month, ``years`` earlier."""
        return replace(self, year=self.year - years)

    def is_end_of_week(self) -> bool:
        """Whether the date is a Saturday."""
        return self.day_of_week_order() == 6

    def is_weekend(self) -> bool:
        """Whether the date is a Friday or Saturday."""
        return self.day_of_week_order() in (5, 6)

    def is_business_day(self) -> bool:
        """Whether the date is not a weekend day."""
        return not self.is_weekend()

    def days_until_end_of_week(self) -> int:
        """Days left until Saturday."""
        return 6 - self.day_of_week_order()

    def days_until_end_of_month(self) -> int:
        """Days to the month's last day, counting that day."""
        end = Date(days_in_month(self.month, self.year), self.month, self.year)
        return difference_in_days(self, end, True)

    def days_until_end_of_year(self) -> int:
        """Days to 31 December, counting that day."""
        return difference_in_days(self, Date(31, 12, self.year), True)