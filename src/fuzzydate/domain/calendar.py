"""Gregorian calendar arithmetic over explicit integers.

Everything here is a pure function of ``(year, month[, day])``. Callers are
responsible for passing a month in 1..12; the validated wrapper types in
:mod:`fuzzydate.domain.components` guarantee that upstream.
"""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

MIN_YEAR = 1
MAX_YEAR = 9999

JANUARY = 1
FEBRUARY = 2
DECEMBER = 12

MIN_DAY = 1
FEBRUARY_DAYS_LEAP = 29

# Index 0 is unused; February holds its non-leap length.
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class CalendarDate(NamedTuple):
    """A concrete ``(year, month, day)`` triple.

    Tuple comparison gives the lexicographic year/month/day order used by
    every bound computation.
    """

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year*, leap-aware for February."""
    if month == FEBRUARY and is_leap_year(year):
        return FEBRUARY_DAYS_LEAP
    return DAYS_IN_MONTH[month]


def next_month(year: int, month: int) -> tuple[int, int] | None:
    """The month after ``(year, month)``, or None past December of MAX_YEAR."""
    if month == DECEMBER:
        if year >= MAX_YEAR:
            return None
        return year + 1, JANUARY
    return year, month + 1


def next_day(year: int, month: int, day: int) -> CalendarDate | None:
    """The day after ``(year, month, day)``, or None past the last representable day."""
    if day < days_in_month(year, month):
        return CalendarDate(year, month, day + 1)
    following = next_month(year, month)
    if following is None:
        return None
    return CalendarDate(following[0], following[1], MIN_DAY)
