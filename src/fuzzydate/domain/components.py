"""Validated calendar components.

INVARIANT: an instance of :class:`Year`, :class:`Month` or :class:`Day` is
always calendar-valid. Validation happens once, at construction; code that
receives one of these never re-checks it.

:class:`Day` is checked against a year/month context that it does not keep.
Reusing a ``Day`` with a different year/month is the caller's responsibility.
When no context is available use :class:`UncheckedDay`, which promises only
``value >= 1`` and must be resolved before it can become part of a date.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass

from fuzzydate.domain.calendar import (
    DECEMBER,
    JANUARY,
    MAX_YEAR,
    MIN_DAY,
    MIN_YEAR,
    days_in_month,
)
from fuzzydate.errors import InvalidDayError, InvalidMonthError, InvalidYearError


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a calendar component.
    return isinstance(value, int) and not isinstance(value, bool)


def _check_year(value: object) -> None:
    if not _is_int(value) or not MIN_YEAR <= value <= MAX_YEAR:
        raise InvalidYearError(value)


def _check_month(value: object) -> None:
    if not _is_int(value) or not JANUARY <= value <= DECEMBER:
        raise InvalidMonthError(value)


@dataclass(frozen=True, order=True, slots=True)
class Year:
    """A year in ``1..9999``."""

    value: int

    def __post_init__(self) -> None:
        _check_year(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, slots=True)
class Month:
    """A month in ``1..12``."""

    value: int

    def __post_init__(self) -> None:
        _check_month(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, slots=True)
class Day:
    """A day valid for the ``year``/``month`` it was constructed with.

    Usage::

        Day(29, 2020, 2)   # ok, leap year
        Day(29, 2021, 2)   # InvalidDayError
    """

    value: int
    year: InitVar[int]
    month: InitVar[int]

    def __post_init__(self, year: int, month: int) -> None:
        _check_year(year)
        _check_month(month)
        if not _is_int(self.value) or not MIN_DAY <= self.value <= days_in_month(year, month):
            raise InvalidDayError(year, month, self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, slots=True)
class UncheckedDay:
    """A day number known only to be at least 1.

    Not a :class:`Day`: without a year and month the upper end of the month
    cannot be checked. Call :meth:`resolve` once the context is known.
    """

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value < MIN_DAY:
            raise InvalidDayError(None, None, self.value)

    def resolve(self, year: int, month: int) -> Day:
        """Validate against *year*/*month* and return a real :class:`Day`."""
        return Day(self.value, year, month)

    def __int__(self) -> int:
        return self.value
