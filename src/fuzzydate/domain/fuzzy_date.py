"""Tri-precision fuzzy dates.

A :class:`FuzzyDate` is exactly one of three variants:

- :class:`YearOnly` — "sometime in 1991"
- :class:`YearMonth` — "August 1991"
- :class:`YearMonthDay` — "1991-08-15"

The variant set is closed. Every per-precision behaviour (bounds, columns,
canonical text) is an abstract method on the base class, so a new variant
that forgets one cannot be instantiated.

Ordering is total across precisions: values compare by their earliest
concrete day first, and ties (``1991`` vs ``1991-01`` vs ``1991-01-01``)
are broken by precision, less precise first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Any, NamedTuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from fuzzydate.domain.calendar import (
    DECEMBER,
    JANUARY,
    MAX_YEAR,
    MIN_DAY,
    CalendarDate,
    days_in_month,
    next_day,
    next_month,
)
from fuzzydate.domain.components import Day, Month, Year
from fuzzydate.errors import InvalidFormatError


class Precision(IntEnum):
    """Precision rank, used as the ordering tie-break."""

    YEAR = 0
    MONTH = 1
    DAY = 2


class DateColumns(NamedTuple):
    """Columnar form of a fuzzy date. ``day`` is set only when ``month`` is."""

    year: int
    month: int | None = None
    day: int | None = None


class FuzzyDate(ABC):
    """Base class for the three fuzzy date variants.

    Every variant exposes ``year``, ``month`` and ``day``; a component the
    variant does not carry reads as None. :meth:`to_columns` gives the same
    three as plain integers.
    """

    __slots__ = ()

    year: Year
    month: Month | None
    day: Day | None

    # --- Per-variant behaviour ---

    @property
    @abstractmethod
    def precision(self) -> Precision: ...

    @abstractmethod
    def lower_bound(self) -> CalendarDate:
        """Earliest concrete day this value may denote."""

    @abstractmethod
    def upper_bound_inclusive(self) -> CalendarDate:
        """Latest concrete day this value may denote."""

    @abstractmethod
    def upper_bound_exclusive(self) -> CalendarDate | None:
        """Day right after :meth:`upper_bound_inclusive`, or None past year 9999."""

    @abstractmethod
    def to_columns(self) -> DateColumns: ...

    @abstractmethod
    def __str__(self) -> str:
        """Canonical ISO text: ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``."""

    # --- Ordering ---

    def _sort_key(self) -> tuple[CalendarDate, Precision]:
        return self.lower_bound(), self.precision

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    # --- Construction helpers ---

    @staticmethod
    def parse(text: str) -> FuzzyDate:
        """Parse either date dialect. See :func:`fuzzydate.domain.parsing.parse_fuzzy_date`."""
        from fuzzydate.domain.parsing import parse_fuzzy_date

        return parse_fuzzy_date(text)

    @staticmethod
    def from_columns(year: int, month: int | None = None, day: int | None = None) -> FuzzyDate:
        """Rebuild a date from its columns, re-applying full validation.

        Components are validated year, then month, then day.
        """
        if month is None:
            if day is not None:
                msg = f"Cannot have day {day} without month"
                raise InvalidFormatError(msg)
            return YearOnly(Year(year))
        if day is None:
            return YearMonth(Year(year), Month(month))
        return YearMonthDay(Year(year), Month(month), Day(day, year, month))

    @staticmethod
    def from_date(value: date) -> YearMonthDay:
        """Exact :class:`datetime.date` to a day-precision fuzzy date."""
        return YearMonthDay(
            Year(value.year),
            Month(value.month),
            Day(value.day, value.year, value.month),
        )

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from canonical text (or an instance); serialize back to text."""

        def from_text(value: str) -> FuzzyDate:
            parsed = FuzzyDate.parse(value)
            if not isinstance(parsed, cls):
                msg = f"Expected {cls.__name__}, got {type(parsed).__name__} from {value!r}"
                raise ValueError(msg)
            return parsed

        text_schema = core_schema.no_info_after_validator_function(
            from_text, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=text_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), text_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


@dataclass(frozen=True, slots=True)
class YearOnly(FuzzyDate):
    """A date known only to the year."""

    year: Year

    @property
    def month(self) -> None:  # type: ignore[override]
        return None

    @property
    def day(self) -> None:  # type: ignore[override]
        return None

    @property
    def precision(self) -> Precision:
        return Precision.YEAR

    def lower_bound(self) -> CalendarDate:
        return CalendarDate(self.year.value, JANUARY, MIN_DAY)

    def upper_bound_inclusive(self) -> CalendarDate:
        y = self.year.value
        return CalendarDate(y, DECEMBER, days_in_month(y, DECEMBER))

    def upper_bound_exclusive(self) -> CalendarDate | None:
        y = self.year.value
        if y >= MAX_YEAR:
            return None
        return CalendarDate(y + 1, JANUARY, MIN_DAY)

    def to_columns(self) -> DateColumns:
        return DateColumns(self.year.value)

    def __str__(self) -> str:
        return f"{self.year.value:04d}"


@dataclass(frozen=True, slots=True)
class YearMonth(FuzzyDate):
    """A date known to the month."""

    year: Year
    month: Month

    @property
    def day(self) -> None:  # type: ignore[override]
        return None

    @property
    def precision(self) -> Precision:
        return Precision.MONTH

    def lower_bound(self) -> CalendarDate:
        return CalendarDate(self.year.value, self.month.value, MIN_DAY)

    def upper_bound_inclusive(self) -> CalendarDate:
        y, m = self.year.value, self.month.value
        return CalendarDate(y, m, days_in_month(y, m))

    def upper_bound_exclusive(self) -> CalendarDate | None:
        following = next_month(self.year.value, self.month.value)
        if following is None:
            return None
        return CalendarDate(following[0], following[1], MIN_DAY)

    def to_columns(self) -> DateColumns:
        return DateColumns(self.year.value, self.month.value)

    def __str__(self) -> str:
        return f"{self.year.value:04d}-{self.month.value:02d}"


@dataclass(frozen=True, slots=True)
class YearMonthDay(FuzzyDate):
    """A fully known calendar day."""

    year: Year
    month: Month
    day: Day

    @property
    def precision(self) -> Precision:
        return Precision.DAY

    def lower_bound(self) -> CalendarDate:
        return CalendarDate(self.year.value, self.month.value, self.day.value)

    def upper_bound_inclusive(self) -> CalendarDate:
        return self.lower_bound()

    def upper_bound_exclusive(self) -> CalendarDate | None:
        return next_day(self.year.value, self.month.value, self.day.value)

    def to_columns(self) -> DateColumns:
        return DateColumns(self.year.value, self.month.value, self.day.value)

    def to_date(self) -> date:
        return self.lower_bound().to_date()

    def __str__(self) -> str:
        return f"{self.year.value:04d}-{self.month.value:02d}-{self.day.value:02d}"
