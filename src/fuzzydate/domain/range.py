"""Ranges between two fuzzy dates.

INVARIANT: ``start <= end`` under the fuzzy date order. Equal endpoints are
allowed, and the endpoints may have different precisions.

Queries never compare the endpoint variants directly. They compare concrete
bounds: the range covers every day from ``start.lower_bound()`` through
``end.upper_bound_inclusive()``, and a date covers its own lower through
inclusive upper bound. This is what makes ``1990/1990`` contain
``1990-06-15``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, NamedTuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from fuzzydate.domain.calendar import CalendarDate
from fuzzydate.domain.fuzzy_date import FuzzyDate
from fuzzydate.domain.parsing import parse_iso_date
from fuzzydate.errors import InvalidFormatError, InvalidRangeError

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = "/"


def _split_range(text: str) -> tuple[str, str]:
    trimmed = text.strip()
    count = trimmed.count(RANGE_SEPARATOR)
    if count == 0:
        msg = f"No range separator found (expected {RANGE_SEPARATOR!r}): {text!r}"
        raise InvalidFormatError(msg, prefix="Invalid range format")
    if count > 1:
        msg = f"Too many {RANGE_SEPARATOR!r} separators: expected 1, found {count}"
        raise InvalidFormatError(msg, prefix="Invalid range format")
    start_text, end_text = trimmed.split(RANGE_SEPARATOR)
    return start_text, end_text


class RangeColumns(NamedTuple):
    """Columnar form of a range: the start triple followed by the end triple."""

    start_year: int
    start_month: int | None
    start_day: int | None
    end_year: int
    end_month: int | None
    end_day: int | None


@dataclass(frozen=True, slots=True)
class FuzzyDateRange:
    """An inclusive span from ``start`` to ``end``.

    Ordered by ``(start, end)``; renders as ``{start}/{end}``.
    """

    start: FuzzyDate
    end: FuzzyDate

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    # --- Bounds ---

    def dates(self) -> tuple[FuzzyDate, FuzzyDate]:
        return self.start, self.end

    def lower_bound(self) -> CalendarDate:
        return self.start.lower_bound()

    def upper_bound_inclusive(self) -> CalendarDate:
        return self.end.upper_bound_inclusive()

    def upper_bound_exclusive(self) -> CalendarDate | None:
        return self.end.upper_bound_exclusive()

    # --- Queries ---

    def contains(self, date: FuzzyDate) -> bool:
        """Whether every day *date* may denote lies inside this range."""
        return (
            self.lower_bound() <= date.lower_bound()
            and date.upper_bound_inclusive() <= self.upper_bound_inclusive()
        )

    def __contains__(self, date: object) -> bool:
        return isinstance(date, FuzzyDate) and self.contains(date)

    def overlaps(self, other: FuzzyDateRange) -> bool:
        """Whether the two ranges share at least one concrete day."""
        return (
            self.lower_bound() <= other.upper_bound_inclusive()
            and other.lower_bound() <= self.upper_bound_inclusive()
        )

    def is_within(self, other: FuzzyDateRange) -> bool:
        """Whether this range lies entirely inside *other*."""
        return (
            other.lower_bound() <= self.lower_bound()
            and self.upper_bound_inclusive() <= other.upper_bound_inclusive()
        )

    # --- Ordering ---

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self.dates() < other.dates()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self.dates() <= other.dates()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self.dates() > other.dates()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self.dates() >= other.dates()

    # --- Text and columns ---

    def __str__(self) -> str:
        return f"{self.start}{RANGE_SEPARATOR}{self.end}"

    @classmethod
    def parse(cls, text: str) -> FuzzyDateRange:
        """Parse ``<iso-date>/<iso-date>``.

        Each side uses the ISO dialect only. Zero or several separators
        raise :class:`InvalidFormatError`; endpoint errors propagate as-is.
        """
        try:
            start_text, end_text = _split_range(text)
        except InvalidFormatError as exc:
            logger.debug("Rejected range %r: %s", text, exc)
            raise

        # Endpoint failures are logged by parse_iso_date.
        start, end = parse_iso_date(start_text), parse_iso_date(end_text)
        try:
            return cls(start, end)
        except InvalidRangeError as exc:
            logger.debug("Rejected range %r: %s", text, exc)
            raise

    def to_columns(self) -> RangeColumns:
        return RangeColumns(*self.start.to_columns(), *self.end.to_columns())

    @classmethod
    def from_columns(
        cls,
        start_year: int,
        start_month: int | None,
        start_day: int | None,
        end_year: int,
        end_month: int | None,
        end_day: int | None,
    ) -> FuzzyDateRange:
        """Rebuild a range from six columns, re-validating both endpoints and their order."""
        start = FuzzyDate.from_columns(start_year, start_month, start_day)
        end = FuzzyDate.from_columns(end_year, end_month, end_day)
        return cls(start, end)

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        text_schema = core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=text_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), text_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
