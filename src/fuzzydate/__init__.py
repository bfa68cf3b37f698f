"""Dates known only to year, month, or day precision.

Usage::

    from fuzzydate import FuzzyDate, FuzzyDateRange

    FuzzyDate.parse("08/1991")                       # YearMonth 1991-08
    span = FuzzyDateRange.parse("1990/2025-12-31")
    span.contains(FuzzyDate.parse("1995-06"))        # True
"""

from fuzzydate.domain.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarDate,
    days_in_month,
    is_leap_year,
)
from fuzzydate.domain.components import Day, Month, UncheckedDay, Year
from fuzzydate.domain.fuzzy_date import (
    DateColumns,
    FuzzyDate,
    Precision,
    YearMonth,
    YearMonthDay,
    YearOnly,
)
from fuzzydate.domain.parsing import parse_fuzzy_date, parse_iso_date
from fuzzydate.domain.range import FuzzyDateRange, RangeColumns
from fuzzydate.errors import (
    EmptyInputError,
    ErrorPayload,
    FuzzyDateError,
    InvalidDayError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidRangeError,
    InvalidYearError,
)

__version__ = "0.1.0"

__all__ = [
    # Calendar
    "MAX_YEAR",
    "MIN_YEAR",
    "CalendarDate",
    "days_in_month",
    "is_leap_year",
    # Components
    "Year",
    "Month",
    "Day",
    "UncheckedDay",
    # Dates
    "FuzzyDate",
    "YearOnly",
    "YearMonth",
    "YearMonthDay",
    "Precision",
    "DateColumns",
    "parse_fuzzy_date",
    "parse_iso_date",
    # Ranges
    "FuzzyDateRange",
    "RangeColumns",
    # Errors
    "FuzzyDateError",
    "EmptyInputError",
    "InvalidFormatError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidRangeError",
    "ErrorPayload",
]
