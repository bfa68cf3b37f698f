"""Exception hierarchy for fuzzy date parsing and construction.

Every failure is a :class:`FuzzyDateError` (a ``ValueError``) carrying a
stable ``code`` and a ``detail`` mapping, so callers that report failures as
data can turn any of them into an :class:`ErrorPayload`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, Field

from fuzzydate.domain.calendar import MAX_YEAR, MIN_YEAR

if TYPE_CHECKING:
    from fuzzydate.domain.fuzzy_date import FuzzyDate


class ErrorPayload(BaseModel):
    """Structured, serializable form of a :class:`FuzzyDateError`."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class FuzzyDateError(ValueError):
    """Base class for every fuzzy date failure."""

    code: ClassVar[str] = "fuzzy_date_error"

    @property
    def detail(self) -> dict[str, Any]:
        return {}

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=str(self), detail=self.detail)


class EmptyInputError(FuzzyDateError):
    """Raised for blank date text."""

    code = "empty_input"

    def __init__(self) -> None:
        super().__init__("Empty date string")


class InvalidFormatError(FuzzyDateError):
    """Raised when text does not fit either date dialect or the range syntax."""

    code = "invalid_format"

    def __init__(self, reason: str, *, prefix: str = "Invalid date format") -> None:
        self.reason = reason
        super().__init__(f"{prefix}: {reason}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"reason": self.reason}


class InvalidYearError(FuzzyDateError):
    code = "invalid_year"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid year: {value!r} (must be {MIN_YEAR}-{MAX_YEAR})")

    @property
    def detail(self) -> dict[str, Any]:
        return {"year": self.value}


class InvalidMonthError(FuzzyDateError):
    code = "invalid_month"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid month: {value!r} (must be 1-12)")

    @property
    def detail(self) -> dict[str, Any]:
        return {"month": self.value}


class InvalidDayError(FuzzyDateError):
    """Raised for a day that is not an integer in ``1..days_in_month(year, month)``.

    ``year`` and ``month`` are None when the day was checked without a
    calendar context.
    """

    code = "invalid_day"

    def __init__(self, year: int | None, month: int | None, day: object) -> None:
        self.year = year
        self.month = month
        self.day = day
        if year is None or month is None:
            msg = f"Invalid day {day!r} (must be at least 1)"
        else:
            msg = f"Invalid day {day!r} for month {year:04d}-{month:02d}"
        super().__init__(msg)

    @property
    def detail(self) -> dict[str, Any]:
        return {"year": self.year, "month": self.month, "day": self.day}


class InvalidRangeError(FuzzyDateError):
    """Raised when a range's start sorts after its end."""

    code = "invalid_range"

    def __init__(self, start: FuzzyDate, end: FuzzyDate) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid date range: start ({start}) is after end ({end})")

    @property
    def detail(self) -> dict[str, Any]:
        return {"start": str(self.start), "end": str(self.end)}
