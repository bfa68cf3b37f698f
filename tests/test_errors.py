"""Tests for the error hierarchy and structured payloads."""

import pytest
from pydantic import ValidationError

from fuzzydate.domain.fuzzy_date import FuzzyDate
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


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            EmptyInputError(),
            InvalidFormatError("bad"),
            InvalidYearError(0),
            InvalidMonthError(13),
            InvalidDayError(2021, 2, 29),
            InvalidRangeError(FuzzyDate.parse("2000"), FuzzyDate.parse("1990")),
        ],
    )
    def test_all_are_value_errors(self, error: FuzzyDateError) -> None:
        assert isinstance(error, FuzzyDateError)
        assert isinstance(error, ValueError)


class TestMessages:
    def test_empty(self) -> None:
        assert str(EmptyInputError()) == "Empty date string"

    def test_format(self) -> None:
        assert str(InvalidFormatError("x")) == "Invalid date format: x"
        assert str(InvalidFormatError("x", prefix="Invalid range format")) == (
            "Invalid range format: x"
        )

    def test_year(self) -> None:
        assert str(InvalidYearError(10000)) == "Invalid year: 10000 (must be 1-9999)"

    def test_month(self) -> None:
        assert str(InvalidMonthError(13)) == "Invalid month: 13 (must be 1-12)"

    def test_day(self) -> None:
        assert str(InvalidDayError(2021, 2, 29)) == "Invalid day 29 for month 2021-02"
        assert str(InvalidDayError(None, None, 0)) == "Invalid day 0 (must be at least 1)"

    def test_range(self) -> None:
        err = InvalidRangeError(FuzzyDate.parse("2000"), FuzzyDate.parse("1990-06"))
        assert str(err) == "Invalid date range: start (2000) is after end (1990-06)"


class TestPayload:
    def test_day_payload(self) -> None:
        payload = InvalidDayError(2021, 2, 29).to_payload()
        assert payload == ErrorPayload(
            code="invalid_day",
            message="Invalid day 29 for month 2021-02",
            detail={"year": 2021, "month": 2, "day": 29},
        )

    def test_range_payload_uses_canonical_text(self) -> None:
        err = InvalidRangeError(FuzzyDate.parse("2000"), FuzzyDate.parse("06/1990"))
        payload = err.to_payload()
        assert payload.code == "invalid_range"
        assert payload.detail == {"start": "2000", "end": "1990-06"}

    def test_empty_payload_has_no_detail(self) -> None:
        assert EmptyInputError().to_payload().detail == {}

    def test_payload_from_parse_failure(self) -> None:
        with pytest.raises(FuzzyDateError) as exc_info:
            FuzzyDate.parse("1991-13")
        payload = exc_info.value.to_payload()
        assert payload.code == "invalid_month"
        assert payload.detail == {"month": 13}

    def test_payload_serializes(self) -> None:
        payload = InvalidFormatError("'199A'").to_payload()
        assert payload.model_dump() == {
            "code": "invalid_format",
            "message": "Invalid date format: '199A'",
            "detail": {"reason": "'199A'"},
        }

    def test_payload_frozen(self) -> None:
        payload = InvalidYearError(0).to_payload()
        with pytest.raises(ValidationError):
            payload.code = "other"  # type: ignore[misc]
