"""Text grammar for fuzzy dates.

Two input dialects, chosen by which delimiter the trimmed text contains:

- ISO (``-``), year first: ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``
- Month-first (``/``): ``MM/YYYY``, ``MM/DD/YYYY``

Text with no delimiter is a bare year. The two delimiters never mix in one
string. Output is always the ISO dialect (``str()`` on any fuzzy date); the
month-first dialect is input-only.

Every component is integer-parsed before any is range-checked, so a
non-numeric part always reports :class:`InvalidFormatError`. Range checks
then run year, month, day, and the first failure wins.
"""

from __future__ import annotations

import logging
import re

from fuzzydate.domain.fuzzy_date import FuzzyDate
from fuzzydate.errors import EmptyInputError, FuzzyDateError, InvalidFormatError

logger = logging.getLogger(__name__)

ISO_SEPARATOR = "-"
MONTH_FIRST_SEPARATOR = "/"

_UNSIGNED_INT = re.compile(r"[0-9]+")


def _to_int(part: str) -> int:
    if not _UNSIGNED_INT.fullmatch(part):
        raise InvalidFormatError(repr(part))
    return int(part)


def _split(text: str, separator: str) -> list[str]:
    return [part.strip() for part in text.split(separator)]


def _parse_iso(text: str) -> FuzzyDate:
    parts = _split(text, ISO_SEPARATOR)
    if len(parts) > 3:
        msg = f"Too many {ISO_SEPARATOR!r} separators: expected 0-2, found {len(parts) - 1}"
        raise InvalidFormatError(msg)
    numbers = [_to_int(part) for part in parts]
    return FuzzyDate.from_columns(*numbers)


def _parse_month_first(text: str) -> FuzzyDate:
    parts = _split(text, MONTH_FIRST_SEPARATOR)
    if len(parts) > 3:
        msg = (
            f"Too many {MONTH_FIRST_SEPARATOR!r} separators: "
            f"expected 1-2, found {len(parts) - 1}"
        )
        raise InvalidFormatError(msg)
    numbers = [_to_int(part) for part in parts]
    if len(numbers) == 2:
        month, year = numbers
        return FuzzyDate.from_columns(year, month)
    month, day, year = numbers
    return FuzzyDate.from_columns(year, month, day)


def _parse(text: str, *, month_first: bool) -> FuzzyDate:
    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError()

    has_iso = ISO_SEPARATOR in trimmed
    has_month_first = MONTH_FIRST_SEPARATOR in trimmed
    if has_iso and has_month_first:
        msg = f"Mixed delimiters ({ISO_SEPARATOR} and {MONTH_FIRST_SEPARATOR})"
        raise InvalidFormatError(msg)
    if has_month_first:
        if not month_first:
            msg = f"Month-first {MONTH_FIRST_SEPARATOR!r} dates are not accepted here"
            raise InvalidFormatError(msg)
        return _parse_month_first(trimmed)
    return _parse_iso(trimmed)


def parse_fuzzy_date(text: str) -> FuzzyDate:
    """Parse a fuzzy date in either the ISO or the month-first dialect.

    Raises:
        EmptyInputError: *text* is blank.
        InvalidFormatError: mixed delimiters, wrong part count, or a
            non-numeric component.
        InvalidYearError, InvalidMonthError, InvalidDayError: a component is
            out of range for the calendar.

    Examples:
        >>> str(parse_fuzzy_date("08/15/1991"))
        '1991-08-15'
        >>> str(parse_fuzzy_date(" 1991 - 8 "))
        '1991-08'
    """
    try:
        return _parse(text, month_first=True)
    except FuzzyDateError as exc:
        logger.debug("Rejected date %r: %s", text, exc)
        raise


def parse_iso_date(text: str) -> FuzzyDate:
    """Parse the ISO dialect only; a ``/`` in *text* is an :class:`InvalidFormatError`."""
    try:
        return _parse(text, month_first=False)
    except FuzzyDateError as exc:
        logger.debug("Rejected ISO date %r: %s", text, exc)
        raise
