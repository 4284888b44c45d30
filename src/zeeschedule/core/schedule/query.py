"""
Schedule query: the validated date a session fetches listings for.

The year, month and day travel together. Either all three are given or
none is, in which case today's local date is used.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any


YEAR_PATTERN = re.compile(r"^\d{4}$")
MONTH_DAY_PATTERN = re.compile(r"^\d{1,2}$")
SDATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


class InvalidArgument(ValueError):
    """Malformed, out-of-range or partially specified date input."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


@dataclass(frozen=True)
class ScheduleQuery:
    """Immutable request context for one day's schedule."""

    year: int
    month: int
    day: int

    @property
    def sdate(self) -> str:
        """The date as the schedule page expects it: YYYY-MM-DD."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_date(self) -> date:
        """Convert to a ``datetime.date``.

        Raises ValueError for combinations the calendar rejects (e.g. 31 April),
        which the query itself accepts.
        """
        return date(self.year, self.month, self.day)


def _check_field(name: str, value: Any, pattern: re.Pattern[str], low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidArgument(f"Invalid {name} [{value}]", field=name, value=value)

    text = str(value)
    if not pattern.match(text):
        raise InvalidArgument(f"Invalid {name} [{value}]", field=name, value=value)

    number = int(text)
    if not low <= number <= high:
        raise InvalidArgument(f"Invalid {name} [{value}]", field=name, value=value)
    return number


def build_query(
    year: int | str | None = None,
    month: int | str | None = None,
    day: int | str | None = None,
) -> ScheduleQuery:
    """Build a validated schedule query.

    Args:
        year: Four digit year
        month: Month, 1-12
        day: Day of month, 1-31 (not checked against the month)

    Returns:
        ScheduleQuery for the given date, or for today if no field is given

    Raises:
        InvalidArgument: If only some fields are given or a field is out of range
    """
    supplied = {"year": year, "month": month, "day": day}
    missing = [name for name, value in supplied.items() if value is None]

    if len(missing) == 3:
        today = date.today()
        return ScheduleQuery(today.year, today.month, today.day)

    if missing:
        raise InvalidArgument(
            f"year, month and day must be given together (missing: {', '.join(missing)})",
        )

    return ScheduleQuery(
        year=_check_field("year", year, YEAR_PATTERN, 1, 9999),
        month=_check_field("month", month, MONTH_DAY_PATTERN, 1, 12),
        day=_check_field("day", day, MONTH_DAY_PATTERN, 1, 31),
    )


def parse_sdate(text: str) -> ScheduleQuery:
    """Build a query from ``YYYY-MM-DD`` text.

    Raises:
        InvalidArgument: If the text is not in that shape or a field is out of range
    """
    match = SDATE_PATTERN.match(text.strip())
    if not match:
        raise InvalidArgument(f"Invalid date [{text}], expected YYYY-MM-DD", field="date", value=text)
    return build_query(*match.groups())


def to_url(base: str, query: ScheduleQuery) -> str:
    """Format the schedule page URL for a query: ``<base>?sdate=YYYY-MM-DD``."""
    return f"{base}?sdate={query.sdate}"
