"""Date handling and fetch sessions for the daily schedule."""

from .query import (
    InvalidArgument,
    ScheduleQuery,
    build_query,
    parse_sdate,
    to_url,
)
from .session import ScheduleSession

__all__ = [
    "InvalidArgument",
    "ScheduleQuery",
    "ScheduleSession",
    "build_query",
    "parse_sdate",
    "to_url",
]
