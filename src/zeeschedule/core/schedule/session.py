"""
Schedule session: one date, one fetch, many renderings.

A session validates its date up front, fetches the schedule page on the
first request for listings, and keeps the records so XML and text
output never trigger a second request.
"""

from __future__ import annotations

import logging
from typing import Any

from zeeschedule.core.backends import Backend, HttpBackend, RequestSpec
from zeeschedule.core.config import DEFAULT_BASE_URL
from zeeschedule.core.extract import Extractor, ListingExtractor, ListingRecord
from zeeschedule.core.logging import get_logger
from zeeschedule.core.output import to_text, to_xml
from .query import ScheduleQuery, build_query, to_url


class ScheduleSession:
    """Programme listings for a single day.

    Usage:
        with ScheduleSession(2011, 4, 25) as session:
            print(session.as_xml())
    """

    def __init__(
        self,
        year: int | str | None = None,
        month: int | str | None = None,
        day: int | str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        backend: Backend | None = None,
        extractor: Extractor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a session.

        Args:
            year: Four digit year (all of year/month/day, or none for today)
            month: Month, 1-12
            day: Day of month, 1-31
            base_url: Schedule page URL
            backend: Fetch backend (default: a new HttpBackend owned by the session)
            extractor: Listing extractor (default: ListingExtractor)
            logger: Logger for fetch and extraction messages

        Raises:
            InvalidArgument: If the date is partial or out of range
        """
        self.query: ScheduleQuery = build_query(year, month, day)
        self.base_url = base_url
        self.logger = logger or get_logger("schedule")

        self._owns_backend = backend is None
        self.backend = backend or HttpBackend()
        self.extractor = extractor or ListingExtractor(logger=logger)

        self._listings: list[ListingRecord] | None = None

    @classmethod
    def from_query(cls, query: ScheduleQuery, **kwargs: Any) -> "ScheduleSession":
        """Create a session for an already validated query."""
        return cls(query.year, query.month, query.day, **kwargs)

    @property
    def url(self) -> str:
        return to_url(self.base_url, self.query)

    def get_listings(self) -> list[ListingRecord]:
        """Fetch and scan the schedule page.

        Always performs a request; the result replaces the stored listings.

        Raises:
            FetchFailed: If the page could not be fetched
        """
        url = self.url
        context = {"url": url, "sdate": self.query.sdate}

        self.logger.info("Fetch programmes listing using URL [%s] ...", url, extra=context)
        result = self.backend.fetch(RequestSpec(url=url))
        self.logger.debug(
            "Fetched %d bytes in %.0f ms (HTTP %d)",
            result.content_length,
            result.elapsed_ms,
            result.status_code,
            extra={**context, "status_code": result.status_code},
        )

        listings = self.extractor.extract(result.html)
        if not listings:
            self.logger.warning("No programmes found for %s", self.query.sdate, extra=context)
        else:
            self.logger.info(
                "Found %d programme(s)", len(listings),
                extra={**context, "records": len(listings)},
            )

        self._listings = listings
        return listings

    @property
    def listings(self) -> list[ListingRecord]:
        """Listings for the session's date, fetched once."""
        if self._listings is None:
            self.get_listings()
        return self._listings

    def as_xml(self, escape: bool = False) -> str:
        """Listings as an XML document."""
        return to_xml(self.listings, escape=escape)

    def as_text(self) -> str:
        """Listings as a human-readable report."""
        return to_text(self.listings)

    def close(self) -> None:
        """Close the backend if the session created it."""
        if self._owns_backend:
            self.backend.close()

    def __enter__(self) -> "ScheduleSession":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ScheduleSession(sdate={self.query.sdate!r}, base_url={self.base_url!r})"
