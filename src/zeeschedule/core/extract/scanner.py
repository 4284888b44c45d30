"""
Line scanner for the ZEE TV schedule page.

The schedule markup is not reliably formatted, so instead of building a
DOM the page is walked line by line, after whitespace normalization,
looking for three patterns:

- ``<span class="time_schedule">8:00 PM</span>`` sets the pending time
- ``<span class="showtitle_schedule">`` announces that a title follows
- the next eligible line is the title, either plain text or an anchor

A title consumes the pending time and clears the expectation, so a time
without a title (or a title without a time) never emits twice.
"""

from __future__ import annotations

import logging
import re

from zeeschedule.core.logging import get_logger
from .base import Extractor, ListingRecord


TIME_PATTERN = re.compile(r'<span class="time_schedule">(.*?)</span>')
TITLE_OPEN_PATTERN = re.compile(r'<span class="showtitle_schedule">')
HEADING_PATTERN = re.compile(r"^<h2>")
ANCHOR_PATTERN = re.compile(r'<a href="(.*?)"\s*>(.*)</a>')

# The non-greedy href capture runs on into the target attribute when one
# is present; everything from here on is dropped.
TARGET_SUFFIX = '" target='

_WHITESPACE = re.compile(r"\s+")


def normalize_line(line: str) -> str:
    """Strip a line and collapse internal whitespace runs to one space."""
    return _WHITESPACE.sub(" ", line.strip())


def clean_href(href: str) -> str:
    """Truncate a captured href at the first ``" target=``."""
    return href.split(TARGET_SUFFIX, 1)[0]


class ListingExtractor(Extractor):
    """Extract listing records with a stateful line scan."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the extractor.

        Args:
            logger: Logger for per-record debug output
                (default: the ``zeeschedule.extract`` logger)
        """
        self.logger = logger or get_logger("extract")

    @property
    def name(self) -> str:
        return "line_scanner"

    def extract(self, html: str) -> list[ListingRecord]:
        records: list[ListingRecord] = []
        pending_time: str | None = None
        title_expected = False

        for raw_line in html.split("\n"):
            line = normalize_line(raw_line)

            time_match = TIME_PATTERN.search(line)
            if time_match:
                pending_time = time_match.group(1)
                continue

            if TITLE_OPEN_PATTERN.search(line):
                title_expected = True
                continue

            if pending_time is None or not title_expected:
                continue

            # Section headings sit between entries; keep waiting for the title
            if HEADING_PATTERN.match(line):
                continue

            anchor = ANCHOR_PATTERN.search(line)
            if anchor:
                record = ListingRecord(
                    time=pending_time,
                    title=anchor.group(2),
                    url=clean_href(anchor.group(1)),
                )
            else:
                record = ListingRecord(time=pending_time, title=line)

            self.logger.debug("Found programme at %s: %s", record.time, record.title)
            records.append(record)

            pending_time = None
            title_expected = False

        self.logger.debug("Scanned %d listing(s)", len(records), extra={"records": len(records)})
        return records


def extract_listings(html: str, logger: logging.Logger | None = None) -> list[ListingRecord]:
    """Shortcut for ``ListingExtractor(logger).extract(html)``."""
    return ListingExtractor(logger).extract(html)
