"""
Extraction base classes and data structures.

Defines the listing record and the interface for extraction strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ListingRecord:
    """One programme entry from the daily schedule.

    ``time`` is the label exactly as it appears in the markup; it is not
    parsed. ``url`` is only set when the title was rendered as a link.
    """

    time: str
    title: str
    url: str | None = None

    @property
    def has_url(self) -> bool:
        return self.url is not None

    def as_dict(self) -> dict[str, Any]:
        """Plain dict with a ``url`` key only when the record has one."""
        data: dict[str, Any] = {"time": self.time, "title": self.title}
        if self.url is not None:
            data["url"] = self.url
        return data


class Extractor(ABC):
    """Abstract base for schedule extraction strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Extractor identifier."""
        pass

    @abstractmethod
    def extract(self, html: str) -> list[ListingRecord]:
        """Extract listing records from raw HTML.

        Args:
            html: Raw response body

        Returns:
            Records in the order they appear in the markup
        """
        pass
