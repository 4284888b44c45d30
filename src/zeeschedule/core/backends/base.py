"""
Backend base classes and data structures.

Defines the interface contract for fetching schedule pages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class RequestSpec:
    """Specification for an HTTP GET request."""

    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None  # None: backend default
    follow_redirects: bool = True


@dataclass
class FetchResult:
    """Result of a fetch operation."""

    url: str
    final_url: str  # After redirects
    status_code: int
    html: str
    headers: dict[str, str]

    elapsed_ms: float
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def content_length(self) -> int:
        """Get content length in bytes."""
        return len(self.html.encode("utf-8"))


class Backend(ABC):
    """Abstract base class for fetch backends.

    A backend performs one blocking request per call and never retries.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier."""
        pass

    @abstractmethod
    def fetch(self, request: RequestSpec) -> FetchResult:
        """Fetch a URL and return the response.

        Args:
            request: Request specification

        Returns:
            FetchResult with a 2xx response

        Raises:
            FetchFailed: On transport error or non-2xx status
        """
        pass

    def close(self) -> None:
        """Release backend resources."""
        pass

    def __enter__(self) -> "Backend":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class BackendError(Exception):
    """Base exception for backend errors."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class FetchFailed(BackendError):
    """The schedule request did not succeed (transport error or non-2xx)."""
    pass
