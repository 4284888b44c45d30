"""Backend implementations for fetching schedule pages."""

from .base import (
    Backend,
    BackendError,
    FetchFailed,
    FetchResult,
    RequestSpec,
)
from .http_backend import HttpBackend

__all__ = [
    # Base classes
    "Backend",
    "RequestSpec",
    "FetchResult",
    # Errors
    "BackendError",
    "FetchFailed",
    # HTTP backend
    "HttpBackend",
]
