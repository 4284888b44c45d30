"""Extraction of listing records from schedule markup."""

from .base import Extractor, ListingRecord
from .scanner import ListingExtractor, extract_listings

__all__ = [
    "Extractor",
    "ListingRecord",
    "ListingExtractor",
    "extract_listings",
]
