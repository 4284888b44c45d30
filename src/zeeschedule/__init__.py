"""
zeeschedule - Terminal-first ZEE TV programme schedule scraper.

Fetches the daily schedule page for a given date, scans the markup
into ordered listing records, and renders them as XML or text.
"""

__version__ = "0.3.0"
__app_name__ = "zeeschedule"
