"""Output formats for listing records."""

from .formatters import to_table, to_text, to_xml

__all__ = [
    "to_table",
    "to_text",
    "to_xml",
]
