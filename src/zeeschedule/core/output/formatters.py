"""
Renderers for listing records.

XML and text keep the fixed layouts of the long-standing schedule feed,
including the padding spaces around XML values. Values are written
verbatim unless ``escape=True`` is passed to ``to_xml``: a title holding
``<`` or ``&`` otherwise yields malformed XML.
"""

from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import escape as xml_escape

from rich.table import Table
from rich.text import Text

from zeeschedule.core.extract import ListingRecord


XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
TEXT_SEPARATOR = "-------------------"


def to_xml(records: Iterable[ListingRecord], *, escape: bool = False) -> str:
    """Render records as a ``<programmes>`` XML document.

    Args:
        records: Listing records in broadcast order
        escape: Escape ``&``, ``<`` and ``>`` in values

    Returns:
        XML document without a trailing newline
    """
    def value(text: str) -> str:
        return xml_escape(text) if escape else text

    parts = [XML_HEADER, "<programmes>\n"]
    for record in records:
        parts.append("\t<programme>\n")
        parts.append(f"\t\t<time> {value(record.time)} </time>\n")
        parts.append(f"\t\t<title> {value(record.title)} </title>\n")
        if record.url is not None:
            parts.append(f"\t\t<url> {value(record.url)} </url>\n")
        parts.append("\t</programme>\n")
    parts.append("</programmes>")
    return "".join(parts)


def to_text(records: Iterable[ListingRecord]) -> str:
    """Render records as a human-readable report, one block per programme."""
    lines: list[str] = []
    for record in records:
        lines.append(f" Time: {record.time}\n")
        lines.append(f"Title: {record.title}\n")
        if record.url is not None:
            lines.append(f"  URL: {record.url}\n")
        lines.append(f"{TEXT_SEPARATOR}\n")
    return "".join(lines)


def to_table(records: Iterable[ListingRecord], title: str | None = None) -> Table:
    """Build a Rich table for terminal display."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("URL", style="dim")

    for record in records:
        # Text, not markup: titles may contain brackets
        table.add_row(Text(record.time), Text(record.title), Text(record.url or ""))

    return table
