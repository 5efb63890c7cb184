"""Clipboard parsing reports."""
from __future__ import annotations

from .models import ParsedClipboard

REPORT_FIELDS = ("author", "title", "year", "publisher", "pages", "url", "isbn", "series")


def render_report(parsed: ParsedClipboard) -> str:
    """Return a human-readable summary of a parsed clipboard."""

    lines = ["Logos Citation Report"]
    if parsed.main_text:
        lines.append(f"Quote: {parsed.main_text}")

    citation = parsed.citation
    if citation is None:
        lines.append("No citation detected.")
        return "\n".join(lines)

    lines.append(f"Format: {citation.format}")
    lines.append(f"Cite key: {citation.cite_key}")
    for name in REPORT_FIELDS:
        value = getattr(citation, name)
        if value:
            lines.append(f"{name.capitalize()}: {value}")
    if citation.keywords:
        lines.append(f"Keywords: {', '.join(citation.keywords)}")
    if parsed.page:
        lines.append(f"Page: {parsed.page}")
    if parsed.refly_link:
        lines.append(f"Resource link: {parsed.refly_link}")
    return "\n".join(lines)
