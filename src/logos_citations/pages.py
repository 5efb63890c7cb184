"""Trailing page-marker extraction."""
from __future__ import annotations

import re

from .models import PageExtraction

PAGE_PATTERN = re.compile(r"[(\[ ,]?(?<![A-Za-z])(p{1,2}\.? ?\d+(?:[–-]\d+)?)[)\]]?\.?$", re.IGNORECASE)


def extract_page_number(text: str) -> PageExtraction:
    """Split a trailing ``p. 42`` / ``(pp. 10-15)`` marker off ``text``.

    The label is returned exactly as written; the remaining text loses the
    marker together with its leading separator.
    """
    match = PAGE_PATTERN.search(text)
    if not match:
        return PageExtraction(cleaned_text=text.strip(), page=None)
    cleaned = text[: match.start()].strip()
    return PageExtraction(cleaned_text=cleaned, page=match.group(1))


def strip_page_prefix(page: str) -> str:
    """``"pp. 10-15"`` -> ``"10-15"``; bare numbers are returned unchanged."""
    return re.sub(r"^p{1,2}\.?\s*", "", page.strip(), flags=re.IGNORECASE)
