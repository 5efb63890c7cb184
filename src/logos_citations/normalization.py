"""Normalization helpers shared by the citation extractors."""
from __future__ import annotations

import re
import unicodedata
from typing import Optional, Tuple

MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_AUTHOR_SEPARATOR = re.compile(r"[&,]|\band\b")


def fold_ascii(value: str) -> str:
    """Strip diacritics so that keys stay within ASCII."""
    text = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in text if not unicodedata.combining(ch))


def slugify_cite_key(value: str) -> str:
    """Collapse a raw key into a lowercase hyphen slug (``author_name__2020`` -> ``author-name-2020``)."""
    text = fold_ascii(value).lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def strip_markdown_links(value: Optional[str]) -> Optional[str]:
    """Replace every ``[label](url)`` with ``label`` and drop stray brackets."""
    if value is None:
        return None
    text = MARKDOWN_LINK_PATTERN.sub(r"\1", value)
    return re.sub(r"[\[\]]", "", text)


def find_markdown_link(value: str) -> Optional[Tuple[str, str]]:
    match = MARKDOWN_LINK_PATTERN.search(value)
    if not match:
        return None
    return match.group(1), match.group(2)


def author_last_name(author: str) -> str:
    """Return the lowercase surname of the first listed author.

    The first author is the segment before ``,``, ``&`` or ``and``; the surname
    is its last whitespace token.
    """
    first_author = _AUTHOR_SEPARATOR.split(author)[0].strip()
    tokens = first_author.split()
    if not tokens:
        return ""
    return re.sub(r"[^a-z0-9]", "", fold_ascii(tokens[-1]).lower())


def author_year_key(author: Optional[str], year: Optional[str]) -> str:
    """Build the ``lastname-year`` key, or ``unknown`` when either part is missing."""
    if not author or not year:
        return "unknown"
    last_name = author_last_name(author) or "unknown"
    return slugify_cite_key(f"{last_name}-{year}")


def join_lines(text: str) -> str:
    return " ".join(text.strip().split("\n")).strip()
