"""Regex-based BibTeX extraction for single Logos-exported entries."""
from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Tuple

from .exceptions import FieldNotFoundError
from .models import CitationFormat, ParsedCitation
from .normalization import find_markdown_link, slugify_cite_key, strip_markdown_links

logger = logging.getLogger(__name__)

CITE_KEY_PATTERN = re.compile(r"^@\w+\{([^,]+),")
# Logos sometimes wraps a whole field in a link: [journal={Title}](url)
LINKED_FIELD_PATTERN = re.compile(
    r"\[((?:title|journal|booktitle|series)\s*=\s*\{)([^}]+)(\})\]\(([^)]+)\)", re.IGNORECASE
)
YEAR_PATTERN = re.compile(r"(?<![A-Za-z])year\s*=\s*\{?(\d{4})\}?", re.IGNORECASE)
PAGES_PATTERN = re.compile(r"(?<![A-Za-z])pages\s*=\s*[{\"']([^}\"']+)[}\"']", re.IGNORECASE)

TEXT_FIELDS = (
    "author",
    "title",
    "journal",
    "booktitle",
    "series",
    "pages",
    "publisher",
    "url",
    "isbn",
    "abstract",
    "keywords",
)
# The meaningful title of a Logos reference-work article lives in ``journal``.
TITLE_SOURCE_PRIORITY = ("journal", "booktitle", "series", "title")


def _field_pattern(name: str) -> re.Pattern:
    return re.compile(rf"(?<![A-Za-z]){name}\s*=\s*\{{([^}}]+)\}}", re.IGNORECASE)


FIELD_PATTERNS: Dict[str, re.Pattern] = {name: _field_pattern(name) for name in TEXT_FIELDS}


class BibtexCitationParser:
    """Parses one ``@type{key, field={value}, ...}`` block without nested braces."""

    def parse(self, text: str) -> ParsedCitation:
        bibtex = LINKED_FIELD_PATTERN.sub(
            lambda m: f"{m.group(1)}[{m.group(2)}]({m.group(4)}){m.group(3)}", text
        )
        fields = {name: self._field(bibtex, name) for name in TEXT_FIELDS}
        year_match = YEAR_PATTERN.search(bibtex)
        year = year_match.group(1) if year_match else None

        source_field, raw_title = self._title_source(fields)
        title = raw_title
        url = fields["url"]

        if title:
            embedded = find_markdown_link(title)
            if embedded:
                url = url or embedded[1]
            elif url and "](" not in title:
                title = f"[{title}]({url})"
                bibtex = self._rewrite_field(bibtex, source_field, raw_title, title)

        cite_key = self._cite_key(bibtex, fields["author"], year)

        return ParsedCitation(
            format=CitationFormat.BIBTEX,
            cite_key=cite_key,
            raw_citation=bibtex,
            author=fields["author"],
            title=title,
            cleaned_title=strip_markdown_links(title),
            year=year,
            pages=fields["pages"],
            publisher=fields["publisher"],
            url=url,
            isbn=fields["isbn"],
            abstract=fields["abstract"],
            series=fields["series"],
            keywords=self._keywords(fields["keywords"]),
        )

    @staticmethod
    def _field(bibtex: str, name: str) -> Optional[str]:
        match = FIELD_PATTERNS[name].search(bibtex)
        return match.group(1) if match else None

    @staticmethod
    def _title_source(fields: Dict[str, Optional[str]]) -> Tuple[Optional[str], Optional[str]]:
        for name in TITLE_SOURCE_PRIORITY:
            if fields[name]:
                return name, fields[name]
        return None, None

    @staticmethod
    def _rewrite_field(bibtex: str, field: Optional[str], old_value: Optional[str], new_value: str) -> str:
        if not field or not old_value:
            return bibtex
        pattern = re.compile(
            rf"(?<![A-Za-z]){field}\s*=\s*\{{{re.escape(old_value)}\}}", re.IGNORECASE
        )
        return pattern.sub(lambda _m: f"{field}={{{new_value}}}", bibtex, count=1)

    @staticmethod
    def _cite_key(bibtex: str, author: Optional[str], year: Optional[str]) -> str:
        match = CITE_KEY_PATTERN.match(bibtex)
        cite_key = slugify_cite_key(match.group(1)) if match else ""
        if cite_key and cite_key != "unknown":
            return cite_key
        if author and year:
            last_name = author.split(",")[0].strip()
            generated = slugify_cite_key(f"{last_name}-{year}")
            logger.debug("BibTeX entry has no key; generated %s", generated)
            return generated
        return "unknown"

    @staticmethod
    def _keywords(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
        if raw is None:
            return None
        return tuple(k.strip() for k in re.split(r"[;,]", raw) if k.strip())


def parse_bibtex(text: str) -> ParsedCitation:
    return BibtexCitationParser().parse(text)


def extract_cite_key(bibtex: str) -> str:
    """Return the slugified entry key, raising when there is none.

    Unlike :func:`parse_bibtex` this is strict: legacy callers rely on the
    failure to reject clipboard text that is not BibTeX.
    """
    match = CITE_KEY_PATTERN.match(bibtex)
    if not match:
        raise FieldNotFoundError("Could not extract cite key", field="cite key")
    return slugify_cite_key(match.group(1))


def extract_pages_from_bibtex(bibtex: str) -> Optional[str]:
    match = PAGES_PATTERN.search(bibtex)
    return match.group(1) if match else None


def extract_book_title(bibtex: str) -> Optional[str]:
    match = FIELD_PATTERNS["title"].search(bibtex)
    return match.group(1) if match else None
