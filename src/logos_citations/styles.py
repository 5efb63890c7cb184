"""Heuristic field extraction for MLA, APA, and Chicago citations.

Logos renders titles either as markdown links (``[_Title_](https://ref.ly/...)``)
or as italic/quoted text, so each parser has a linked branch and a plain-text
branch. None of them raise: fields that cannot be located stay ``None``.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .models import CitationFormat, ParsedCitation
from .normalization import author_year_key, join_lines, strip_markdown_links

LINKED_TITLE = re.compile(r"\[[*_]([^\]]+)[*_]\]\(([^)]+)\)")
ANY_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
DELIMITED_TITLE = re.compile(r"[_*\"“]([^_*\"“”]+)[_*\"”]")
# A period ends the author list when a capitalized word (not an initial) follows.
AUTHOR_TERMINATOR = re.compile(r"^(.+?)\.(?=\s+[A-Z][A-Za-z\d]+(?!\.))")
AUTHOR_FALLBACK = re.compile(r"^([^.]+)\.")
PAREN_YEAR = re.compile(r"\((\d{4})\)")
EDITION = re.compile(r"^[^,]*\bed\.,?\s*", re.IGNORECASE)
# Leading "(2nd ed.)." after the title.
EDITION_PARENTHETICAL = re.compile(r"^[.,\s]*\([^)]*\)")

# author, title, year, publisher[, url]
PlainFields = Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]
LinkedFields = Tuple[Optional[str], Optional[str], Optional[str], Optional[str], str]


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _trim_author(value: str) -> Optional[str]:
    # Keeps the period of a trailing initial ("Smith, J. A.").
    return _clean(re.sub(r"(?<![A-Z])\.?[\s,]*$", "", value))


def _strip_year_suffix(value: str) -> str:
    return re.sub(r",?\s*\(?\d{4}\)?[.,]?\s*$", "", value)


def _publisher(segment: str, split_place: bool = True) -> Optional[str]:
    """Publisher from the text between title and year, without edition or place."""
    text = re.sub(r"^[.,\s]+", "", segment)
    text = _strip_year_suffix(text)
    text = EDITION.sub("", text)
    if split_place and ":" in text:
        text = text.rsplit(":", 1)[1]
    text = re.sub(r"^[.,\s(]+|[.,\s)]+$", "", text)
    return _clean(text)


def _split_plain(citation: str) -> Tuple[Optional[str], Optional[str], str]:
    """Split ``Author. Title. Tail`` on the first author-terminating period."""
    match = AUTHOR_TERMINATOR.match(citation) or AUTHOR_FALLBACK.match(citation)
    if not match:
        return None, None, ""
    author = _clean(match.group(1))
    rest = citation[match.end():].strip()
    parts = re.split(r"\.\s+", rest, maxsplit=1)
    title = _clean(parts[0].strip('"“”').rstrip("."))
    tail = parts[1] if len(parts) > 1 else ""
    return author, title, tail


def _trailing_year(text: str) -> Optional[str]:
    match = re.search(r"(\d{4})[.,]?\s*$", text) or re.search(r"\b(\d{4})\b", text)
    return match.group(1) if match else None


class _StyleParser(ABC):
    """Shared driver; subclasses supply the linked and plain-text branches."""

    format = ""

    def parse(self, text: str) -> ParsedCitation:
        citation = join_lines(text)
        link = self._find_link(citation)
        if link:
            author, title, year, publisher, url = self._parse_linked(citation, link)
        else:
            author, title, year, publisher = self._parse_plain(citation)
            url = None
        return ParsedCitation(
            format=self.format,
            cite_key=author_year_key(author, year),
            raw_citation=citation,
            author=author,
            title=title,
            cleaned_title=strip_markdown_links(title),
            year=year,
            publisher=publisher,
            url=url,
        )

    def _find_link(self, citation: str) -> Optional[re.Match]:
        return LINKED_TITLE.search(citation)

    @abstractmethod
    def _parse_linked(self, citation: str, link: re.Match) -> LinkedFields:
        ...

    @abstractmethod
    def _parse_plain(self, citation: str) -> PlainFields:
        ...


class MlaCitationParser(_StyleParser):
    """Author. Title. Publisher, Year."""

    format = CitationFormat.MLA

    def _parse_linked(self, citation: str, link: re.Match) -> LinkedFields:
        author = _trim_author(citation[: link.start()])
        tail = citation[link.end():]
        year = _trailing_year(tail)
        return author, _clean(link.group(1)), year, _publisher(tail), link.group(2)

    def _parse_plain(self, citation: str) -> PlainFields:
        title_match = DELIMITED_TITLE.search(citation)
        if title_match:
            author = _trim_author(citation[: title_match.start()])
            tail = citation[title_match.end():].strip()
            match = re.search(r"(\d{4})\.?$", tail)
            year = match.group(1) if match else None
            return author, _clean(title_match.group(1)), year, _publisher(tail, split_place=False)

        author, title, tail = _split_plain(citation)
        year = _trailing_year(citation)
        return author, title, year, _publisher(tail, split_place=False) if tail else None


class ApaCitationParser(_StyleParser):
    """Author, A. A. (Year). Title. Publisher."""

    format = CitationFormat.APA

    def _parse_linked(self, citation: str, link: re.Match) -> LinkedFields:
        year_match = PAREN_YEAR.search(citation)
        year = year_match.group(1) if year_match else None
        author_end = year_match.start() if year_match and year_match.start() < link.start() else link.start()
        author = _trim_author(citation[:author_end])
        publisher = _publisher(EDITION_PARENTHETICAL.sub("", citation[link.end():]))
        return author, _clean(link.group(1)), year, publisher, link.group(2)

    def _parse_plain(self, citation: str) -> PlainFields:
        year_match = PAREN_YEAR.search(citation)
        if year_match:
            year = year_match.group(1)
            author = _trim_author(citation[: year_match.start()])
            after_year = citation[year_match.end():].strip()
        else:
            year, author, after_year = None, None, citation

        title_match = DELIMITED_TITLE.search(after_year)
        if title_match:
            after_title = after_year[title_match.end():]
            after_title = EDITION_PARENTHETICAL.sub("", after_title)
            return author, _clean(title_match.group(1)), year, _publisher(after_title)

        parts = re.split(r"\.\s+", re.sub(r"^[.\s]+", "", after_year))
        title = _clean(parts[0].rstrip(".")) if parts else None
        publisher = _clean(parts[1].rstrip(".")) if len(parts) >= 2 else None
        return author, title, year, publisher


class ChicagoCitationParser(_StyleParser):
    """Author. Title. Place: Publisher, Year."""

    format = CitationFormat.CHICAGO

    def _find_link(self, citation: str) -> Optional[re.Match]:
        return ANY_LINK.search(citation)

    def _parse_linked(self, citation: str, link: re.Match) -> LinkedFields:
        # Encyclopedia articles: "Author, [“Entry”](url), in _Book Title_, ..."
        in_book = re.search(r"\bin\s+[_*]([^_*]+)[_*]", citation[link.end():])
        if in_book:
            title = _clean(in_book.group(1))
        else:
            title = _clean(re.sub(r"^[_*“\"‘']+|[_*”\"’',]+$", "", link.group(1)))

        author = _trim_author(citation[: link.start()])
        year_match = re.search(r",\s*(\d{4})\)", citation) or re.search(r",\s*(\d{4})\.?\s*$", citation)
        year = year_match.group(1) if year_match else None

        publisher_match = re.search(r":\s*([^,)]+),\s*\d{4}", citation) or re.search(
            r"\(([^():]+),\s*\d{4}\)", citation
        )
        publisher = _clean(publisher_match.group(1)) if publisher_match else None
        return author, title, year, publisher, link.group(2)

    def _parse_plain(self, citation: str) -> PlainFields:
        title_match = DELIMITED_TITLE.search(citation)
        if title_match:
            author = _trim_author(citation[: title_match.start()])
            tail = citation[title_match.end():].strip()
            match = re.search(r",\s*(\d{4})\.?$", tail) or re.search(r",\s*(\d{4})\b", tail)
            year = match.group(1) if match else None
            return author, _clean(title_match.group(1)), year, _publisher(tail)

        author, title, tail = _split_plain(citation)
        match = re.search(r",\s*(\d{4})[.,]?$", citation) or re.search(r"(\d{4})", citation)
        year = match.group(1) if match else None
        publisher = _publisher(tail) if ":" in tail else None
        return author, title, year, publisher


def parse_mla(text: str) -> ParsedCitation:
    return MlaCitationParser().parse(text)


def parse_apa(text: str) -> ParsedCitation:
    return ApaCitationParser().parse(text)


def parse_chicago(text: str) -> ParsedCitation:
    return ChicagoCitationParser().parse(text)
