"""Data models for clipboard citation parsing."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


class CitationFormat:
    AUTO = "auto"
    BIBTEX = "bibtex"
    MLA = "mla"
    APA = "apa"
    CHICAGO = "chicago"

    ALL = (BIBTEX, MLA, APA, CHICAGO)


@dataclass(frozen=True)
class ParsedCitation:
    """Structured fields extracted from a single citation."""

    format: str
    cite_key: str
    raw_citation: str
    author: Optional[str] = None
    title: Optional[str] = None
    cleaned_title: Optional[str] = None
    year: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    url: Optional[str] = None
    isbn: Optional[str] = None
    abstract: Optional[str] = None
    series: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.keywords is not None:
            data["keywords"] = list(self.keywords)
        return data


@dataclass(frozen=True)
class ParsedClipboard:
    """Result of splitting clipboard text into quote and citation."""

    main_text: str
    citation: Optional[ParsedCitation] = None
    page: Optional[str] = None
    refly_link: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "main_text": self.main_text,
            "citation": self.citation.to_dict() if self.citation else None,
            "page": self.page,
            "refly_link": self.refly_link,
        }


@dataclass(frozen=True)
class PageExtraction:
    cleaned_text: str
    page: Optional[str] = None
