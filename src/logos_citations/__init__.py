"""Logos clipboard citation parsing and Bible verse linking toolkit."""

from .app import CitationReferenceApp, PastedCitation
from .bible_linker import BibleVerseLinker, get_logos_version_code, link_bible_verses
from .bibtex import extract_book_title, extract_cite_key, extract_pages_from_bibtex, parse_bibtex
from .clipboard import ClipboardParser, parse_logos_clipboard
from .config import Settings
from .exceptions import (
    CitationNotFoundError,
    ConfigurationError,
    FieldNotFoundError,
    LogosCitationError,
)
from .format_detector import detect_citation_format
from .formatter import clean_formatted_text
from .logos_search import build_logos_search_url
from .models import CitationFormat, PageExtraction, ParsedCitation, ParsedClipboard
from .pages import extract_page_number
from .styles import parse_apa, parse_chicago, parse_mla

__all__ = [
    "CitationReferenceApp",
    "PastedCitation",
    "BibleVerseLinker",
    "get_logos_version_code",
    "link_bible_verses",
    "extract_book_title",
    "extract_cite_key",
    "extract_pages_from_bibtex",
    "parse_bibtex",
    "ClipboardParser",
    "parse_logos_clipboard",
    "Settings",
    "CitationNotFoundError",
    "ConfigurationError",
    "FieldNotFoundError",
    "LogosCitationError",
    "detect_citation_format",
    "clean_formatted_text",
    "build_logos_search_url",
    "CitationFormat",
    "PageExtraction",
    "ParsedCitation",
    "ParsedClipboard",
    "extract_page_number",
    "parse_apa",
    "parse_chicago",
    "parse_mla",
]
