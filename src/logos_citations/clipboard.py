"""Split Logos clipboard text into the quoted passage and its citation."""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from .bibtex import parse_bibtex
from .format_detector import detect_citation_format
from .models import CitationFormat, ParsedCitation, ParsedClipboard
from .pages import extract_page_number
from .styles import parse_apa, parse_chicago, parse_mla

logger = logging.getLogger(__name__)

REFLY_PATTERN = re.compile(r"https?://ref\.ly/[^\s)}]+")
BIBTEX_SPLIT = re.compile(r"\s+(?=@\w+\{)")
AUTHOR_LINE = re.compile(r"[A-Z][a-z]+,?\s+[A-Z]")
YEAR_IN_PARENS = re.compile(r"\(\d{4}\)")

PARSERS: Dict[str, Callable[[str], ParsedCitation]] = {
    CitationFormat.BIBTEX: parse_bibtex,
    CitationFormat.MLA: parse_mla,
    CitationFormat.APA: parse_apa,
    CitationFormat.CHICAGO: parse_chicago,
}


class ClipboardParser:
    """Separates quote text from a trailing citation and parses the citation."""

    def parse(self, clipboard: str, preferred_format: str = CitationFormat.AUTO) -> ParsedClipboard:
        trimmed = clipboard.strip()
        refly_link = self.extract_refly_link(trimmed)

        if preferred_format == CitationFormat.AUTO:
            citation_format = detect_citation_format(trimmed)
        else:
            citation_format = preferred_format

        if citation_format == CitationFormat.BIBTEX:
            main_text, citation_text = self._split_bibtex(trimmed)
        else:
            main_text, citation_text = self._split_lines(trimmed, citation_format)

        if main_text and refly_link:
            main_text = self._remove_refly_link(main_text, refly_link)

        page = None
        citation = None
        if citation_text:
            extraction = extract_page_number(citation_text)
            page = extraction.page
            citation_text = extraction.cleaned_text
        if citation_text:
            parser = PARSERS.get(citation_format, parse_bibtex)
            citation = parser(citation_text)
            logger.debug("Parsed %s citation with key %s", citation.format, citation.cite_key)
        else:
            logger.debug("No citation found in clipboard text")

        return ParsedClipboard(
            main_text=main_text.strip(),
            citation=citation,
            page=page or (citation.pages if citation else None),
            refly_link=refly_link,
        )

    @staticmethod
    def extract_refly_link(text: str) -> Optional[str]:
        match = REFLY_PATTERN.search(text)
        if not match:
            return None
        return re.sub(r"[\\.,;!]+$", "", match.group(0)) or None

    @staticmethod
    def _split_bibtex(text: str) -> Tuple[str, str]:
        parts = BIBTEX_SPLIT.split(text, maxsplit=1)
        if len(parts) >= 2:
            return parts[0].strip(), parts[1].strip()
        if not text.startswith("@"):
            return text, ""
        return "", text

    def _split_lines(self, text: str, citation_format: str) -> Tuple[str, str]:
        lines = re.split(r"\r?\n", text)
        start = self._citation_start(lines, citation_format)
        if start > 0:
            main_text = "\n".join(lines[:start]).strip()
            citation_text = "\n".join(lines[start:]).strip()
            logger.debug("Citation starts at line %d of %d", start, len(lines))
            return main_text, citation_text
        return "", text

    def _citation_start(self, lines: List[str], citation_format: str) -> int:
        """Scan upwards for the first line of a trailing citation block (-1 if none)."""
        start = -1
        for index in range(len(lines) - 1, -1, -1):
            line = lines[index].strip()
            if not line:
                if start != -1:
                    break
                continue
            if self.looks_like_citation(line, citation_format):
                start = index
            elif start != -1:
                break
        return start

    @staticmethod
    def looks_like_citation(line: str, citation_format: str) -> bool:
        if citation_format == CitationFormat.APA:
            return bool(YEAR_IN_PARENS.search(line))
        if citation_format in (CitationFormat.MLA, CitationFormat.CHICAGO):
            return bool(AUTHOR_LINE.search(line)) and any(ch in line for ch in "._*")
        return False

    @staticmethod
    def _remove_refly_link(text: str, refly_link: str) -> str:
        escaped = re.escape(refly_link)
        text = re.sub(rf"\s*\(?Resource Link:\s*{escaped}\)?", "", text, count=1, flags=re.IGNORECASE)
        return text.replace(refly_link, "", 1).strip()


def parse_logos_clipboard(clipboard: str, preferred_format: str = CitationFormat.AUTO) -> ParsedClipboard:
    return ClipboardParser().parse(clipboard, preferred_format)
