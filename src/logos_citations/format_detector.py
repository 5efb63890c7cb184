"""Citation format sniffing heuristics."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import CitationFormat

logger = logging.getLogger(__name__)

LINKED_TITLE_PATTERN = re.compile(r"\[[*_][^\]]+[*_]\]\([^)]+\)")


@dataclass(frozen=True)
class FormatRule:
    """A named detection rule; the first rule that matches decides the format.

    ``linked`` restricts a rule to text that does (True) or may (None) carry a
    ``[_Title_](url)`` markdown title.
    """

    name: str
    format: str
    patterns: Tuple[re.Pattern, ...]
    linked: Optional[bool] = None

    def matches(self, text: str, has_linked_title: bool) -> bool:
        if self.linked is not None and self.linked != has_linked_title:
            return False
        return any(pattern.search(text) for pattern in self.patterns)


RULES: Tuple[FormatRule, ...] = (
    FormatRule(
        "bibtex-entry",
        CitationFormat.BIBTEX,
        (re.compile(r"\A@\w+\{"), re.compile(r"\s@\w+\{")),
    ),
    # Author, [_Title_](url), Series (Place: Publisher, Year).
    FormatRule(
        "chicago-linked",
        CitationFormat.CHICAGO,
        (re.compile(r"\([^)]*:\s*[^,)]+,\s*\d{4}\)"), re.compile(r",\s*\d{4}\)\.$")),
        linked=True,
    ),
    # Author. [_Title_](url). Publisher, Year.
    FormatRule(
        "mla-linked",
        CitationFormat.MLA,
        (re.compile(r"\]\([^)]+\)\.\s+[^,]+,\s*\d{4}\.?\s*$"),),
        linked=True,
    ),
    # Author (Year). [_Title_](url). Publisher.
    FormatRule(
        "apa-linked",
        CitationFormat.APA,
        (re.compile(r"\(\d{4}\)\.\s*\["),),
        linked=True,
    ),
    FormatRule(
        "apa-plain",
        CitationFormat.APA,
        (re.compile(r"[A-Z][a-z]+,\s+[A-Z]\.(?:\s*[A-Z]\.)*\s*\(\d{4}\)"),),
    ),
    # Colon before "Publisher, Year" is what separates Chicago from MLA, so it runs first.
    FormatRule(
        "chicago-plain",
        CitationFormat.CHICAGO,
        (re.compile(r"[A-Z][a-z]+,?\s+[A-Z].*?\.\s+.*?\.\s+.*?:\s*[^.]+,?\s*\d{4}"),),
    ),
    FormatRule(
        "mla-plain",
        CitationFormat.MLA,
        (re.compile(r"[A-Z][a-z]+,?\s+[A-Z].*?\.\s+.*?\.\s+.*,\s+\d{4}"),),
    ),
)


class FormatDetector:
    """Guess which citation style a clipboard string is written in."""

    def __init__(self, rules: Tuple[FormatRule, ...] = RULES, default: str = CitationFormat.BIBTEX):
        self.rules = rules
        self.default = default

    def detect(self, text: str) -> str:
        trimmed = text.strip()
        rule = self.matching_rule(trimmed)
        if rule is None:
            logger.debug("No citation format rule matched; defaulting to %s", self.default)
            return self.default
        logger.debug("Citation format %s detected by rule %s", rule.format, rule.name)
        return rule.format

    def matching_rule(self, text: str) -> Optional[FormatRule]:
        has_linked_title = bool(LINKED_TITLE_PATTERN.search(text))
        for rule in self.rules:
            if rule.matches(text, has_linked_title):
                return rule
        return None


_DEFAULT_DETECTOR = FormatDetector()


def detect_citation_format(text: str) -> str:
    return _DEFAULT_DETECTOR.detect(text)
