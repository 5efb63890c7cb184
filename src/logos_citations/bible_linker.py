"""Rewrite scripture references into ref.ly markdown links.

References after the first full one are often elliptical ("Prov 3:21; 4:13;
16:15" all mean Proverbs), so the scan carries the last resolved book and
chapter forward. That state lives in a :class:`LinkerState` value owned by a
single call.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .bible_books import BIBLE_BOOKS, VERSION_MAPPING

logger = logging.getLogger(__name__)

DASH = r"\s*[-–]\s*"


@dataclass(frozen=True)
class LinkerState:
    book_code: Optional[str] = None
    chapter: Optional[str] = None


# A transform returns None when the current state cannot use the match.
Transform = Callable[[re.Match, LinkerState, str], Optional[Tuple[str, LinkerState]]]


@dataclass(frozen=True)
class VerseRule:
    """One token shape of the reference grammar.

    ``pattern`` uses group names unique to the rule so that every rule can be
    compiled on its own or joined into the combined scanner.
    """

    name: str
    pattern: str
    transform: Transform

    @property
    def group_name(self) -> str:
        return self.name.replace("-", "_")

    @property
    def compiled(self) -> re.Pattern:
        return re.compile(self.pattern)


def get_logos_version_code(version: str) -> str:
    """Map a translation abbreviation to its Logos code; unknown ones pass through."""
    return VERSION_MAPPING.get(version.lower(), version)


def resolve_book(prefix: Optional[str], book: str) -> Optional[str]:
    normalized = re.sub(r"\s+", "", f"{prefix or ''}{book}".lower())
    if normalized in BIBLE_BOOKS:
        return BIBLE_BOOKS[normalized]
    # "II Kings" / "I John"
    normalized = re.sub(r"^iii", "3", normalized)
    normalized = re.sub(r"^ii", "2", normalized)
    normalized = re.sub(r"^i", "1", normalized)
    return BIBLE_BOOKS.get(normalized)


def _markdown_link(label: str, book_code: str, chapter: str, verse: str, end: Optional[str], version: str) -> str:
    target = f"{book_code}{chapter}.{verse}"
    if end:
        target += f"-{end}"
    return f"[{label}](https://ref.ly/{target};{version})"


def _separated(separator: str, link: str) -> str:
    spacing = "" if separator == "(" else " "
    return f"{separator}{spacing}{link}"


def _full_reference(match: re.Match, state: LinkerState, version: str) -> Tuple[str, LinkerState]:
    book_code = resolve_book(match.group("f_prefix"), match.group("f_book"))
    if not book_code:
        logger.debug("Unrecognized book in %r; clearing verse context", match.group(0))
        return match.group(0), LinkerState()
    chapter = match.group("f_chapter")
    link = _markdown_link(
        match.group(0), book_code, chapter, match.group("f_verse"), match.group("f_end"), version
    )
    return link, LinkerState(book_code=book_code, chapter=chapter)


def _separated_chapter_verse(match: re.Match, state: LinkerState, version: str) -> Optional[Tuple[str, LinkerState]]:
    if not state.book_code:
        return None
    separator = match.group("s_sep")
    chapter = match.group("s_chapter")
    label = match.group(0)[len(separator):].strip()
    link = _markdown_link(label, state.book_code, chapter, match.group("s_verse"), match.group("s_end"), version)
    return _separated(separator, link), LinkerState(state.book_code, chapter)


def _bare_chapter_verse(match: re.Match, state: LinkerState, version: str) -> Optional[Tuple[str, LinkerState]]:
    if not state.book_code:
        return None
    chapter = match.group("b_chapter")
    link = _markdown_link(
        match.group(0), state.book_code, chapter, match.group("b_verse"), match.group("b_end"), version
    )
    return link, LinkerState(state.book_code, chapter)


def _separated_verse(match: re.Match, state: LinkerState, version: str) -> Optional[Tuple[str, LinkerState]]:
    if not (state.book_code and state.chapter):
        return None
    separator = match.group("v_sep")
    label = match.group(0)[len(separator):].strip()
    link = _markdown_link(label, state.book_code, state.chapter, match.group("v_verse"), match.group("v_end"), version)
    return _separated(separator, link), state


# Earlier rules win when several could start at the same position.
RULES: Tuple[VerseRule, ...] = (
    VerseRule(
        "full-reference",
        rf"\b(?P<f_prefix>(?:[123]|I{{1,3}})\s*)?(?P<f_book>[A-Z][a-z]+)\.?\s+"
        rf"(?P<f_chapter>\d+):(?P<f_verse>\d+)(?:{DASH}(?P<f_end>\d+))?\b",
        _full_reference,
    ),
    VerseRule(
        "separated-chapter-verse",
        rf"(?P<s_sep>[;,(])\s*(?P<s_chapter>\d+):(?P<s_verse>\d+)(?:{DASH}(?P<s_end>\d+))?\b",
        _separated_chapter_verse,
    ),
    # Bare "16:15" is only linked with a book in scope, and never when it reads
    # like a clock time ("at 10:30", "10:30:15", "10:30 am").
    VerseRule(
        "bare-chapter-verse",
        rf"(?<![A-Za-z0-9:.])(?<!\b[Aa]t )(?P<b_chapter>\d+):(?P<b_verse>\d+)(?:{DASH}(?P<b_end>\d+))?\b"
        r"(?!:\d)(?!\s*(?i:[ap]\.?m)\b)",
        _bare_chapter_verse,
    ),
    # "; 1 Cor 13:4" opens a new reference rather than naming verse 1.
    VerseRule(
        "separated-verse",
        rf"(?P<v_sep>[;,])\s*(?P<v_verse>\d+)(?:{DASH}(?P<v_end>\d+))?\b"
        r"(?!\s+[A-Z][a-z]+\.?\s+\d+:\d)",
        _separated_verse,
    ),
)


class BibleVerseLinker:
    """Scans text left to right, applying the first rule that matches at each position.

    A rule that declines its match gives up only the first character, so a
    later rule (typically a full reference) can still start inside it.
    """

    def __init__(self, rules: Tuple[VerseRule, ...] = RULES):
        self.rules: Dict[str, VerseRule] = {rule.group_name: rule for rule in rules}
        self.pattern = re.compile("|".join(f"(?P<{rule.group_name}>{rule.pattern})" for rule in rules))

    def link(self, text: str, version: str = "esv") -> str:
        logos_version = get_logos_version_code(version)
        state = LinkerState()
        pieces: List[str] = []
        last_index = 0
        position = 0
        while True:
            match = self.pattern.search(text, position)
            if match is None:
                break
            rule = self.rules[match.lastgroup]
            result = rule.transform(match, state, logos_version)
            if result is None:
                position = match.start() + 1
                continue
            rendered, state = result
            pieces.append(text[last_index: match.start()])
            pieces.append(rendered)
            last_index = position = match.end()
        pieces.append(text[last_index:])
        return "".join(pieces)


_DEFAULT_LINKER = BibleVerseLinker()


def link_bible_verses(text: str, version: str = "esv") -> str:
    """Link references such as ``John 3:16``, ``1 John 1:9`` or ``Gen. 1:1-5``."""
    return _DEFAULT_LINKER.link(text, version)
