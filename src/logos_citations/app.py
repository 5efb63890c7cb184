"""High-level orchestrator for the paste-citation workflow."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from .bible_linker import BibleVerseLinker
from .clipboard import ClipboardParser
from .config import Settings
from .exceptions import CitationNotFoundError
from .formatter import CalloutFormatter, clean_formatted_text
from .models import ParsedClipboard
from .notes import (
    append_bibliography,
    append_citation_to_note,
    build_link_back,
    format_bibliography_entry,
    generate_citation_frontmatter,
    generate_note_path,
    new_reference_note,
    sanitize_note_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PastedCitation:
    """Everything produced by one paste: the callout and its reference-note pieces."""

    clipboard: ParsedClipboard
    callout: str
    note_name: str
    note_path: str
    block_id: str
    link_back: str
    frontmatter: str

    @property
    def markdown(self) -> str:
        """Callout text as inserted into the source note."""
        return f"{self.callout}\n\n"


def _note_basename(source_note: str) -> str:
    name = source_note.replace("\\", "/").rsplit("/", 1)[-1]
    return name[:-3] if name.endswith(".md") else name


class CitationReferenceApp:
    """Coordinates parsing, formatting, and reference-note bookkeeping."""

    def __init__(
        self,
        settings: Settings | None = None,
        clipboard_parser: ClipboardParser | None = None,
        verse_linker: BibleVerseLinker | None = None,
    ):
        self.settings = settings or Settings()
        self.clipboard_parser = clipboard_parser or ClipboardParser()
        self.verse_linker = verse_linker or BibleVerseLinker()
        self.callout_formatter = CalloutFormatter(
            title=self.settings.custom_callout_title,
            show_full_citation=self.settings.show_full_citation_in_callout,
            include_refly_link=self.settings.include_refly_link,
        )

    def parse(self, text: str) -> ParsedClipboard:
        return self.clipboard_parser.parse(text, self.settings.citation_format)

    def parse_with_markdown(self, plain_text: str, markdown_text: Optional[str] = None) -> ParsedClipboard:
        """Parse the plain-text clipboard and fold in its HTML-derived markdown rendering.

        Plain text is the reliable source for the citation; the markdown copy
        keeps emphasis in the quote and fills in anything plain text missed.
        """
        parsed = self.parse(plain_text)
        if markdown_text is None:
            return parsed

        formatted = self.parse(markdown_text)
        refly_link = parsed.refly_link or formatted.refly_link
        if refly_link:
            refly_link = re.sub(r"[\\.,;]+$", "", refly_link)
        return ParsedClipboard(
            main_text=formatted.main_text,
            citation=parsed.citation or formatted.citation,
            page=parsed.page or formatted.page,
            refly_link=refly_link,
        )

    def next_block_id(self, source_note: str, cite_key: str) -> str:
        counters = self.settings.citation_counters
        counters[source_note] = counters.get(source_note, 0) + 1
        return f"{cite_key}-{counters[source_note]}"

    def paste_citation(
        self, plain_text: str, source_note: str, markdown_text: Optional[str] = None
    ) -> PastedCitation:
        """Build the callout for a Logos clipboard pasted into ``source_note``.

        Raises:
            CitationNotFoundError: when neither clipboard rendering holds a citation.
        """
        parsed = self.parse_with_markdown(plain_text, markdown_text)
        citation = parsed.citation
        if citation is None:
            raise CitationNotFoundError(
                "Could not find citation in clipboard. Please ensure you copied a valid citation."
            )

        main_text = clean_formatted_text(parsed.main_text)
        if self.settings.auto_detect_bible_verses:
            main_text = self.verse_linker.link(main_text, self.settings.bible_translation)
        parsed = replace(parsed, main_text=main_text)

        title = citation.cleaned_title or citation.title
        note_name = sanitize_note_name(f"{title} - References" if title else citation.cite_key)
        note_path = generate_note_path(note_name, self.settings.citation_folder.strip())
        block_id = self.next_block_id(source_note, citation.cite_key)
        logger.info("Pasting %s citation %s into %s", citation.format, block_id, source_note)

        callout = self.callout_formatter.format(
            main_text,
            citation,
            note_path=note_path,
            note_name=note_name,
            block_id=block_id,
            page=parsed.page,
            refly_link=parsed.refly_link,
        )
        return PastedCitation(
            clipboard=parsed,
            callout=callout,
            note_name=note_name,
            note_path=note_path,
            block_id=block_id,
            link_back=build_link_back(_note_basename(source_note), block_id, parsed.page),
            frontmatter=generate_citation_frontmatter(citation, self.settings.metadata_fields),
        )

    def reference_note_content(self, pasted: PastedCitation, existing: Optional[str] = None) -> str:
        """Content for the reference note: a new note, or ``existing`` with the citation appended."""
        if existing is None:
            return new_reference_note(pasted.frontmatter, pasted.link_back)
        return append_citation_to_note(existing, pasted.link_back)

    def bibliography(self, content: str, reference_notes: Iterable[str]) -> str:
        """Append a bibliography built from the linked reference notes' contents."""
        entries = [entry for entry in map(format_bibliography_entry, reference_notes) if entry]
        if not entries:
            raise CitationNotFoundError("No citations found in linked notes")
        return append_bibliography(content, entries)
