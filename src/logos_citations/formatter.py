"""Markdown rendering for pasted quotes."""
from __future__ import annotations

import re
from typing import List, Optional

from .models import ParsedCitation
from .pages import strip_page_prefix

DEFAULT_CALLOUT_TITLE = "Citation Reference"


def clean_formatted_text(text: str) -> str:
    """Convert Logos underscore markup to markdown.

    ``__x__`` (footnote markers) becomes ``<sup>x</sup>`` and ``_x_`` becomes
    ``*x*``.
    """
    processed = re.sub(r"__(.*?)__", r"<sup>\1</sup>", text)
    return re.sub(r"_(.*?)_", r"*\1*", processed)


def page_label(page: Optional[str]) -> str:
    if not page:
        return ""
    number = strip_page_prefix(page)
    prefix = "pp." if ("-" in number or "–" in number) else "p."
    return f", {prefix} {number}"


def _quote(text: str) -> str:
    return "> " + text.replace("\n", "\n> ")


class CalloutFormatter:
    """Render a ``[!cite]`` callout that quotes the passage and links back to its reference note."""

    def __init__(
        self,
        title: str = "",
        show_full_citation: bool = True,
        include_refly_link: bool = False,
    ):
        self.title = title or DEFAULT_CALLOUT_TITLE
        self.show_full_citation = show_full_citation
        self.include_refly_link = include_refly_link

    def resource_link(self, refly_link: Optional[str]) -> str:
        if self.include_refly_link and refly_link:
            return f"[Resource Link]({refly_link})"
        return ""

    def format(
        self,
        main_text: str,
        citation: ParsedCitation,
        note_path: str,
        note_name: str,
        block_id: str,
        page: Optional[str] = None,
        refly_link: Optional[str] = None,
    ) -> str:
        lines: List[str] = [f"> [!cite] {self.title}", _quote(main_text)]
        resource_link = self.resource_link(refly_link)

        if self.show_full_citation:
            citation_text = citation.raw_citation
            if resource_link:
                joiner = "\n" if "\n" in citation_text else " "
                citation_text = f"{citation_text}{joiner}{resource_link}"
            lines.extend(["> ", _quote(citation_text), "> "])
        elif resource_link:
            lines.extend(["> ", f"> {resource_link}", "> "])

        lines.append(f"> [[{note_path}|{note_name}{page_label(page)}]] ^{block_id}")
        return "\n".join(lines)
