"""Reference-note helpers: names, paths, frontmatter and the citations list."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

from .models import ParsedCitation
from .pages import strip_page_prefix

logger = logging.getLogger(__name__)

CITATIONS_HEADING = "## Citations"
_CITATIONS_SECTION = re.compile(r"## Citations([\s\S]*?)(\n#+\s|\Z)")
_FRONTMATTER = re.compile(r"^---\n([\s\S]*?)\n---")
_BIBTEX_BLOCK = re.compile(r"```bibtex[\s\S]*?```")


def sanitize_note_name(name: str) -> str:
    """Drop characters that cannot appear in a vault file name (``/``, ``\\``, ``:``)."""
    return re.sub(r"[\\/:]", "", name)


def generate_note_path(note_name: str, folder: str = "") -> str:
    sanitized = sanitize_note_name(note_name)
    return f"{folder}/{sanitized}.md" if folder else f"{sanitized}.md"


def _yaml_string(value: str) -> str:
    return '"' + value.replace('"', '\\"') + '"'


def _empty_fields(fields: Iterable[str]) -> List[str]:
    return [f"{field}: " for field in fields]


def generate_metadata_frontmatter(fields: Sequence[str]) -> str:
    """Frontmatter with one empty entry per field; empty string when there are none."""
    if not fields:
        return ""
    return "\n".join(["---", *_empty_fields(fields), "---"]) + "\n\n"


def generate_citation_frontmatter(citation: ParsedCitation, custom_fields: Sequence[str] = ()) -> str:
    lines = ["---"]
    if citation.title:
        lines.append(f"title: {_yaml_string(citation.title)}")
    if citation.author:
        lines.append(f"author: {_yaml_string(citation.author)}")
    if citation.year:
        lines.append(f"year: {citation.year}")
    if citation.publisher:
        lines.append(f"publisher: {_yaml_string(citation.publisher)}")
    if citation.url:
        lines.append(f'url: "{citation.url}"')
    lines.append(f'cite-key: "{citation.cite_key}"')
    lines.append(f"citation-format: {citation.format}")
    lines.extend(_empty_fields(custom_fields))
    lines.append("---")
    return "\n".join(lines) + "\n\n"


def build_link_back(source_basename: str, block_id: str, page: Optional[str] = None) -> str:
    """Link plus embed of the quoted block in the source note."""
    target = f"{source_basename}#^{block_id}"
    link = f"[[{target}]]![[{target}]]"
    if page:
        link += f" → p. {strip_page_prefix(page)}"
    return link


def new_reference_note(frontmatter: str, link_back: str) -> str:
    return f"{frontmatter}{CITATIONS_HEADING}\n\n- {link_back}"


def append_citation_to_note(content: str, link_back: str) -> str:
    """Add ``link_back`` to the note's citations list unless it is already there."""
    citation_line = f"\n- {link_back}"
    if CITATIONS_HEADING not in content:
        return f"{content.strip()}\n\n{CITATIONS_HEADING}\n{citation_line}"

    def _insert(match: re.Match) -> str:
        if link_back in match.group(0):
            logger.debug("Citation %s already listed", link_back)
            return match.group(0)
        return f"{CITATIONS_HEADING}\n{match.group(1).strip()}\n{citation_line}\n{match.group(2)}"

    return _CITATIONS_SECTION.sub(_insert, content, count=1)


def format_bibliography_entry(note_content: str) -> Optional[str]:
    """Bibliography line for a reference note.

    Notes with ``title`` and ``author`` frontmatter give ``Author. *Title* (Year).``;
    older notes that embed a fenced ``bibtex`` block give the block contents.
    """
    frontmatter = _FRONTMATTER.match(note_content)
    if frontmatter:
        block = frontmatter.group(1)
        title = re.search(r'title:\s*"([^"]+)"', block)
        author = re.search(r'author:\s*"([^"]+)"', block)
        year = re.search(r"year:\s*(\d+)", block)
        if title and author:
            name = author.group(1)
            name_part = name if name.endswith(".") else f"{name}."
            year_part = f" ({year.group(1)})" if year else ""
            return f"{name_part} *{title.group(1)}*{year_part}."

    bibtex = _BIBTEX_BLOCK.search(note_content)
    if bibtex:
        return re.sub(r"```bibtex|```", "", bibtex.group(0)).strip()
    return None


def append_bibliography(content: str, entries: Sequence[str]) -> str:
    """Append a ``## Bibliography`` section listing ``entries``."""
    return f"{content}\n\n## Bibliography\n" + "\n\n".join(entries)
