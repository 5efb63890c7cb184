import pytest

from logos_citations.models import CitationFormat, ParsedCitation
from logos_citations.notes import (
    append_bibliography,
    append_citation_to_note,
    build_link_back,
    format_bibliography_entry,
    generate_citation_frontmatter,
    generate_metadata_frontmatter,
    generate_note_path,
    new_reference_note,
    sanitize_note_name,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Book Title / Subtitle", "Book Title  Subtitle"),
        ("Title\\Name", "TitleName"),
        ("Theology: An Introduction", "Theology An Introduction"),
        ("Book: Title/Subtitle\\Name", "Book TitleSubtitleName"),
        ("Book's Title - 2nd Edition", "Book's Title - 2nd Edition"),
    ],
)
def test_sanitize_note_name(name, expected):
    assert sanitize_note_name(name) == expected


def test_generate_note_path():
    assert generate_note_path("My Note", "refs") == "refs/My Note.md"
    assert generate_note_path("My Note", "") == "My Note.md"
    assert generate_note_path("Book: Title", "refs") == "refs/Book Title.md"


def test_metadata_frontmatter():
    result = generate_metadata_frontmatter(["tags", "related notes", "status"])

    assert result.startswith("---\n")
    assert "tags: \n" in result
    assert "related notes: \n" in result
    assert result.endswith("---\n\n")
    assert generate_metadata_frontmatter([]) == ""


def test_citation_frontmatter_fields():
    citation = ParsedCitation(
        format=CitationFormat.BIBTEX,
        cite_key="smith2020",
        raw_citation="@book{smith2020}",
        author="John Smith",
        title="Systematic Theology",
        year="2020",
        pages="123",
        publisher="Academic Press",
    )

    result = generate_citation_frontmatter(citation)

    assert result == (
        "---\n"
        'title: "Systematic Theology"\n'
        'author: "John Smith"\n'
        "year: 2020\n"
        'publisher: "Academic Press"\n'
        'cite-key: "smith2020"\n'
        "citation-format: bibtex\n"
        "---\n\n"
    )


def test_citation_frontmatter_skips_missing_fields_and_adds_custom_ones():
    citation = ParsedCitation(format=CitationFormat.APA, cite_key="doe2021", raw_citation="", title="Some Title")

    result = generate_citation_frontmatter(citation, ["tags", "related notes"])

    assert 'title: "Some Title"' in result
    assert "author:" not in result
    assert "year:" not in result
    assert "publisher:" not in result
    assert "tags: \n" in result
    assert "related notes: \n" in result


def test_citation_frontmatter_escapes_quotes():
    citation = ParsedCitation(
        format=CitationFormat.BIBTEX, cite_key="test", raw_citation="", title='Book with "Quoted" Title'
    )

    assert 'title: "Book with \\"Quoted\\" Title"' in generate_citation_frontmatter(citation)


def test_build_link_back():
    assert build_link_back("Sermon", "smith-2020-1") == "[[Sermon#^smith-2020-1]]![[Sermon#^smith-2020-1]]"
    assert build_link_back("Sermon", "smith-2020-2", "42").endswith(" → p. 42")


def test_new_reference_note():
    content = new_reference_note("---\ncite-key: \"k\"\n---\n\n", "[[S#^k-1]]![[S#^k-1]]")

    assert content == '---\ncite-key: "k"\n---\n\n## Citations\n\n- [[S#^k-1]]![[S#^k-1]]'


def test_append_citation_inserts_before_next_heading():
    content = "---\n---\n\n## Citations\n\n- first\n\n## Notes\nmine"

    updated = append_citation_to_note(content, "second")

    assert updated == "---\n---\n\n## Citations\n- first\n\n- second\n\n## Notes\nmine"


def test_append_citation_skips_duplicates():
    content = "## Citations\n\n- first"

    assert append_citation_to_note(content, "first") == content


def test_append_citation_creates_missing_section():
    assert append_citation_to_note("Some notes\n", "link") == "Some notes\n\n## Citations\n\n- link"


def test_bibliography_entry_from_frontmatter():
    note = '---\ntitle: "Systematic Theology"\nauthor: "John Smith"\nyear: 2020\n---\n\n## Citations'

    assert format_bibliography_entry(note) == "John Smith. *Systematic Theology* (2020)."


def test_bibliography_entry_from_legacy_bibtex_block():
    note = "# Book\n\n```bibtex\n@book{k, title={T}}\n```\n"

    assert format_bibliography_entry(note) == "@book{k, title={T}}"
    assert format_bibliography_entry("plain note") is None


def test_append_bibliography():
    assert append_bibliography("Body", ["A.", "B."]) == "Body\n\n## Bibliography\nA.\n\nB."
