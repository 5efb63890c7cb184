import pytest

from logos_citations.app import CitationReferenceApp
from logos_citations.config import Settings
from logos_citations.exceptions import CitationNotFoundError


def test_paste_citation_builds_callout_and_note(settings, apa_clipboard):
    app = CitationReferenceApp(settings)

    pasted = app.paste_citation(apa_clipboard, "Sermon.md")

    assert pasted.note_name == "Systematic theology - References"
    assert pasted.note_path == "References/Systematic theology - References.md"
    assert pasted.block_id == "smith-2020-1"
    assert pasted.link_back == "[[Sermon#^smith-2020-1]]![[Sermon#^smith-2020-1]] → p. 42"
    assert pasted.clipboard.main_text == (
        "Grace is the unmerited favor of God ([John 1:16](https://ref.ly/Jn1.16;esv))."
    )
    lines = pasted.callout.splitlines()
    assert lines[0] == "> [!cite] Citation Reference"
    assert lines[1] == "> Grace is the unmerited favor of God ([John 1:16](https://ref.ly/Jn1.16;esv))."
    assert lines[-1] == (
        "> [[References/Systematic theology - References.md|Systematic theology - References, p. 42]] ^smith-2020-1"
    )
    assert pasted.markdown.endswith("\n\n")


def test_block_ids_count_per_source_note(settings, apa_clipboard):
    app = CitationReferenceApp(settings)

    first = app.paste_citation(apa_clipboard, "Sermon.md")
    second = app.paste_citation(apa_clipboard, "Sermon.md")
    other = app.paste_citation(apa_clipboard, "Lesson.md")

    assert [first.block_id, second.block_id, other.block_id] == ["smith-2020-1", "smith-2020-2", "smith-2020-1"]
    assert settings.citation_counters == {"Sermon.md": 2, "Lesson.md": 1}


def test_verse_linking_can_be_disabled(apa_clipboard):
    app = CitationReferenceApp(Settings(auto_detect_bible_verses=False))

    pasted = app.paste_citation(apa_clipboard, "Sermon.md")

    assert "ref.ly/Jn" not in pasted.callout
    assert pasted.note_path == "Systematic theology - References.md"


def test_translation_setting_reaches_links(apa_clipboard):
    app = CitationReferenceApp(Settings(bible_translation="nasb"))

    pasted = app.paste_citation(apa_clipboard, "Sermon.md")

    assert "https://ref.ly/Jn1.16;nasb95" in pasted.callout


def test_markdown_rendering_supplies_formatted_quote(settings):
    plain = "Grace abounds.\nSmith, J. (2020). Systematic theology. Academic Press."
    markdown = "Grace _abounds_.\nSmith, J. (2020). _Systematic theology_. Academic Press. p. 9"
    app = CitationReferenceApp(settings)

    pasted = app.paste_citation(plain, "Sermon.md", markdown_text=markdown)

    assert pasted.clipboard.main_text == "Grace *abounds*."
    assert pasted.clipboard.citation.raw_citation == "Smith, J. (2020). Systematic theology. Academic Press."
    assert pasted.clipboard.page == "p. 9"


def test_markdown_rendering_fills_missing_citation(settings):
    app = CitationReferenceApp(settings)

    pasted = app.paste_citation(
        "Grace abounds.",
        "Sermon.md",
        markdown_text="Grace abounds.\n@book{smith2020, title = {Systematic Theology}, pages = {12}}",
    )

    assert pasted.clipboard.citation.cite_key == "smith2020"
    assert pasted.clipboard.page == "12"


def test_missing_citation_raises(settings):
    app = CitationReferenceApp(settings)

    with pytest.raises(CitationNotFoundError):
        app.paste_citation("Just a sentence with no citation", "Sermon.md")

    assert settings.citation_counters == {}


def test_full_citation_and_resource_link_settings(apa_clipboard):
    settings = Settings(show_full_citation_in_callout=False, include_refly_link=True, custom_callout_title="Quote")
    clipboard = apa_clipboard.replace(
        "(John 1:16).", "(John 1:16). (Resource Link: https://ref.ly/logosres/systheo?art=a1)"
    )
    app = CitationReferenceApp(settings)

    pasted = app.paste_citation(clipboard, "Sermon.md")

    lines = pasted.callout.splitlines()
    assert lines[0] == "> [!cite] Quote"
    assert "> [Resource Link](https://ref.ly/logosres/systheo?art=a1)" in lines
    assert not any("Academic Press" in line for line in lines)
    assert "Resource Link" not in pasted.clipboard.main_text


def test_reference_note_created_then_appended(settings, apa_clipboard):
    app = CitationReferenceApp(settings)
    first = app.paste_citation(apa_clipboard, "Sermon.md")
    second = app.paste_citation(apa_clipboard, "Sermon.md")

    content = app.reference_note_content(first)
    updated = app.reference_note_content(second, existing=content)

    assert content.startswith('---\ntitle: "Systematic theology"\nauthor: "Smith, J."\nyear: 2020\n')
    assert content.endswith("## Citations\n\n- [[Sermon#^smith-2020-1]]![[Sermon#^smith-2020-1]] → p. 42")
    assert updated.count("- [[Sermon#^") == 2
    assert app.reference_note_content(second, existing=updated) == updated


def test_custom_metadata_fields_in_new_notes(apa_clipboard):
    settings = Settings(use_custom_metadata=True, custom_metadata_fields=["tags"])
    app = CitationReferenceApp(settings)

    pasted = app.paste_citation(apa_clipboard, "Sermon.md")

    assert "tags: \n---\n\n" in app.reference_note_content(pasted)


def test_bibliography_from_reference_notes(settings, apa_clipboard):
    app = CitationReferenceApp(settings)
    note = app.reference_note_content(app.paste_citation(apa_clipboard, "Sermon.md"))

    result = app.bibliography("Sermon body", [note, "no metadata here"])

    assert result == "Sermon body\n\n## Bibliography\nSmith, J. *Systematic theology* (2020)."


def test_bibliography_without_entries_raises(settings):
    app = CitationReferenceApp(settings)

    with pytest.raises(CitationNotFoundError):
        app.bibliography("Body", ["plain"])
