import pytest

from logos_citations.formatter import CalloutFormatter, clean_formatted_text, page_label
from logos_citations.models import CitationFormat, ParsedCitation


@pytest.fixture()
def citation() -> ParsedCitation:
    return ParsedCitation(
        format=CitationFormat.APA,
        cite_key="smith-2020",
        raw_citation="Smith, J. (2020). _Systematic theology_. Academic Press.",
        author="Smith, J.",
        title="Systematic theology",
        year="2020",
    )


def test_clean_formatted_text_converts_markup():
    assert clean_formatted_text("see __1__ and _grace_") == "see <sup>1</sup> and *grace*"


def test_clean_formatted_text_is_idempotent():
    once = clean_formatted_text("_a_ b __2__ _c_")

    assert clean_formatted_text(once) == once


@pytest.mark.parametrize(
    "page, label",
    [
        (None, ""),
        ("", ""),
        ("42", ", p. 42"),
        ("10-15", ", pp. 10-15"),
        ("10–15", ", pp. 10–15"),
        ("p. 42", ", p. 42"),
        ("pp. 10-15", ", pp. 10-15"),
    ],
)
def test_page_label(page, label):
    assert page_label(page) == label


def test_callout_with_full_citation(citation):
    formatter = CalloutFormatter()

    callout = formatter.format(
        "Line one\nLine two",
        citation,
        note_path="References/Systematic theology - References.md",
        note_name="Systematic theology - References",
        block_id="smith-2020-1",
        page="42",
    )

    assert callout.splitlines() == [
        "> [!cite] Citation Reference",
        "> Line one",
        "> Line two",
        "> ",
        "> Smith, J. (2020). _Systematic theology_. Academic Press.",
        "> ",
        "> [[References/Systematic theology - References.md|Systematic theology - References, p. 42]] ^smith-2020-1",
    ]


def test_callout_appends_resource_link_to_citation(citation):
    formatter = CalloutFormatter(title="Quote", include_refly_link=True)

    callout = formatter.format(
        "Text", citation, note_path="n.md", note_name="n", block_id="b-1", refly_link="https://ref.ly/x"
    )

    assert callout.startswith("> [!cite] Quote\n")
    assert "Academic Press. [Resource Link](https://ref.ly/x)" in callout


def test_callout_without_citation_shows_link_alone(citation):
    formatter = CalloutFormatter(show_full_citation=False, include_refly_link=True)

    callout = formatter.format(
        "Text", citation, note_path="n.md", note_name="n", block_id="b-1", refly_link="https://ref.ly/x"
    )

    assert "Academic Press" not in callout
    assert "> [Resource Link](https://ref.ly/x)" in callout.splitlines()


def test_resource_link_is_omitted_unless_enabled(citation):
    formatter = CalloutFormatter(show_full_citation=False)

    callout = formatter.format(
        "Text", citation, note_path="n.md", note_name="n", block_id="b-1", refly_link="https://ref.ly/x"
    )

    assert callout.splitlines() == ["> [!cite] Citation Reference", "> Text", "> [[n.md|n]] ^b-1"]
