"""FastAPI + Tailwind interface for the Logos citation parser.

Run with:
    uvicorn logos_citations.web:app --reload
"""
from __future__ import annotations

from html import escape
from typing import List, Optional

from fastapi import FastAPI, Form, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .bible_linker import link_bible_verses
from .clipboard import parse_logos_clipboard
from .logos_search import build_logos_search_url
from .models import CitationFormat, ParsedClipboard
from .report import render_report
from .utils.logging import setup_logging

app = FastAPI(title="Logos Citations", description="Parse Logos clipboard citations from the browser")


class ParseRequest(BaseModel):
    text: str
    format: str = CitationFormat.AUTO


class CitationModel(BaseModel):
    format: str
    cite_key: str
    raw_citation: str
    author: Optional[str] = None
    title: Optional[str] = None
    cleaned_title: Optional[str] = None
    year: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    url: Optional[str] = None
    isbn: Optional[str] = None
    abstract: Optional[str] = None
    series: Optional[str] = None
    keywords: Optional[List[str]] = None


class ParseResponse(BaseModel):
    main_text: str
    citation: CitationModel
    page: Optional[str] = None
    refly_link: Optional[str] = None


class LinkVersesRequest(BaseModel):
    text: str
    translation: str = "esv"


class TextResponse(BaseModel):
    text: str


class SearchUrlResponse(BaseModel):
    url: str


def _parse(text: str, citation_format: str) -> ParsedClipboard:
    allowed = (CitationFormat.AUTO,) + CitationFormat.ALL
    if citation_format not in allowed:
        raise HTTPException(status_code=400, detail=f"Unsupported citation format: {citation_format}")
    return parse_logos_clipboard(text, citation_format)


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>Logos Citations</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">Logos Citations</h1>
                <p class=\"text-gray-600 mt-2\">Paste text copied from Logos Bible Software to split the quote from its citation and link Bible references.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _form_page(
    report: str | None = None,
    linked_text: str | None = None,
    link_verses: bool = False,
    translation: str = "esv",
) -> str:
    """Render the landing page with optional report output."""

    verses_checkbox = "checked" if link_verses else ""
    format_options = "".join(
        f"<option value=\"{value}\">{value}</option>" for value in (CitationFormat.AUTO, *CitationFormat.ALL)
    )

    text_form = f"""
    <form action=\"/parse-text\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Paste Clipboard Text</h2>
        <p class=\"text-gray-600 text-sm mb-3\">Copy a passage in Logos with its citation (BibTeX, MLA, APA, or Chicago) and paste it here.</p>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">Clipboard text</label>
        <textarea name=\"text\" required placeholder=\"Paste quoted text followed by its citation...\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm\"></textarea>
        <div class=\"flex items-center gap-4 mt-3\">
            <label for=\"format\" class=\"text-sm text-gray-700\">Citation format</label>
            <select id=\"format\" name=\"format\" class=\"border border-gray-300 rounded-md text-sm p-1\">{format_options}</select>
        </div>
        <div class=\"flex items-center gap-2 mt-3\">
            <input type=\"checkbox\" id=\"link_verses\" name=\"link_verses\" value=\"1\" {verses_checkbox} class=\"h-4 w-4 text-indigo-600 border-gray-300 rounded\" />
            <label for=\"link_verses\" class=\"text-sm text-gray-700\">Link Bible references to ref.ly</label>
            <input type=\"text\" name=\"translation\" value=\"{escape(translation)}\" class=\"ml-2 w-24 border border-gray-300 rounded-md text-sm p-1\" />
        </div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Parse Citation</button>
    </form>
    """

    report_block = ""
    if report:
        report_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Citation Report</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(report)}</pre>
        </div>
        """

    linked_block = ""
    if linked_text:
        linked_block = f"""
        <div class=\"mt-4\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Linked Markdown</h2>
            <pre class=\"mt-3 bg-gray-100 text-gray-800 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(linked_text)}</pre>
        </div>
        """

    return _layout(text_form + report_block + linked_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the clipboard submission form."""

    return HTMLResponse(_form_page())


@app.post("/parse-text", response_class=HTMLResponse)
async def parse_text(
    text: str = Form(...),
    format: str = Form(CitationFormat.AUTO),
    link_verses: bool = Form(False),
    translation: str = Form("esv"),
) -> HTMLResponse:
    """Parse pasted clipboard text and return a formatted report."""

    parsed = _parse(text, format)
    linked_text = None
    if link_verses and parsed.main_text:
        linked_text = link_bible_verses(parsed.main_text, translation)
    return HTMLResponse(
        _form_page(render_report(parsed), linked_text=linked_text, link_verses=link_verses, translation=translation)
    )


@app.post("/api/parse", response_model=ParseResponse)
async def api_parse(request: ParseRequest) -> ParseResponse:
    """Parse clipboard text into quote, citation fields, page, and resource link."""

    parsed = _parse(request.text, request.format)
    if parsed.citation is None:
        raise HTTPException(status_code=422, detail="Could not find citation in clipboard text")
    return ParseResponse(**parsed.to_dict())


@app.post("/api/link-verses", response_model=TextResponse)
async def api_link_verses(request: LinkVersesRequest) -> TextResponse:
    """Rewrite Bible references in ``text`` as ref.ly markdown links."""

    return TextResponse(text=link_bible_verses(request.text, request.translation))


@app.get("/api/search-url", response_model=SearchUrlResponse)
async def api_search_url(
    q: str = Query(..., min_length=1),
    search_type: str = Query("lexical", alias="type", pattern="^(lexical|semantic)$"),
) -> SearchUrlResponse:
    """Build a ``logos4:Search`` URI for the query."""

    return SearchUrlResponse(url=build_logos_search_url(q, search_type))


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    setup_logging()
    uvicorn.run("logos_citations.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
