"""Command line interface for parsing Logos clipboard text."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .app import CitationReferenceApp, PastedCitation
from .bible_linker import link_bible_verses
from .config import Settings
from .exceptions import CitationNotFoundError, LogosCitationError
from .models import CitationFormat, ParsedClipboard
from .report import render_report
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _build_result(parsed: ParsedClipboard, pasted: PastedCitation | None = None) -> Dict[str, Any]:
    result = parsed.to_dict()
    if pasted is not None:
        result["callout"] = {
            "note_name": pasted.note_name,
            "note_path": pasted.note_path,
            "block_id": pasted.block_id,
            "link_back": pasted.link_back,
            "markdown": pasted.callout,
        }
    return result


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse Logos clipboard text into citation fields")
    parser.add_argument("input", help="Path to a text file with copied Logos text, or - for stdin")
    parser.add_argument(
        "--format",
        default=None,
        choices=[CitationFormat.AUTO, *CitationFormat.ALL],
        help="Citation format to assume (defaults to the configured format, usually auto-detect)",
    )
    parser.add_argument(
        "--link-verses",
        action="store_true",
        help="Link Bible references in the quoted text to ref.ly",
    )
    parser.add_argument(
        "--translation",
        default=None,
        help="Bible translation for verse links (esv, nasb, niv, lsb, ...)",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write the parsed clipboard as JSON",
    )
    parser.add_argument(
        "--callout-output",
        type=Path,
        help="Write the markdown citation callout to a file",
    )
    parser.add_argument(
        "--source-note",
        default="Untitled.md",
        help="Name of the note the callout is pasted into (used for block ids and link backs)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parsing decisions to stderr",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file",
    )
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        settings = Settings.from_env()
    except LogosCitationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    if args.format:
        settings.citation_format = args.format
    if args.translation:
        settings.bible_translation = args.translation
    settings.auto_detect_bible_verses = args.link_verses

    citation_app = CitationReferenceApp(settings=settings)
    text = _read_input(args.input)

    parsed = citation_app.parse(text)
    if args.link_verses and parsed.main_text:
        parsed = ParsedClipboard(
            main_text=link_bible_verses(parsed.main_text, settings.bible_translation),
            citation=parsed.citation,
            page=parsed.page,
            refly_link=parsed.refly_link,
        )
    print(render_report(parsed))

    pasted = None
    if args.callout_output:
        try:
            pasted = citation_app.paste_citation(text, args.source_note)
        except CitationNotFoundError as exc:
            logger.debug("Skipping callout output: %s", exc)
        else:
            args.callout_output.write_text(pasted.markdown, encoding="utf-8")

    if args.json_output:
        result = _build_result(parsed, pasted)
        args.json_output.write_text(json.dumps(result, indent=2, ensure_ascii=False), encoding="utf-8")

    if parsed.citation is None:
        print("Could not find citation in input.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
