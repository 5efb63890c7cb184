import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from logos_citations.config import Settings
from logos_citations.utils.logging import PACKAGE_LOGGER


@pytest.fixture()
def bibtex_clipboard() -> str:
    """Quote followed by a BibTeX entry, as Logos copies it with BibTeX citations enabled."""

    return (
        "This is a quote from the book.\n"
        "@book{smith2020,\n"
        "  author = {John Smith},\n"
        "  title = {Systematic Theology},\n"
        "  pages = {123},\n"
        "}"
    )


@pytest.fixture()
def mla_clipboard() -> str:
    return (
        "Grace is the unmerited favor of God.\n"
        "Smith, John. [_Systematic Theology_](https://ref.ly/logosres/systheo). Academic Press, 2020."
    )


@pytest.fixture()
def apa_clipboard() -> str:
    return (
        "Grace is the unmerited favor of God (John 1:16).\n"
        "Smith, J. (2020). _Systematic theology_. Academic Press. p. 42"
    )


@pytest.fixture()
def chicago_clipboard() -> str:
    return (
        "Faith is the assurance of things hoped for.\n"
        "John Smith, [_Systematic Theology_](https://ref.ly/logosres/systheo) "
        "(Grand Rapids: Academic Press, 2020)."
    )


@pytest.fixture()
def settings() -> Settings:
    return Settings(citation_folder="References", auto_detect_bible_verses=True)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
