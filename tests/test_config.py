import os

import pytest

from logos_citations.config import Settings
from logos_citations.exceptions import ConfigurationError


def test_defaults():
    settings = Settings()

    assert settings.citation_folder == ""
    assert settings.bible_translation == "esv"
    assert settings.auto_detect_bible_verses is True
    assert settings.show_full_citation_in_callout is True
    assert settings.include_refly_link is False
    assert settings.citation_format == "auto"
    assert settings.citation_counters == {}
    assert settings.metadata_fields == []


def test_invalid_citation_format_is_rejected():
    with pytest.raises(ConfigurationError, match="Unsupported citation format"):
        Settings(citation_format="harvard")


def test_from_dict_ignores_unknown_keys():
    settings = Settings.from_dict({"bible_translation": "niv", "show_ribbon_icon": True})

    assert settings.bible_translation == "niv"
    assert not hasattr(settings, "show_ribbon_icon")


def test_custom_metadata_fields_only_apply_when_enabled():
    assert Settings(custom_metadata_fields=["tags"]).metadata_fields == []
    assert Settings(use_custom_metadata=True, custom_metadata_fields=["tags"]).metadata_fields == ["tags"]


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOGOS_CITATIONS_FOLDER", " Sources ")
    monkeypatch.setenv("LOGOS_CITATIONS_BIBLE_TRANSLATION", "lsb")
    monkeypatch.setenv("LOGOS_CITATIONS_AUTO_DETECT_BIBLE_VERSES", "false")
    monkeypatch.setenv("LOGOS_CITATIONS_CUSTOM_METADATA_FIELDS", "tags, status,")
    monkeypatch.setenv("LOGOS_CITATIONS_CITATION_FORMAT", "MLA")

    settings = Settings.from_env()

    assert settings.citation_folder == "Sources"
    assert settings.bible_translation == "lsb"
    assert settings.auto_detect_bible_verses is False
    assert settings.custom_metadata_fields == ["tags", "status"]
    assert settings.citation_format == "mla"


def test_from_env_reads_dotenv_file(tmp_path):
    env_file = tmp_path / "citations.env"
    env_file.write_text("LOGOS_CITATIONS_CALLOUT_TITLE=Quote\n")

    try:
        settings = Settings.from_env(str(env_file))
    finally:
        os.environ.pop("LOGOS_CITATIONS_CALLOUT_TITLE", None)

    assert settings.custom_callout_title == "Quote"
