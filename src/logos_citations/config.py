"""Configuration management for logos_citations."""
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .models import CitationFormat

ENV_PREFIX = "LOGOS_CITATIONS_"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> List[str]:
    value = os.getenv(ENV_PREFIX + name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Citation clipping settings.

    Attributes:
        citation_folder: Vault folder for reference notes ('' for the vault root)
        custom_callout_title: Callout title ('' uses "Citation Reference")
        auto_detect_bible_verses: Link scripture references in pasted quotes
        bible_translation: Translation used for verse links ('esv', 'nasb', ...)
        use_custom_metadata: Add custom_metadata_fields to new reference notes
        custom_metadata_fields: Empty frontmatter fields for new reference notes
        show_full_citation_in_callout: Quote the raw citation inside the callout
        include_refly_link: Add the ref.ly resource link to the callout
        citation_format: 'auto' or one of bibtex, mla, apa, chicago
        citation_counters: Block id counter per source note
    """

    citation_folder: str = ""
    custom_callout_title: str = ""
    auto_detect_bible_verses: bool = True
    bible_translation: str = "esv"
    use_custom_metadata: bool = False
    custom_metadata_fields: List[str] = field(default_factory=list)
    show_full_citation_in_callout: bool = True
    include_refly_link: bool = False
    citation_format: str = CitationFormat.AUTO
    citation_counters: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        allowed = (CitationFormat.AUTO,) + CitationFormat.ALL
        if self.citation_format not in allowed:
            raise ConfigurationError(
                f"Unsupported citation format {self.citation_format!r}; expected one of {', '.join(allowed)}"
            )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Load settings from ``LOGOS_CITATIONS_*`` environment variables.

        Args:
            env_file: Path to .env file (optional)

        Returns:
            Settings instance with values from environment
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            citation_folder=os.getenv(ENV_PREFIX + "FOLDER", "").strip(),
            custom_callout_title=os.getenv(ENV_PREFIX + "CALLOUT_TITLE", ""),
            auto_detect_bible_verses=_env_bool("AUTO_DETECT_BIBLE_VERSES", True),
            bible_translation=os.getenv(ENV_PREFIX + "BIBLE_TRANSLATION", "esv"),
            use_custom_metadata=_env_bool("USE_CUSTOM_METADATA", False),
            custom_metadata_fields=_env_list("CUSTOM_METADATA_FIELDS"),
            show_full_citation_in_callout=_env_bool("SHOW_FULL_CITATION", True),
            include_refly_link=_env_bool("INCLUDE_REFLY_LINK", False),
            citation_format=os.getenv(ENV_PREFIX + "CITATION_FORMAT", CitationFormat.AUTO).strip().lower(),
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Settings":
        """Load settings from a dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    @property
    def metadata_fields(self) -> List[str]:
        return list(self.custom_metadata_fields) if self.use_custom_metadata else []
