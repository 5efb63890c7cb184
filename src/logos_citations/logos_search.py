"""Helpers for the ``logos4:`` URI scheme."""
from __future__ import annotations

from urllib.parse import quote

SEARCH_TYPES = {"lexical": "Lexical", "semantic": "Semantic"}

# Characters encodeURIComponent leaves alone besides letters and digits.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_logos_search_url(query: str, search_type: str = "lexical") -> str:
    """Build a ``logos4:Search`` URI; anything other than ``semantic`` runs a lexical search."""
    type_param = SEARCH_TYPES["semantic"] if search_type == "semantic" else SEARCH_TYPES["lexical"]
    return f"logos4:Search;t={type_param};s={quote(query, safe=_URI_COMPONENT_SAFE)}"
