"""Utility modules for logos_citations."""

from .logging import setup_logging

__all__ = ["setup_logging"]
