"""Custom exceptions for logos_citations."""


class LogosCitationError(Exception):
    """Base exception for all citation clipping errors."""

    pass


class FieldNotFoundError(LogosCitationError):
    """Raised when a required BibTeX field cannot be located."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class CitationNotFoundError(LogosCitationError):
    """Raised when clipboard text carries no recognizable citation."""

    pass


class ConfigurationError(LogosCitationError):
    """Raised when settings are invalid."""

    pass
