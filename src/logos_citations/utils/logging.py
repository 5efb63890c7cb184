"""Logging setup for the command line and web entry points."""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "logos_citations"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Attach handlers to the ``logos_citations`` logger.

    Without ``verbose`` only warnings are shown; with it the parser's debug
    trail (detected format, citation start line, unrecognized books) is
    written to stderr and, when given, to ``log_file``. Calling it again
    replaces the handlers installed by the previous call.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(format_string)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
