# Errors a parse can end with. Both propagate to the caller; nothing is retried.


class AnalysisModelError(Exception):
    """Base class for the errors raised by this package."""


class ParsingException(AnalysisModelError):
    """The input could not be interpreted at all (unreadable, undecodable or malformed)."""


class ParsingCanceledException(AnalysisModelError):
    """The caller asked the parse to stop before it completed."""
