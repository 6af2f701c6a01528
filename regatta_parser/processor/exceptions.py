class ExtractionError(Exception):
    """Base exception for all extraction pipeline errors."""


class DocumentUnreadableError(ExtractionError):
    """Raised when an uploaded document cannot be decoded or opened."""