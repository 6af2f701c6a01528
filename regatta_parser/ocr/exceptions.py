class OcrError(Exception):
    """Raised when a page cannot be rasterized or recognized."""


class OcrUnavailableError(OcrError):
    """Raised when the OCR engine is not installed or not initialized."""
