from abc import ABC, abstractmethod

from regatta_parser.extraction.models import ExtractedPage


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> list[ExtractedPage]:
        """Extract the embedded text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One ExtractedPage per page, lines in reading order. Pages without
            a text layer come back with no lines.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
