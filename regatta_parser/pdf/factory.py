from collections.abc import Callable

from regatta_parser.config.settings import Settings
from regatta_parser.logging.logger import Log
from regatta_parser.pdf.base import BasePdfExtractor
from regatta_parser.pdf.pdfplumber_adapter import PdfPlumberAdapter
from regatta_parser.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Maps the ``pdf_engine`` setting to a text-layer adapter."""

    ADAPTERS: dict[str, Callable[[float], BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        return cls.for_engine(settings.pdf_engine, line_gap=settings.line_gap_threshold)

    @classmethod
    def for_engine(cls, engine: str, line_gap: float = 5.0) -> BasePdfExtractor:
        """Build the adapter named ``engine`` (case-insensitive).

        Raises:
            ValueError: if no adapter is registered under that name.
        """
        key = engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(key)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        Log.debug("PDF engine selected", engine=key, line_gap=line_gap)
        return adapter_cls(line_gap)
