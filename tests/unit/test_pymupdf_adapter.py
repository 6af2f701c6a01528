import pytest

from regatta_parser.extraction.models import AcquisitionMethod
from regatta_parser.pdf.exceptions import PdfExtractionError
from regatta_parser.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_pages(self, sample_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        pages = adapter.extract(sample_pdf_bytes)
        assert len(pages) == 1
        assert pages[0].lines == ["Hello PDF World"]
        assert pages[0].method is AcquisitionMethod.EMBEDDED_TEXT

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        pages = adapter.extract(multi_page_pdf_bytes)
        assert pages[0].lines == ["Page one content"]
        assert pages[1].lines == ["Page two content"]

    def test_extract_rebuilds_reading_order(self, scattered_line_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        pages = adapter.extract(scattered_line_pdf_bytes)
        assert pages[0].lines == ["17 GER12345 Max Mustermann", "18 GER54321"]

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PyMuPdfAdapter()
        with pytest.raises(PdfExtractionError):
            adapter.extract(b"not a pdf")
