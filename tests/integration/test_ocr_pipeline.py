import asyncio
import base64

import pytest
import pytesseract

from regatta_parser.config.settings import Settings
from regatta_parser.extraction.models import AcquisitionMethod, ProgressUpdate
from regatta_parser.pdf.pdfplumber_adapter import PdfPlumberAdapter
from regatta_parser.processor.service import ResultExtractionService


def _tesseract_available() -> bool:
    try:
        pytesseract.get_tesseract_version()
    except (pytesseract.TesseractNotFoundError, OSError):
        return False
    return True


pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not _tesseract_available(), reason="tesseract binary not installed"),
]


class TestOcrPipeline:
    def test_scanned_sheet_has_no_text_layer(self, scanned_results_pdf_bytes: bytes) -> None:
        pages = PdfPlumberAdapter().extract(scanned_results_pdf_bytes)
        assert pages[0].lines == []

    def test_rank_is_read_through_ocr(self, scanned_results_pdf_bytes: bytes) -> None:
        service = ResultExtractionService(Settings(ocr_languages="eng"))
        payload = base64.b64encode(scanned_results_pdf_bytes).decode("ascii")
        updates: list[ProgressUpdate] = []

        result = asyncio.run(
            service.extract_result(payload, "GER 12345", on_progress=updates.append)
        )

        assert result.acquisition_method is AcquisitionMethod.OCR
        assert result.participant is not None
        assert result.participant.rank == 4
        assert [u.status for u in updates][:2] == ["Starting OCR...", "OCR page 1 of 1..."]
