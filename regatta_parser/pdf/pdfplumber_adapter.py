import io

import pdfplumber
from pdfplumber.page import Page

from regatta_parser.extraction.models import AcquisitionMethod, ExtractedPage
from regatta_parser.pdf.base import BasePdfExtractor
from regatta_parser.pdf.exceptions import PdfExtractionError
from regatta_parser.pdf.layout import TextFragment, assemble_lines


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts positioned words from PDF using pdfplumber."""

    def __init__(self, line_gap: float = 5.0) -> None:
        self._line_gap = line_gap

    def extract(self, pdf_bytes: bytes) -> list[ExtractedPage]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [
                    ExtractedPage(
                        number=number,
                        lines=assemble_lines(self._fragments(page), self._line_gap),
                        method=AcquisitionMethod.EMBEDDED_TEXT,
                    )
                    for number, page in enumerate(pdf.pages, start=1)
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc

    @staticmethod
    def _fragments(page: Page) -> list[TextFragment]:
        # pdfplumber measures from the top; flip to bottom-up like PDF space.
        return [
            TextFragment(
                x=float(word["x0"]),
                y=float(page.height) - float(word["bottom"]),
                text=word["text"],
            )
            for word in page.extract_words(keep_blank_chars=False, use_text_flow=False)
        ]
