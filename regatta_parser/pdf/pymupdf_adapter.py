import pymupdf

from regatta_parser.extraction.models import AcquisitionMethod, ExtractedPage
from regatta_parser.pdf.base import BasePdfExtractor
from regatta_parser.pdf.exceptions import PdfExtractionError
from regatta_parser.pdf.layout import TextFragment, assemble_lines


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts positioned words from PDF using PyMuPDF."""

    def __init__(self, line_gap: float = 5.0) -> None:
        self._line_gap = line_gap

    def extract(self, pdf_bytes: bytes) -> list[ExtractedPage]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [
                    ExtractedPage(
                        number=number,
                        lines=assemble_lines(self._fragments(page), self._line_gap),
                        method=AcquisitionMethod.EMBEDDED_TEXT,
                    )
                    for number, page in enumerate(doc, start=1)
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc

    @staticmethod
    def _fragments(page: pymupdf.Page) -> list[TextFragment]:
        height = page.rect.height
        # words: (x0, y0, x1, y1, text, block_no, line_no, word_no), top-down
        return [
            TextFragment(x=float(word[0]), y=float(height - word[3]), text=str(word[4]))
            for word in page.get_text("words")
        ]
