"""OCR stage used when a PDF has no usable text layer."""

from regatta_parser.extraction.models import (
    AcquisitionMethod,
    ExtractedPage,
    ProgressCallback,
    ProgressUpdate,
)
from regatta_parser.logging.logger import Log
from regatta_parser.ocr.base import BaseOcrEngine
from regatta_parser.ocr.exceptions import OcrError
from regatta_parser.ocr.rasterizer import PageRasterizer


class OcrFallback:
    """Rasterizes pages one by one and runs OCR on each."""

    def __init__(self, engine: BaseOcrEngine, rasterizer: PageRasterizer) -> None:
        self._engine = engine
        self._rasterizer = rasterizer

    def run(
        self,
        pdf_bytes: bytes,
        on_progress: ProgressCallback | None = None,
    ) -> list[ExtractedPage] | None:
        """OCR every page of the document.

        Returns:
            Recognized pages, or None if the engine or the renderer failed.
            Failures are logged and never raised.
        """
        _notify(on_progress, "Starting OCR...")
        try:
            self._engine.initialize()
            total = self._rasterizer.page_count(pdf_bytes)
            Log.info("OCR started", pages=total)
            pages: list[ExtractedPage] = []
            for number, image in self._rasterizer.render(pdf_bytes):
                _notify(on_progress, f"OCR page {number} of {total}...")
                text = self._engine.recognize(image)
                del image
                pages.append(
                    ExtractedPage(
                        number=number,
                        lines=[line for line in text.splitlines() if line.strip()],
                        method=AcquisitionMethod.OCR,
                    )
                )
        except OcrError as exc:
            Log.error(f"OCR failed: {exc}")
            return None
        except Exception as exc:
            Log.exception(f"OCR engine crashed: {exc}")
            return None

        Log.info("OCR complete", pages=len(pages), lines=sum(len(p.lines) for p in pages))
        return pages


def _notify(on_progress: ProgressCallback | None, status: str) -> None:
    if on_progress is None:
        return
    try:
        on_progress(ProgressUpdate(status=status))
    except Exception as exc:
        Log.warning(f"Progress callback raised, ignoring: {exc}")
