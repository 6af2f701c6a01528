from collections.abc import Iterator

import pymupdf
from PIL import Image

from regatta_parser.ocr.exceptions import OcrError


class PageRasterizer:
    """Renders PDF pages to Pillow images, one page at a time."""

    def __init__(self, scale: float = 2.0) -> None:
        self._scale = scale

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return int(doc.page_count)
        except Exception as exc:
            raise OcrError(f"Cannot open PDF for rendering: {exc}") from exc

    def render(self, pdf_bytes: bytes) -> Iterator[tuple[int, Image.Image]]:
        """Yield ``(page_number, image)`` pairs sequentially.

        Only the page currently yielded is held in memory; the caller should
        drop its reference before asking for the next one.
        """
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise OcrError(f"Cannot open PDF for rendering: {exc}") from exc

        matrix = pymupdf.Matrix(self._scale, self._scale)
        with doc:
            for number, page in enumerate(doc, start=1):
                try:
                    pix = page.get_pixmap(matrix=matrix, alpha=False)
                    image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
                except Exception as exc:
                    raise OcrError(f"Cannot render page {number}: {exc}") from exc
                del pix
                yield number, image
