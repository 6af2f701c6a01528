import pytesseract
from PIL import Image

from regatta_parser.logging.logger import Log
from regatta_parser.ocr.base import BaseOcrEngine
from regatta_parser.ocr.exceptions import OcrError, OcrUnavailableError


class TesseractOcrEngine(BaseOcrEngine):
    """OCR via the Tesseract binary through pytesseract.

    ``initialize`` must run once before ``recognize``; it is the only place
    that touches pytesseract's module-level binary path.
    """

    def __init__(self, languages: str = "deu+eng", tesseract_cmd: str = "") -> None:
        self._languages = languages
        self._tesseract_cmd = tesseract_cmd
        self._ready = False

    @property
    def languages(self) -> str:
        return self._languages

    def initialize(self) -> None:
        if self._ready:
            return
        if self._tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self._tesseract_cmd
        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as exc:
            raise OcrUnavailableError(f"Tesseract is not available: {exc}") from exc
        self._ready = True
        Log.info(f"Tesseract {version} ready (languages: {self._languages})")

    def recognize(self, image: Image.Image) -> str:
        if not self._ready:
            raise OcrUnavailableError("TesseractOcrEngine.initialize() has not been called")
        try:
            return str(pytesseract.image_to_string(image, lang=self._languages))
        except pytesseract.TesseractError as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
