from abc import ABC, abstractmethod

from PIL import Image


class BaseOcrEngine(ABC):
    """Contract for OCR engines used by the fallback stage."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the engine once, before the first page is recognized.

        Raises:
            OcrUnavailableError: if the engine cannot be used on this host.
        """

    @abstractmethod
    def recognize(self, image: Image.Image) -> str:
        """Return the text recognized on a rendered page.

        Raises:
            OcrError: on any recognition failure.
        """
