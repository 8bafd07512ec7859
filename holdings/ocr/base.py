from abc import ABC, abstractmethod

from PIL import Image

from holdings.ocr.text_boxes import TextBox


class BaseOcrEngine(ABC):
    """Contract for OCR adapters producing line-level text boxes."""

    @abstractmethod
    def detect_text_lines(self, image: Image.Image) -> list[TextBox]:
        """Detect text lines on a page image.

        Returns:
            Text boxes in the engine's reading order.

        Raises:
            OcrError: if the engine fails.
        """
