from typing import Any

import pytesseract
from PIL import Image

from holdings.logging.logger import Log
from holdings.ocr.base import BaseOcrEngine
from holdings.ocr.exceptions import OcrError
from holdings.ocr.text_boxes import Rect, TextBox

_LINE_LEVEL = 4
_WORD_LEVEL = 5

_LineKey = tuple[int, int, int, int]


def configure_tesseract(tesseract_cmd: str) -> None:
    """Point pytesseract at a tesseract binary.

    pytesseract keeps the binary path as module state, so this is process-wide
    and belongs to startup, not to individual engines. An empty path keeps the
    PATH lookup.
    """
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        Log.debug("Tesseract binary configured", path=tesseract_cmd)


class TesseractOcrEngine(BaseOcrEngine):
    """Line-level OCR using Tesseract through pytesseract."""

    def __init__(self, lang: str = "eng") -> None:
        self._lang = lang

    def detect_text_lines(self, image: Image.Image) -> list[TextBox]:
        try:
            data = pytesseract.image_to_data(
                image, lang=self._lang, output_type=pytesseract.Output.DICT
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise OcrError(f"tesseract failed: {exc}") from exc

        boxes = _group_lines(data)
        Log.debug(f"Tesseract detected {len(boxes)} text lines")
        return boxes


def _group_lines(data: dict[str, list[Any]]) -> list[TextBox]:
    """Collapse word rows of ``image_to_data`` output into their text lines.

    Line rows (level 4) carry the line rectangle; word rows (level 5) carry
    the text. Both share the (page, block, paragraph, line) numbering.
    """
    rects: dict[_LineKey, Rect] = {}
    words: dict[_LineKey, list[str]] = {}
    for i in range(len(data["level"])):
        level = int(data["level"][i])
        key: _LineKey = (
            int(data["page_num"][i]),
            int(data["block_num"][i]),
            int(data["par_num"][i]),
            int(data["line_num"][i]),
        )
        if level == _LINE_LEVEL:
            left = int(data["left"][i])
            top = int(data["top"][i])
            rects[key] = Rect(
                left,
                top,
                left + int(data["width"][i]),
                top + int(data["height"][i]),
            )
            words.setdefault(key, [])
        elif level == _WORD_LEVEL:
            text = str(data["text"][i] or "").strip()
            if text:
                words.setdefault(key, []).append(text)

    return [
        TextBox(text=" ".join(words[key]), rect=rect)
        for key, rect in rects.items()
        if words.get(key)
    ]
