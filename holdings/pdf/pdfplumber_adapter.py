import io

import pdfplumber
from PIL import Image

from holdings.pdf.base import BaseRasterizer, RasterDocument
from holdings.pdf.exceptions import RenderError


class PdfPlumberDocument(RasterDocument):
    """RasterDocument backed by a pdfplumber PDF."""

    def __init__(self, pdf: pdfplumber.PDF, dpi: int) -> None:
        self._pdf = pdf
        self._dpi = dpi

    def page_count(self) -> int:
        return len(self._pdf.pages)

    def render_page(self, index: int) -> Image.Image:
        try:
            page_image = self._pdf.pages[index].to_image(resolution=self._dpi)
            return page_image.original.convert("RGB")
        except Exception as exc:
            raise RenderError(f"pdfplumber failed to render page {index}: {exc}") from exc

    def close(self) -> None:
        self._pdf.close()


class PdfPlumberRasterizer(BaseRasterizer):
    """Rasterizes PDF pages using pdfplumber."""

    def __init__(self, dpi: int = 300) -> None:
        self._dpi = dpi

    def open(self, pdf_bytes: bytes) -> RasterDocument:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise RenderError(f"pdfplumber failed to open document: {exc}") from exc
        return PdfPlumberDocument(pdf, self._dpi)
