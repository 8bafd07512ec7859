import pymupdf
from PIL import Image

from holdings.pdf.base import BaseRasterizer, RasterDocument
from holdings.pdf.exceptions import RenderError


class PyMuPdfDocument(RasterDocument):
    """RasterDocument backed by a PyMuPDF document."""

    def __init__(self, doc: pymupdf.Document, dpi: int) -> None:
        self._doc = doc
        self._dpi = dpi

    def page_count(self) -> int:
        return self._doc.page_count

    def render_page(self, index: int) -> Image.Image:
        try:
            pix = self._doc.load_page(index).get_pixmap(dpi=self._dpi)
            return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
        except Exception as exc:
            raise RenderError(f"pymupdf failed to render page {index}: {exc}") from exc

    def close(self) -> None:
        self._doc.close()


class PyMuPdfRasterizer(BaseRasterizer):
    """Rasterizes PDF pages using PyMuPDF."""

    def __init__(self, dpi: int = 300) -> None:
        self._dpi = dpi

    def open(self, pdf_bytes: bytes) -> RasterDocument:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise RenderError(f"pymupdf failed to open document: {exc}") from exc
        return PyMuPdfDocument(doc, self._dpi)
