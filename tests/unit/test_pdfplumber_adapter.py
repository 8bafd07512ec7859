import pytest

from holdings.pdf.exceptions import RenderError
from holdings.pdf.pdfplumber_adapter import PdfPlumberRasterizer


class TestPdfPlumberRasterizer:
    def test_counts_pages(self, two_page_pdf_bytes: bytes) -> None:
        with PdfPlumberRasterizer(dpi=72).open(two_page_pdf_bytes) as doc:
            assert doc.page_count() == 2

    def test_renders_rgb_image(self, single_page_pdf_bytes: bytes) -> None:
        with PdfPlumberRasterizer(dpi=72).open(single_page_pdf_bytes) as doc:
            image = doc.render_page(0)
        assert image.mode == "RGB"
        assert image.width > 0
        assert image.height > image.width

    def test_render_out_of_range_page_raises(self, single_page_pdf_bytes: bytes) -> None:
        with PdfPlumberRasterizer(dpi=72).open(single_page_pdf_bytes) as doc:
            with pytest.raises(RenderError):
                doc.render_page(5)

    def test_open_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(RenderError):
            PdfPlumberRasterizer().open(b"not a pdf")
