from holdings.config.settings import Settings
from holdings.pdf.base import BaseRasterizer
from holdings.pdf.pdfplumber_adapter import PdfPlumberRasterizer
from holdings.pdf.pymupdf_adapter import PyMuPdfRasterizer


class RasterizerFactory:
    """Creates the correct PDF rasterizer based on settings."""

    ADAPTERS: dict[str, type[BaseRasterizer]] = {
        "pdfplumber": PdfPlumberRasterizer,
        "pymupdf": PyMuPdfRasterizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRasterizer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(dpi=settings.render_dpi)
