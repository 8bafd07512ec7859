from abc import ABC, abstractmethod
from types import TracebackType

from PIL import Image


class RasterDocument(ABC):
    """An open PDF handle that can report its size and render pages.

    Use as a context manager so the engine handle is released on every path.
    """

    @abstractmethod
    def page_count(self) -> int:
        """Return the number of pages in the document."""

    @abstractmethod
    def render_page(self, index: int) -> Image.Image:
        """Render a zero-based page to an RGB image.

        Raises:
            RenderError: if the page cannot be rendered.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying engine handle."""

    def __enter__(self) -> "RasterDocument":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BaseRasterizer(ABC):
    """Contract for all PDF rasterization adapters."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> RasterDocument:
        """Open PDF bytes for rendering.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            A RasterDocument that must be closed by the caller.

        Raises:
            RenderError: if the engine cannot parse the document.
        """
