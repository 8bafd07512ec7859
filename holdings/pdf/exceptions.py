from holdings.processor.exceptions import StatementError


class InvalidMetadataError(StatementError):
    """Raised when the PDF metadata does not match the statement generator."""


class RenderError(StatementError):
    """Raised when the rendering engine cannot open or rasterize the PDF."""


class UnexpectedPageCountError(StatementError):
    """Raised when the statement does not have exactly the expected page count."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} pages, got {actual}")
        self.expected = expected
        self.actual = actual
