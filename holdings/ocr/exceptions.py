from holdings.processor.exceptions import StatementError


class OcrError(StatementError):
    """Raised when the OCR engine fails to read a page image."""
