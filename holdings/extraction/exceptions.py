from holdings.processor.exceptions import StatementError


class UnknownDocumentTypeError(StatementError):
    """Raised when no known statement layout anchor is present."""


class MissingAnchorError(StatementError):
    """Raised when a required geometric anchor is not found on the page."""

    def __init__(self, anchor: str) -> None:
        super().__init__(f"Missing anchor: {anchor}")
        self.anchor = anchor


class FieldExtractionError(StatementError):
    """Raised when a field does not match its grammar or fails to parse."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Field '{field}': {reason}")
        self.field = field
        self.reason = reason


class MalformedPositionLineError(FieldExtractionError):
    """Raised when the share position line does not hold exactly two numbers."""

    def __init__(self, token_count: int) -> None:
        super().__init__(
            "share_positions", f"expected 2 tokens, got {token_count}"
        )
        self.token_count = token_count
