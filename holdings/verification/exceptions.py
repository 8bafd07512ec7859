from decimal import Decimal

from holdings.processor.exceptions import StatementError


class BarcodeVerificationError(StatementError):
    """Raised when the account barcode is missing, weak or disagrees with OCR."""


class MathVerificationError(StatementError):
    """Raised when an arithmetic identity of the statement does not hold."""

    def __init__(
        self,
        check: str,
        expected: Decimal | None = None,
        actual: Decimal | None = None,
        reason: str = "",
    ) -> None:
        super().__init__(
            f"{check} check failed: {reason or f'expected {expected}, got {actual}'}"
        )
        self.check = check
        self.expected = expected
        self.actual = actual
