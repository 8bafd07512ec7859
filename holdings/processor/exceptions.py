class StatementError(Exception):
    """Base exception for every failure of the statement pipeline.

    Messages never contain raw account or transaction identifiers.
    """


class DocumentTooLargeError(StatementError):
    """Raised when a statement exceeds the configured size limit."""
