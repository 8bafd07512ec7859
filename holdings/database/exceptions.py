class StoreError(Exception):
    """Base exception for storage backend errors."""


class ExistingTransactionError(StoreError):
    """Raised when a transaction with the same id hash is already stored."""


class NewerPositionError(StoreError):
    """Raised when a stored position for the account and CUSIP has a later date."""
