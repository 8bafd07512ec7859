from abc import ABC, abstractmethod

from holdings.database.models import Position, Total
from holdings.processor.models import StoredTransaction


class BaseStore(ABC):
    """Contract for transaction and position storage backends."""

    @abstractmethod
    def insert_transaction(self, transaction: StoredTransaction) -> None:
        """Store a transaction.

        Raises:
            ExistingTransactionError: if its id hash is already stored.
        """

    @abstractmethod
    def get_transactions(self, cusip: str) -> list[StoredTransaction]:
        """Return the transactions for a CUSIP, newest first."""

    @abstractmethod
    def list_transactions(self) -> list[StoredTransaction]:
        """Return every stored transaction, newest first."""

    @abstractmethod
    def set_position(self, position: Position) -> None:
        """Insert or replace the position for its account and CUSIP.

        Raises:
            NewerPositionError: if the stored position has a later date.
        """

    @abstractmethod
    def get_totals(self) -> dict[str, Total]:
        """Return the account count and share total per CUSIP."""

    @abstractmethod
    def reset(self) -> None:
        """Remove all transactions and positions."""
