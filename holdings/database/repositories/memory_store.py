import threading
from decimal import Decimal

from holdings.database.exceptions import ExistingTransactionError, NewerPositionError
from holdings.database.models import Position, Total
from holdings.database.repositories.base import BaseStore
from holdings.processor.models import StoredTransaction


class MemoryStore(BaseStore):
    """Process-local store, mostly for development and tests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transactions: dict[str, StoredTransaction] = {}
        self._positions: dict[tuple[str, str], Position] = {}

    def insert_transaction(self, transaction: StoredTransaction) -> None:
        with self._lock:
            if transaction.id_hash in self._transactions:
                raise ExistingTransactionError("Transaction already stored")
            self._transactions[transaction.id_hash] = transaction

    def get_transactions(self, cusip: str) -> list[StoredTransaction]:
        with self._lock:
            matching = [tx for tx in self._transactions.values() if tx.cusip == cusip]
        return sorted(matching, key=lambda tx: tx.date, reverse=True)

    def list_transactions(self) -> list[StoredTransaction]:
        with self._lock:
            transactions = list(self._transactions.values())
        return sorted(transactions, key=lambda tx: tx.date, reverse=True)

    def set_position(self, position: Position) -> None:
        key = (position.account_id_hash, position.cusip)
        with self._lock:
            previous = self._positions.get(key)
            if previous is not None and previous.date > position.date:
                raise NewerPositionError(
                    f"Stored position for {position.cusip} is dated {previous.date}"
                )
            self._positions[key] = position

    def get_totals(self) -> dict[str, Total]:
        accounts: dict[str, int] = {}
        shares: dict[str, Decimal] = {}
        with self._lock:
            for position in self._positions.values():
                accounts[position.cusip] = accounts.get(position.cusip, 0) + 1
                shares[position.cusip] = (
                    shares.get(position.cusip, Decimal("0")) + position.total
                )
        return {
            cusip: Total(accounts=count, shares=shares[cusip])
            for cusip, count in accounts.items()
        }

    def reset(self) -> None:
        with self._lock:
            self._transactions.clear()
            self._positions.clear()
