import hashlib

from holdings.database.exceptions import NewerPositionError
from holdings.database.models import Position
from holdings.database.repositories.base import BaseStore
from holdings.logging.logger import Log
from holdings.processor.exceptions import DocumentTooLargeError
from holdings.processor.models import StoredTransaction
from holdings.processor.processor import Processor


def hash_requester(requester: str) -> str:
    """Hex SHA-256 of the requester, e.g. a client address."""
    return hashlib.sha256(requester.encode("utf-8")).hexdigest()


class StatementIngestor:
    """Parse one statement and record its transaction and position."""

    def __init__(
        self,
        processor: Processor,
        store: BaseStore,
        max_document_bytes: int,
    ) -> None:
        self._processor = processor
        self._store = store
        self._max_document_bytes = max_document_bytes

    def ingest(self, raw_bytes: bytes, requester: str) -> StoredTransaction:
        """Run the pipeline and persist the result.

        Raises:
            DocumentTooLargeError: if the statement is over the size limit.
            StatementError: if the statement fails parsing or verification.
            ExistingTransactionError: if the transaction was already ingested.
        """
        if len(raw_bytes) > self._max_document_bytes:
            raise DocumentTooLargeError(
                f"Statement is {len(raw_bytes)} bytes, limit is {self._max_document_bytes}"
            )

        stored = self._processor.process(raw_bytes, hash_requester(requester))
        self._store.insert_transaction(stored)
        Log.info("Stored transaction", id_hash=stored.id_hash[:12], cusip=stored.cusip)

        try:
            self._store.set_position(
                Position(
                    account_id_hash=stored.account_id_hash,
                    cusip=stored.cusip,
                    total=stored.close_position,
                    date=stored.date,
                )
            )
        except NewerPositionError as exc:
            # An older statement still counts as a transaction.
            Log.warning(f"Position not updated for CUSIP {stored.cusip}: {exc}")
        return stored
