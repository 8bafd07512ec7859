import hashlib

from holdings.processor.models import StoredTransaction, Transaction


def salted_hash(salt: str, value: str) -> str:
    """Hex SHA-256 of ``salt + value``."""
    return hashlib.sha256(f"{salt}{value}".encode("utf-8")).hexdigest()


class RecordAssembler:
    """Turns a verified Transaction into its storable, identifier-free form."""

    def __init__(self, transaction_salt: str, account_salt: str) -> None:
        self._transaction_salt = transaction_salt
        self._account_salt = account_salt

    def assemble(self, transaction: Transaction, requester_hash: str) -> StoredTransaction:
        """Build a StoredTransaction.

        Args:
            transaction: A verified transaction.
            requester_hash: Caller-side hash of whoever submitted the statement.
        """
        return StoredTransaction(
            id_hash=salted_hash(self._transaction_salt, transaction.id),
            account_id_hash=salted_hash(self._account_salt, transaction.account_id),
            requester_hash=requester_hash,
            document_type=transaction.document_type,
            cusip=transaction.cusip,
            description=transaction.description,
            deduction_type=transaction.deduction_type,
            open_position=transaction.open_position,
            close_position=transaction.close_position,
            amount=transaction.amount,
            deduction_amount=transaction.deduction_amount,
            net_amount=transaction.net_amount,
            price_per_share=transaction.price_per_share,
            total_shares=transaction.total_shares,
            date=transaction.date,
        )
