from pathlib import Path
from typing import Any

from psycopg.errors import UniqueViolation
from psycopg.rows import dict_row

from holdings.database.connection import get_connection
from holdings.database.exceptions import ExistingTransactionError, NewerPositionError, StoreError
from holdings.database.models import Position, Total
from holdings.database.repositories.base import BaseStore
from holdings.extraction.models import DocumentType
from holdings.processor.models import StoredTransaction

_MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"

_TRANSACTION_COLUMNS = """
    id_hash, account_id_hash, requester_hash, document_type, cusip,
    description, deduction_type, open_position, close_position, amount,
    deduction_amount, net_amount, price_per_share, total_shares,
    transaction_date
"""


class PostgresStore(BaseStore):
    """Database operations for the transactions and positions tables."""

    def migrate(self) -> None:
        """Apply the bundled schema migrations in file name order."""
        for path in sorted(_MIGRATIONS_DIR.glob("*.sql")):
            try:
                sql = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise StoreError(f"Failed to load migration {path.name}: {exc}") from exc
            with get_connection() as conn:
                conn.execute(sql)
                conn.commit()

    def insert_transaction(self, transaction: StoredTransaction) -> None:
        try:
            with get_connection() as conn:
                conn.execute(
                    f"""
                    INSERT INTO transactions ({_TRANSACTION_COLUMNS})
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    (
                        transaction.id_hash,
                        transaction.account_id_hash,
                        transaction.requester_hash,
                        transaction.document_type.value,
                        transaction.cusip,
                        transaction.description,
                        transaction.deduction_type,
                        transaction.open_position,
                        transaction.close_position,
                        transaction.amount,
                        transaction.deduction_amount,
                        transaction.net_amount,
                        transaction.price_per_share,
                        transaction.total_shares,
                        transaction.date,
                    ),
                )
                conn.commit()
        except UniqueViolation as exc:
            raise ExistingTransactionError("Transaction already stored") from exc

    def get_transactions(self, cusip: str) -> list[StoredTransaction]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_TRANSACTION_COLUMNS}
                    FROM transactions
                    WHERE cusip = %s
                    ORDER BY transaction_date DESC
                    """,
                    (cusip,),
                )
                rows = cur.fetchall()
        return [_row_to_transaction(row) for row in rows]

    def list_transactions(self) -> list[StoredTransaction]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_TRANSACTION_COLUMNS}
                    FROM transactions
                    ORDER BY transaction_date DESC
                    """
                )
                rows = cur.fetchall()
        return [_row_to_transaction(row) for row in rows]

    def set_position(self, position: Position) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO positions AS p (
                        account_id_hash, cusip, total_shares, transaction_date
                    )
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (account_id_hash, cusip) DO UPDATE
                    SET total_shares = EXCLUDED.total_shares,
                        transaction_date = EXCLUDED.transaction_date
                    WHERE p.transaction_date <= EXCLUDED.transaction_date
                    """,
                    (
                        position.account_id_hash,
                        position.cusip,
                        position.total,
                        position.date,
                    ),
                )
                updated = cur.rowcount
            conn.commit()
        if updated == 0:
            raise NewerPositionError(f"Stored position for {position.cusip} is newer")

    def get_totals(self) -> dict[str, Total]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT cusip, COUNT(account_id_hash) AS accounts,
                           SUM(total_shares) AS shares
                    FROM positions
                    GROUP BY cusip
                    """
                )
                rows = cur.fetchall()
        return {
            row["cusip"]: Total(accounts=row["accounts"], shares=row["shares"])
            for row in rows
        }

    def reset(self) -> None:
        with get_connection() as conn:
            conn.execute("TRUNCATE transactions, positions")
            conn.commit()


def _row_to_transaction(row: dict[str, Any]) -> StoredTransaction:
    return StoredTransaction(
        id_hash=row["id_hash"],
        account_id_hash=row["account_id_hash"],
        requester_hash=row["requester_hash"],
        document_type=DocumentType(row["document_type"]),
        cusip=row["cusip"],
        description=row["description"],
        deduction_type=row["deduction_type"],
        open_position=row["open_position"],
        close_position=row["close_position"],
        amount=row["amount"],
        deduction_amount=row["deduction_amount"],
        net_amount=row["net_amount"],
        price_per_share=row["price_per_share"],
        total_shares=row["total_shares"],
        date=row["transaction_date"],
    )
