from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from holdings.extraction.models import DocumentType


@dataclass(frozen=True)
class Transaction:
    """A statement transaction that passed barcode and arithmetic verification.

    Only the verifier builds these; see Verifier.verify.
    """

    document_type: DocumentType
    id: str
    date: date
    account_id: str
    cusip: str
    description: str
    deduction_type: str
    open_position: Decimal
    close_position: Decimal
    amount: Decimal
    deduction_amount: Decimal
    net_amount: Decimal
    price_per_share: Decimal
    total_shares: Decimal


@dataclass(frozen=True)
class StoredTransaction:
    """Transaction with its identifiers replaced by salted hashes."""

    id_hash: str
    account_id_hash: str
    requester_hash: str
    document_type: DocumentType
    cusip: str
    description: str
    deduction_type: str
    open_position: Decimal
    close_position: Decimal
    amount: Decimal
    deduction_amount: Decimal
    net_amount: Decimal
    price_per_share: Decimal
    total_shares: Decimal
    date: date
