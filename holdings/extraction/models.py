from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class DocumentType(str, Enum):
    """Statement layouts produced by the generator."""

    PURCHASE = "purchase"
    DRS = "drs"


@dataclass(frozen=True)
class ExtractedFields:
    """Fields read off a page before verification.

    Never leaves the pipeline; the verifier turns it into a Transaction.
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
