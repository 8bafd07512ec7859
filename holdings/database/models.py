from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Position:
    """Share balance of one hashed account in one security as of a date."""

    account_id_hash: str
    cusip: str
    total: Decimal
    date: date


@dataclass(frozen=True)
class Total:
    """Number of accounts and summed shares reported for a CUSIP."""

    accounts: int
    shares: Decimal
