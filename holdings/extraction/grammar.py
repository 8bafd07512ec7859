"""Regular grammars for the OCR text of each statement layout."""

import re

CUSIP_PATTERN = r"[0-9]{3}[a-zA-Z0-9]{6}"
_AMOUNT = r"[0-9.,]+"

CUSIP_RE = re.compile(rf"CUSIP ({CUSIP_PATTERN})")

TRANSACTION_RE = re.compile(
    rf"(?P<date>\d{{2}} [a-zA-Z]{{3}} \d{{4}})"
    r"(?P<description>\D*)"
    rf"(?P<transaction_amount>{_AMOUNT}) "
    rf"(?P<deduction_amount>{_AMOUNT})"
    r"(?P<deduction_type>\D*)"
    rf"(?P<net_amount>{_AMOUNT}) "
    rf"(?P<price_per_share>{_AMOUNT}) "
    rf"(?P<total_shares>{_AMOUNT})"
)

DRS_MOVEMENT_RE = re.compile(
    rf"(?P<date>\d{{2}} [a-zA-Z]{{3}} \d{{4}})"
    r"(?P<description>\D*)"
    rf"(?P<total_shares>{_AMOUNT})\s+"
    rf"(?P<cusip>{CUSIP_PATTERN})"
)

DRS_BALANCE_RE = re.compile(
    rf"(?P<dividend_reinvestment>{_AMOUNT}) "
    rf"(?P<direct_registration>{_AMOUNT}) "
    rf"(?P<total_shares>{_AMOUNT}) "
    rf"\$?(?P<price_per_share>{_AMOUNT}) "
    rf"\$?(?P<value>{_AMOUNT}) "
    rf"(?P<cusip>{CUSIP_PATTERN}) "
    r"(?P<share_class>\S.*)"
)


def account_number_pattern(digits: int) -> re.Pattern[str]:
    """Build the holder account number grammar for a suffix width.

    Numbers longer than ``digits`` fail to match instead of being truncated.
    """
    if digits < 1:
        raise ValueError(f"account number width must be positive, got {digits}")
    return re.compile(rf". Holder Account Number: (C\d{{{digits}}})(?!\d)")


class StatementGrammar:
    """Compiled grammars for one account number width."""

    def __init__(self, account_number_digits: int = 10) -> None:
        self.account_number = account_number_pattern(account_number_digits)
        self.cusip = CUSIP_RE
        self.transaction = TRANSACTION_RE
        self.drs_movement = DRS_MOVEMENT_RE
        self.drs_balance = DRS_BALANCE_RE
