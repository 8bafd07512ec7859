"""Direct registration statements.

A DRS entry moves shares into book-entry form; it carries no cash amount, so
amount, net amount and total shares all hold the moved share count.
"""

from decimal import Decimal

from holdings.extraction.anchors import DRS_ACCOUNT_INFO_POINT, DRS_IMPORTANT_INFO_POINT
from holdings.extraction.exceptions import FieldExtractionError
from holdings.extraction.fields import (
    anchor_by_point,
    extract_account_id,
    extract_transaction_id,
    match_field,
    parse_date,
    parse_decimal,
    text_at,
)
from holdings.extraction.grammar import StatementGrammar
from holdings.extraction.models import DocumentType, ExtractedFields
from holdings.logging.logger import Log
from holdings.ocr.text_boxes import TextBoxIndex


def extract_drs(index: TextBoxIndex, grammar: StatementGrammar) -> ExtractedFields:
    """Read the fields of a direct registration statement.

    Raises:
        MissingAnchorError: if a template anchor is absent.
        FieldExtractionError: on any grammar or parse mismatch.
    """
    account_id = extract_account_id(index, grammar)

    _, info_idx = anchor_by_point(index, DRS_ACCOUNT_INFO_POINT, "account_info")
    movement_line = text_at(index, info_idx - 1, "drs_movement")
    movement = match_field(grammar.drs_movement, movement_line, "drs_movement")

    _, important_idx = anchor_by_point(index, DRS_IMPORTANT_INFO_POINT, "important_info")
    balance_line = text_at(index, important_idx - 1, "drs_balance")
    balance = match_field(grammar.drs_balance, balance_line, "drs_balance")

    if movement["cusip"] != balance["cusip"]:
        raise FieldExtractionError("cusip", "movement and balance CUSIPs differ")

    total_shares = parse_decimal(movement["total_shares"], "total_shares")
    close_position = parse_decimal(balance["total_shares"], "close_position")
    Log.debug(
        f"DRS balance: reinvestment={balance['dividend_reinvestment']} "
        f"registered={balance['direct_registration']} class={balance['share_class']}"
    )

    return ExtractedFields(
        document_type=DocumentType.DRS,
        id=extract_transaction_id(index),
        date=parse_date(movement["date"], "date"),
        account_id=account_id,
        cusip=movement["cusip"],
        description=movement["description"].strip(),
        deduction_type="",
        open_position=close_position - total_shares,
        close_position=close_position,
        amount=total_shares,
        deduction_amount=Decimal("0"),
        net_amount=total_shares,
        price_per_share=parse_decimal(balance["price_per_share"], "price_per_share"),
        total_shares=total_shares,
    )
