from decimal import Decimal

from holdings.extraction.anchors import (
    CUSIP_POINT,
    SHARE_POSITION_HEADER_RECT,
    TRANSACTION_HEADER_RECT,
    TRANSACTION_LINE_OFFSET,
)
from holdings.extraction.exceptions import FieldExtractionError, MalformedPositionLineError
from holdings.extraction.fields import (
    anchor_by_point,
    anchor_by_rect,
    extract_account_id,
    extract_transaction_id,
    match_field,
    parse_date,
    parse_decimal,
    text_at,
)
from holdings.extraction.grammar import StatementGrammar
from holdings.extraction.models import DocumentType, ExtractedFields
from holdings.ocr.text_boxes import TextBoxIndex


def extract_purchase(index: TextBoxIndex, grammar: StatementGrammar) -> ExtractedFields:
    """Read the fields of a purchase statement.

    Raises:
        MissingAnchorError: if a template anchor is absent.
        MalformedPositionLineError: if the position line is not two numbers.
        FieldExtractionError: on any grammar or parse mismatch.
    """
    account_id = extract_account_id(index, grammar)
    cusip = _cusip(index, grammar)
    open_position, close_position = _positions(index)

    _, header_idx = anchor_by_rect(index, TRANSACTION_HEADER_RECT, "transaction_header")
    line = text_at(index, header_idx + TRANSACTION_LINE_OFFSET, "transaction")
    match = match_field(grammar.transaction, line, "transaction")

    return ExtractedFields(
        document_type=DocumentType.PURCHASE,
        id=extract_transaction_id(index),
        date=parse_date(match["date"], "date"),
        account_id=account_id,
        cusip=cusip,
        description=match["description"].strip(),
        deduction_type=match["deduction_type"].strip(),
        open_position=open_position,
        close_position=close_position,
        amount=parse_decimal(match["transaction_amount"], "transaction_amount"),
        deduction_amount=parse_decimal(match["deduction_amount"], "deduction_amount"),
        net_amount=parse_decimal(match["net_amount"], "net_amount"),
        price_per_share=parse_decimal(match["price_per_share"], "price_per_share"),
        total_shares=parse_decimal(match["total_shares"], "total_shares"),
    )


def _cusip(index: TextBoxIndex, grammar: StatementGrammar) -> str:
    box, _ = anchor_by_point(index, CUSIP_POINT, "cusip")
    match = match_field(grammar.cusip, box.text, "cusip")
    if not match.group(1):
        raise FieldExtractionError("cusip", "empty CUSIP")
    return match.group(1)


def _positions(index: TextBoxIndex) -> tuple[Decimal, Decimal]:
    _, header_idx = anchor_by_rect(
        index, SHARE_POSITION_HEADER_RECT, "share_position_header"
    )
    tokens = text_at(index, header_idx + 1, "share_positions").split()
    if len(tokens) != 2:
        raise MalformedPositionLineError(len(tokens))
    return (
        parse_decimal(tokens[0], "open_position"),
        parse_decimal(tokens[1], "close_position"),
    )
