"""Anchor lookups and value parsing shared by the layout extractors."""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from holdings.extraction.anchors import ACCOUNT_NUMBER_RECT
from holdings.extraction.exceptions import FieldExtractionError, MissingAnchorError
from holdings.extraction.grammar import StatementGrammar
from holdings.ocr.text_boxes import Point, Rect, TextBox, TextBoxIndex

DATE_FORMAT = "%d %b %Y"
# Far beyond any share count or cash amount a statement prints.
MAX_DECIMAL_DIGITS = 20


def anchor_by_rect(index: TextBoxIndex, rect: Rect, anchor: str) -> tuple[TextBox, int]:
    found = index.find_by_rect(rect)
    if found is None:
        raise MissingAnchorError(anchor)
    return found


def anchor_by_point(index: TextBoxIndex, point: Point, anchor: str) -> tuple[TextBox, int]:
    found = index.find_by_point(point)
    if found is None:
        raise MissingAnchorError(anchor)
    return found


def text_at(index: TextBoxIndex, position: int, field: str) -> str:
    """Return the trimmed text of the box at ``position``."""
    box = index.box_at(position)
    if box is None:
        raise FieldExtractionError(field, f"no text box at position {position}")
    return box.text.strip()


def match_field(pattern: re.Pattern[str], text: str, field: str) -> re.Match[str]:
    match = pattern.search(text)
    if match is None:
        raise FieldExtractionError(field, "text does not match expected format")
    return match


def parse_decimal(value: str, field: str) -> Decimal:
    """Parse a statement number, dropping thousands separators (10,000.00)."""
    try:
        number = Decimal(value.strip().replace(",", ""))
    except InvalidOperation as exc:
        raise FieldExtractionError(field, f"not a decimal: {value!r}") from exc
    if not number.is_finite():
        raise FieldExtractionError(field, f"not a finite decimal: {value!r}")
    if len(number.as_tuple().digits) > MAX_DECIMAL_DIGITS:
        raise FieldExtractionError(field, f"more than {MAX_DECIMAL_DIGITS} digits")
    return number


def parse_date(value: str, field: str) -> date:
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise FieldExtractionError(field, f"not a date: {value!r}") from exc


def extract_account_id(index: TextBoxIndex, grammar: StatementGrammar) -> str:
    box, _ = anchor_by_rect(index, ACCOUNT_NUMBER_RECT, "account_number")
    # The matched text is the raw identifier, so it is kept out of errors.
    match = grammar.account_number.search(box.text)
    if match is None or not match.group(1):
        raise FieldExtractionError("account_id", "account number not found in anchor box")
    return match.group(1)


def extract_transaction_id(index: TextBoxIndex) -> str:
    """The generator prints the control number as the last line of the page."""
    last = index.last()
    transaction_id = last.text.strip() if last is not None else ""
    if not transaction_id:
        raise FieldExtractionError("id", "missing transaction control number")
    return transaction_id
