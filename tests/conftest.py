import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from holdings.extraction.anchors import (
    ACCOUNT_NUMBER_RECT,
    DRS_HEADER_RECT,
    SHARE_POSITION_HEADER_RECT,
    TRANSACTION_HEADER_RECT,
)
from holdings.ocr.text_boxes import Rect, TextBox

STATEMENT_METADATA_LINE = (
    b"<</Creator(Computershare Communication Services, GPD 3.00 build 12)"
    b"/Producer(PDFlib+PDI 7.0.4p1 (Win32))"
    b"/Subject(Holding statement)/Title(Statement)>>"
)


def statement_bytes(metadata_line: bytes = STATEMENT_METADATA_LINE, trailers: int = 1) -> bytes:
    """Build PDF-like bytes carrying the generator's metadata and trailer lines."""
    lines = [b"%PDF-1.4", b"1 0 obj", metadata_line, b"endobj"]
    lines += [b"trailer", b"<</Size 2>>"] * trailers
    lines.append(b"%%EOF")
    return b"\n".join(lines) + b"\n"


@pytest.fixture()
def statement_pdf_bytes() -> bytes:
    return statement_bytes()


@pytest.fixture()
def make_statement_bytes() -> Callable[..., bytes]:
    return statement_bytes


@pytest.fixture()
def make_purchase_boxes() -> Callable[..., list[TextBox]]:
    """Builder for the OCR text lines of a purchase statement's first page."""

    def build(
        account_line: str = "... Holder Account Number: C0000000001",
        cusip_line: str = "CUSIP 123ABC789",
        position_line: str = "1,000.00 1,050.00",
        transaction_line: str = "01 Jan 2023 Purchase 525.00 0.00 525.00 10.50 50",
        control_number: str = "  TX-000123  ",
    ) -> list[TextBox]:
        return [
            TextBox("Holding Statement", Rect(84, 200, 900, 260)),
            TextBox(cusip_line, Rect(1500, 1090, 2300, 1130)),
            TextBox(account_line, ACCOUNT_NUMBER_RECT),
            TextBox("Opening Balance Closing Balance", SHARE_POSITION_HEADER_RECT),
            TextBox(position_line, Rect(96, 1790, 1742, 1840)),
            TextBox("Transaction", TRANSACTION_HEADER_RECT),
            TextBox("Date Description Amount", Rect(84, 2100, 2300, 2140)),
            TextBox("Deduction Net Amount Price Shares", Rect(84, 2150, 2300, 2190)),
            TextBox(transaction_line, Rect(84, 2200, 2300, 2240)),
            TextBox(control_number, Rect(84, 3100, 600, 3140)),
        ]

    return build


@pytest.fixture()
def make_drs_boxes() -> Callable[..., list[TextBox]]:
    """Builder for the OCR text lines of a DRS statement's first page."""

    def build(
        account_line: str = "... Holder Account Number: C0000000002",
        movement_line: str = "15 Mar 2023 Dividend Reinvestment 2.500000 123ABC789",
        balance_line: str = (
            "12.500000 40.000000 52.500000 $10.50 $551.25 123ABC789 COMMON"
        ),
        control_number: str = "DRS-000777",
    ) -> list[TextBox]:
        return [
            TextBox(account_line, ACCOUNT_NUMBER_RECT),
            TextBox("Direct Registration Advice", DRS_HEADER_RECT),
            TextBox(movement_line, Rect(84, 1880, 2300, 1930)),
            TextBox("Account Information", Rect(84, 1940, 900, 1990)),
            TextBox(balance_line, Rect(84, 2560, 2300, 2610)),
            TextBox("Important Information", Rect(84, 2615, 900, 2660)),
            TextBox(control_number, Rect(84, 3100, 600, 3140)),
        ]

    return build


@pytest.fixture()
def two_page_pdf_bytes() -> bytes:
    """Generate a real two-page PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def single_page_pdf_bytes() -> bytes:
    """Generate a real single-page PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()
