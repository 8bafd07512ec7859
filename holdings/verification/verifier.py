"""Cross-checks extracted statement fields before they become a Transaction."""

from collections.abc import Callable
from dataclasses import asdict
from decimal import ROUND_HALF_UP, Decimal, Inexact, InvalidOperation, localcontext

from PIL import Image

from holdings.barcode.base import BaseBarcodeDecoder
from holdings.extraction.models import DocumentType, ExtractedFields
from holdings.logging.logger import Log
from holdings.processor.models import Transaction
from holdings.verification.exceptions import BarcodeVerificationError, MathVerificationError

_CENT = Decimal("0.01")
_ARITHMETIC_PRECISION = 40


class Verifier:
    """Verifies the account barcode and, for purchases, the statement arithmetic."""

    def __init__(
        self,
        decoder: BaseBarcodeDecoder,
        min_quality: int = 100,
        symbology: str = "CODE39",
    ) -> None:
        self._decoder = decoder
        self._min_quality = min_quality
        self._symbology = symbology.upper()

    def verify(self, fields: ExtractedFields, page_image: Image.Image) -> Transaction:
        """Return the verified Transaction for ``fields``.

        Raises:
            BarcodeVerificationError: if the barcode does not confirm the account.
            MathVerificationError: if a purchase's numbers do not add up.
        """
        self._verify_barcode(fields.account_id, page_image)
        if fields.document_type is DocumentType.PURCHASE:
            verify_purchase_arithmetic(fields)
        return Transaction(**asdict(fields))

    def _verify_barcode(self, account_id: str, page_image: Image.Image) -> None:
        if not account_id:
            raise BarcodeVerificationError("Missing account ID")

        symbols = self._decoder.scan(page_image, self._symbology)
        if len(symbols) != 1:
            Log.warning(f"Unusual barcode symbol count {len(symbols)}")
            raise BarcodeVerificationError(
                f"Expected exactly 1 barcode symbol, found {len(symbols)}"
            )

        barcode = symbols[0]
        if barcode.symbology.upper() != self._symbology:
            Log.warning(f"Unusual barcode symbology {barcode.symbology}")
            raise BarcodeVerificationError(
                f"Unexpected barcode symbology {barcode.symbology}"
            )
        # zbar quality is unscaled; the threshold is empirical.
        if barcode.quality < self._min_quality:
            Log.warning(f"Unusual barcode quality {barcode.quality}")
            raise BarcodeVerificationError(
                f"Barcode quality {barcode.quality} below {self._min_quality}"
            )
        if barcode.data != account_id:
            raise BarcodeVerificationError("Barcode does not match account number")


def verify_purchase_arithmetic(fields: ExtractedFields) -> None:
    """Check the identities every genuine purchase statement satisfies.

    Sums and the share cost are computed exactly; an operand too long to do so
    fails the check it belongs to rather than being rounded.

    Raises:
        MathVerificationError: naming the first identity that fails.
    """
    with localcontext() as ctx:
        ctx.prec = _ARITHMETIC_PRECISION
        ctx.traps[Inexact] = True
        ctx.traps[InvalidOperation] = True

        position_change = _exactly(
            "position", lambda: fields.close_position - fields.open_position
        )
        if position_change != fields.total_shares:
            raise MathVerificationError("position", fields.total_shares, position_change)

        net_amount = _exactly("amount", lambda: fields.amount - fields.deduction_amount)
        if net_amount != fields.net_amount:
            raise MathVerificationError("amount", fields.net_amount, net_amount)

        product = _exactly("price", lambda: fields.total_shares * fields.price_per_share)
        # Rounding to cents is the one inexact step the statement performs.
        ctx.traps[Inexact] = False
        cost = _exactly("price", lambda: product.quantize(_CENT, rounding=ROUND_HALF_UP))
        if cost != fields.net_amount:
            Log.warning(
                f"Price mismatch: total={fields.total_shares} "
                f"pps={fields.price_per_share} {cost}!={fields.net_amount}"
            )
            raise MathVerificationError("price", fields.net_amount, cost)


def _exactly(check: str, compute: Callable[[], Decimal]) -> Decimal:
    try:
        return compute()
    except (Inexact, InvalidOperation) as exc:
        raise MathVerificationError(
            check, reason=f"operands exceed {_ARITHMETIC_PRECISION} digits"
        ) from exc
