from PIL import Image

from holdings.barcode.base import BaseBarcodeDecoder
from holdings.barcode.models import AccountBarcode
from holdings.verification.exceptions import BarcodeVerificationError


class ZbarBarcodeDecoder(BaseBarcodeDecoder):
    """Decodes barcodes with ZBar through pyzbar."""

    def scan(self, image: Image.Image, symbology: str) -> list[AccountBarcode]:
        # pyzbar loads the zbar shared library at import time.
        try:
            from pyzbar import pyzbar
        except ImportError as exc:
            raise BarcodeVerificationError(f"zbar is not available: {exc}") from exc

        try:
            symbol = pyzbar.ZBarSymbol[symbology.upper()]
        except KeyError as exc:
            raise BarcodeVerificationError(f"Unknown barcode symbology '{symbology}'") from exc

        try:
            decoded = pyzbar.decode(image, symbols=[symbol])
        except Exception as exc:
            raise BarcodeVerificationError(f"zbar failed to scan page: {exc}") from exc
        return [
            AccountBarcode(
                symbology=result.type,
                data=result.data.decode("utf-8", errors="replace"),
                quality=result.quality,
            )
            for result in decoded
        ]
