from dataclasses import dataclass


@dataclass(frozen=True)
class AccountBarcode:
    """A decoded barcode symbol.

    Only used to cross-check OCR output, never as a data source.
    """

    symbology: str
    data: str
    quality: int
