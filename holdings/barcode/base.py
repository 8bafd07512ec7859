from abc import ABC, abstractmethod

from PIL import Image

from holdings.barcode.models import AccountBarcode


class BaseBarcodeDecoder(ABC):
    """Contract for barcode decoding adapters."""

    @abstractmethod
    def scan(self, image: Image.Image, symbology: str) -> list[AccountBarcode]:
        """Decode all symbols of one symbology found on an image.

        Args:
            image: Rendered page image.
            symbology: Symbology name, e.g. "CODE39".

        Returns:
            Every decoded symbol, possibly empty.

        Raises:
            BarcodeVerificationError: if the decoder cannot run.
        """
