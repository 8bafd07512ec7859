"""Cheap PDF metadata gate run before any rendering or OCR work.

Statements come out of one document generator, so the info dictionary line
(``<</Creator (...)/Producer (...)/Subject (...)``) has a known shape. Anything
else is rejected without paying for rasterization.
"""

from holdings.logging.logger import Log
from holdings.pdf.exceptions import InvalidMetadataError

_META_PREFIX = b"<</Creator"
_TRAILER_PREFIX = b"trailer"


class MetadataGate:
    """Validates creator, producer and subject metadata of raw PDF bytes."""

    def __init__(self, expected_creator: str, expected_producer: str) -> None:
        self._expected_creator = expected_creator
        self._expected_producer = expected_producer

    def validate(self, pdf_bytes: bytes) -> dict[str, str]:
        """Scan the PDF byte stream and return the parsed metadata fields.

        Raises:
            InvalidMetadataError: on duplicated markers or unexpected values.
        """
        meta = self._scan(pdf_bytes)

        creator = meta.get("Creator", "")
        if not creator.startswith(self._expected_creator):
            Log.warning(f"Unusual creator metadata: {creator!r}")
            raise InvalidMetadataError("Invalid creator")

        producer = meta.get("Producer", "")
        if not producer.startswith(self._expected_producer):
            Log.warning(f"Unusual producer metadata: {producer!r}")
            raise InvalidMetadataError("Invalid producer")

        subject = meta.get("Subject", "")
        if not subject.strip():
            Log.warning(f"Unusual empty subject metadata: {subject!r}")
            raise InvalidMetadataError("Invalid subject")

        return meta

    def _scan(self, pdf_bytes: bytes) -> dict[str, str]:
        seen_meta = False
        seen_trailer = False
        meta: dict[str, str] = {}
        for raw_line in pdf_bytes.split(b"\n"):
            line = raw_line.rstrip(b"\r")
            if line.startswith(_TRAILER_PREFIX):
                if seen_trailer:
                    raise InvalidMetadataError("Duplicate trailers")
                seen_trailer = True
            if line.startswith(_META_PREFIX):
                if seen_meta:
                    raise InvalidMetadataError("Duplicate metadata blocks")
                seen_meta = True
                meta.update(_parse_meta_line(line))
        return meta


def _parse_meta_line(line: bytes) -> dict[str, str]:
    """Split ``<</Key (value)/Key (value)`` into a key/value mapping.

    Values are the text between the opening parenthesis and the closing one;
    nested parentheses inside a value are kept.
    """
    fields: dict[str, str] = {}
    text = line[2:].decode("latin-1")
    for chunk in text.split("/"):
        if not chunk:
            continue
        key, sep, value = chunk.partition("(")
        if not sep:
            continue
        value = value.rstrip()
        if value.endswith(">>"):
            value = value[:-2]
        if value.endswith(")"):
            value = value[:-1]
        fields[key.strip()] = value
    return fields
