from holdings.extraction.anchors import DRS_ANCHOR, PURCHASE_ANCHOR
from holdings.extraction.exceptions import UnknownDocumentTypeError
from holdings.extraction.models import DocumentType
from holdings.logging.logger import Log
from holdings.ocr.text_boxes import Rect, TextBoxIndex

# Order matters: the first present anchor decides the layout.
_LAYOUT_ANCHORS: tuple[tuple[DocumentType, Rect], ...] = (
    (DocumentType.DRS, DRS_ANCHOR),
    (DocumentType.PURCHASE, PURCHASE_ANCHOR),
)


def sniff_document_type(index: TextBoxIndex) -> DocumentType:
    """Determine the statement layout from its template anchors.

    Raises:
        UnknownDocumentTypeError: if no layout anchor is present.
    """
    for document_type, anchor in _LAYOUT_ANCHORS:
        if index.find_by_rect(anchor) is not None:
            Log.debug(f"Layout anchor found for {document_type.value} statement")
            return document_type
    raise UnknownDocumentTypeError(
        f"No layout anchor found among {len(index)} text boxes"
    )
