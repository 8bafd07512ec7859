from holdings.extraction.drs import extract_drs
from holdings.extraction.exceptions import UnknownDocumentTypeError
from holdings.extraction.grammar import StatementGrammar
from holdings.extraction.models import DocumentType, ExtractedFields
from holdings.extraction.purchase import extract_purchase
from holdings.ocr.text_boxes import TextBoxIndex


def extract_fields(
    document_type: DocumentType,
    index: TextBoxIndex,
    grammar: StatementGrammar,
) -> ExtractedFields:
    """Run the extractor of a sniffed layout.

    The set of layouts is closed; a new layout needs its own grammar and
    extractor here.
    """
    if document_type is DocumentType.PURCHASE:
        return extract_purchase(index, grammar)
    if document_type is DocumentType.DRS:
        return extract_drs(index, grammar)
    raise UnknownDocumentTypeError(f"No extractor for document type {document_type!r}")
