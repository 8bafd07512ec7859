from holdings.extraction.extractor import extract_fields
from holdings.extraction.grammar import StatementGrammar
from holdings.extraction.sniffer import sniff_document_type
from holdings.logging.logger import Log
from holdings.ocr.base import BaseOcrEngine
from holdings.ocr.text_boxes import TextBoxIndex
from holdings.pdf.base import BaseRasterizer
from holdings.pdf.exceptions import UnexpectedPageCountError
from holdings.pdf.metadata import MetadataGate
from holdings.processor.assembler import RecordAssembler
from holdings.processor.pipeline import PipelineContext, PipelineStep, Stage
from holdings.verification.verifier import Verifier

STATEMENT_PAGE_COUNT = 2
TRANSACTION_PAGE = 0


class ValidateMetadataStep(PipelineStep):
    def __init__(self, gate: MetadataGate) -> None:
        self._gate = gate

    def run(self, context: PipelineContext) -> PipelineContext:
        context.metadata = self._gate.validate(context.raw_bytes)
        context.stage = Stage.METADATA_VALIDATED
        Log.info(f"Metadata validated for {len(context.raw_bytes)} byte statement")
        return context


class RasterizeStep(PipelineStep):
    def __init__(self, rasterizer: BaseRasterizer) -> None:
        self._rasterizer = rasterizer

    def run(self, context: PipelineContext) -> PipelineContext:
        with self._rasterizer.open(context.raw_bytes) as doc:
            page_count = doc.page_count()
            if page_count != STATEMENT_PAGE_COUNT:
                Log.warning(
                    f"Unexpected number of pages: expected {STATEMENT_PAGE_COUNT}, "
                    f"got {page_count}"
                )
                raise UnexpectedPageCountError(STATEMENT_PAGE_COUNT, page_count)
            context.page_image = doc.render_page(TRANSACTION_PAGE)
        context.stage = Stage.RASTERIZED
        Log.info(
            f"Rendered transaction page at {context.page_image.width}x"
            f"{context.page_image.height}"
        )
        return context


class IndexTextStep(PipelineStep):
    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.page_image is None:
            raise ValueError("PipelineContext.page_image must be set before OCR")
        context.text_boxes = TextBoxIndex(
            self._ocr_engine.detect_text_lines(context.page_image)
        )
        context.stage = Stage.TEXT_INDEXED
        Log.info(f"Indexed {len(context.text_boxes)} text lines")
        return context


class SniffDocumentTypeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.text_boxes is None:
            raise ValueError("PipelineContext.text_boxes must be set before sniffing")
        context.document_type = sniff_document_type(context.text_boxes)
        context.stage = Stage.TYPE_SNIFFED
        Log.info("Detected statement layout", document_type=context.document_type.value)
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, grammar: StatementGrammar) -> None:
        self._grammar = grammar

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.text_boxes is None or context.document_type is None:
            raise ValueError(
                "PipelineContext.text_boxes and document_type must be set before extraction"
            )
        context.fields = extract_fields(
            context.document_type, context.text_boxes, self._grammar
        )
        context.stage = Stage.FIELDS_EXTRACTED
        Log.info(f"Extracted fields for CUSIP {context.fields.cusip}")
        return context


class VerifyStep(PipelineStep):
    def __init__(self, verifier: Verifier) -> None:
        self._verifier = verifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.fields is None or context.page_image is None:
            raise ValueError(
                "PipelineContext.fields and page_image must be set before verification"
            )
        context.transaction = self._verifier.verify(context.fields, context.page_image)
        # Unverified fields are not kept once a Transaction exists.
        context.fields = None
        context.stage = Stage.VERIFIED
        Log.info("Statement verified against barcode")
        return context


class AssembleStep(PipelineStep):
    def __init__(self, assembler: RecordAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.transaction is None:
            raise ValueError("PipelineContext.transaction must be set before assembly")
        context.stored_transaction = self._assembler.assemble(
            context.transaction, context.requester_hash
        )
        context.stage = Stage.ASSEMBLED
        Log.info(f"Assembled transaction {context.stored_transaction.id_hash[:12]}")
        return context


class LogFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        completed = (
            context.last_completed_stage.value if context.last_completed_stage else "none"
        )
        error_kind = type(context.error).__name__ if context.error else "Error"
        Log.error(
            f"Statement failed: {context.error_message}",
            step=context.failed_step or "unknown",
            last_completed_stage=completed,
            error=error_kind,
        )
        return context
