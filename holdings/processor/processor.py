from holdings.barcode.zbar_adapter import ZbarBarcodeDecoder
from holdings.config.settings import Settings
from holdings.extraction.grammar import StatementGrammar
from holdings.logging.logger import Log
from holdings.ocr.tesseract_adapter import TesseractOcrEngine, configure_tesseract
from holdings.pdf.factory import RasterizerFactory
from holdings.pdf.metadata import MetadataGate
from holdings.processor.assembler import RecordAssembler
from holdings.processor.exceptions import StatementError
from holdings.processor.models import StoredTransaction
from holdings.processor.pipeline import PipelineContext, PipelineStep, Stage
from holdings.processor.steps import (
    AssembleStep,
    ExtractFieldsStep,
    IndexTextStep,
    LogFailureStep,
    RasterizeStep,
    SniffDocumentTypeStep,
    ValidateMetadataStep,
    VerifyStep,
)
from holdings.verification.verifier import Verifier


class Processor:
    """Runs a statement through the extraction and verification pipeline.

    Pipeline: metadata -> rasterize -> OCR -> sniff -> extract -> verify -> assemble.
    Holds no per-document state, so one instance can serve concurrent callers.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    def run(self, raw_bytes: bytes, requester_hash: str) -> PipelineContext:
        """Run every step and return the final context.

        Raises:
            StatementError: the first failure; the context is marked FAILED
                and handed to the failure step before re-raising.
        """
        context = PipelineContext(raw_bytes=raw_bytes, requester_hash=requester_hash)
        step: PipelineStep | None = None
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.last_completed_stage = context.stage
            context.failed_step = type(step).__name__ if step is not None else ""
            context.stage = Stage.FAILED
            context.error = exc
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        return context

    def process(self, raw_bytes: bytes, requester_hash: str) -> StoredTransaction:
        """Parse and verify one statement into its storable record."""
        context = self.run(raw_bytes, requester_hash)
        if context.stored_transaction is None:
            raise StatementError("Pipeline finished without an assembled transaction")
        return context.stored_transaction


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    if not settings.transaction_salt or not settings.account_salt:
        Log.warning("Hash salts are not configured; identifier hashes are unsalted")
    gate = MetadataGate(
        expected_creator=settings.expected_creator,
        expected_producer=settings.expected_producer,
    )
    rasterizer = RasterizerFactory.create(settings)
    configure_tesseract(settings.tesseract_cmd)
    ocr_engine = TesseractOcrEngine(lang=settings.tesseract_lang)
    verifier = Verifier(
        decoder=ZbarBarcodeDecoder(),
        min_quality=settings.barcode_min_quality,
        symbology=settings.barcode_symbology,
    )
    assembler = RecordAssembler(
        transaction_salt=settings.transaction_salt,
        account_salt=settings.account_salt,
    )
    steps: list[PipelineStep] = [
        ValidateMetadataStep(gate),
        RasterizeStep(rasterizer),
        IndexTextStep(ocr_engine),
        SniffDocumentTypeStep(),
        ExtractFieldsStep(StatementGrammar(settings.account_number_digits)),
        VerifyStep(verifier),
        AssembleStep(assembler),
    ]
    return Processor(steps=steps, failed_step=LogFailureStep())
