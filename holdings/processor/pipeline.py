from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from PIL import Image

from holdings.extraction.models import DocumentType, ExtractedFields
from holdings.ocr.text_boxes import TextBoxIndex
from holdings.processor.models import StoredTransaction, Transaction


class Stage(str, Enum):
    START = "start"
    METADATA_VALIDATED = "metadata_validated"
    RASTERIZED = "rasterized"
    TEXT_INDEXED = "text_indexed"
    TYPE_SNIFFED = "type_sniffed"
    FIELDS_EXTRACTED = "fields_extracted"
    VERIFIED = "verified"
    ASSEMBLED = "assembled"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    raw_bytes: bytes
    requester_hash: str
    stage: Stage = Stage.START
    metadata: dict[str, str] = field(default_factory=dict)
    page_image: Image.Image | None = None
    text_boxes: TextBoxIndex | None = None
    document_type: DocumentType | None = None
    fields: ExtractedFields | None = None
    transaction: Transaction | None = None
    stored_transaction: StoredTransaction | None = None
    last_completed_stage: Stage | None = None
    failed_step: str = ""
    error: Exception | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
