from audio_reader.cleanup.base import BaseCleaner
from audio_reader.extraction.base import BaseExtractor
from audio_reader.logging.logger import Log
from audio_reader.processor.exceptions import StaleRunError
from audio_reader.processor.pipeline import PipelineContext, PipelineStep
from audio_reader.store.models import DocumentStatus, utc_now_iso
from audio_reader.store.repositories.document_repository import DocumentRepository
from audio_reader.synthesis.speech_marks import serialize_marks
from audio_reader.synthesis.synthesizer import Synthesizer


class LoadDocumentStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        document = self._doc_repo.find_by_id(context.document_id)
        if document.run_token != context.run_token:
            raise StaleRunError(
                f"Run {context.run_token} no longer owns document {context.document_id}"
            )
        context.document = document
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before extraction")
        context.extracted_text = self._extractor.extract(
            context.document.file_url,
            context.document.file_type,
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from document {context.document_id}"
        )
        return context


class PersistExtractedStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        self._doc_repo.update_fields(
            context.document_id,
            context.run_token,
            {"extractedText": context.extracted_text, "extractedAt": utc_now_iso()},
        )
        return context


class CleanTextStep(PipelineStep):
    def __init__(self, cleaner: BaseCleaner) -> None:
        self._cleaner = cleaner

    def run(self, context: PipelineContext) -> PipelineContext:
        context.cleaned_text = self._cleaner.clean(context.extracted_text)
        Log.info(f"Cleaned document {context.document_id}: {len(context.cleaned_text)} chars")
        return context


class PersistCleanedStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        self._doc_repo.update_fields(
            context.document_id,
            context.run_token,
            {"cleanedText": context.cleaned_text, "cleanedAt": utc_now_iso()},
        )
        return context


class SynthesizeStep(PipelineStep):
    def __init__(self, synthesizer: Synthesizer) -> None:
        self._synthesizer = synthesizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.synthesis = self._synthesizer.synthesize(
            context.cleaned_text,
            context.document_id,
            context.voice_id,
        )
        return context


class PersistReadyStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.synthesis is None:
            raise ValueError("PipelineContext.synthesis must be set before persist")
        self._doc_repo.update_fields(
            context.document_id,
            context.run_token,
            {
                "audioUrl": context.synthesis.audio_url,
                "speechMarks": serialize_marks(context.synthesis.speech_marks),
                "status": DocumentStatus.READY,
                "processedAt": utc_now_iso(),
            },
        )
        Log.info(f"Document {context.document_id} is ready")
        return context


class MarkErrorStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        self._doc_repo.update_fields(
            context.document_id,
            context.run_token,
            {
                "status": DocumentStatus.ERROR,
                "error": context.error_message,
                "errorAt": utc_now_iso(),
            },
        )
        Log.error(f"Document {context.document_id} marked as error: {context.error_message}")
        return context
