from audio_reader.cleanup.factory import CleanerFactory
from audio_reader.config.settings import Settings
from audio_reader.extraction.factory import ExtractorFactory
from audio_reader.extraction.source_fetcher import SourceFetcher
from audio_reader.logging.logger import Log
from audio_reader.processor.exceptions import DocumentNotFoundError, StaleRunError
from audio_reader.processor.pipeline import PipelineContext, PipelineStep
from audio_reader.processor.steps import (
    CleanTextStep,
    ExtractTextStep,
    LoadDocumentStep,
    MarkErrorStep,
    PersistCleanedStep,
    PersistExtractedStep,
    PersistReadyStep,
    SynthesizeStep,
)
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.store.repositories.document_repository import DocumentRepository
from audio_reader.synthesis.factory import SynthesisFactory

DEFAULT_ERROR_MESSAGE = "Processing failed"


class Processor:
    """Runs the extract -> clean -> synthesize pipeline for one processing run.

    Any failing step ends the run: the failure is recorded on the document by
    ``failed_step`` and re-raised so the job can be marked failed. A run that
    lost ownership of its document (newer run, deleted record) stops without
    writing anything further.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, document_id: str, run_token: str, voice_id: str) -> PipelineContext:
        Log.info(f"Processing document {document_id} (run {run_token})")
        context = PipelineContext(document_id=document_id, run_token=run_token, voice_id=voice_id)
        try:
            for step in self._steps:
                context = step.run(context)
        except (StaleRunError, DocumentNotFoundError) as exc:
            return self._supersede(context, exc)
        except Exception as exc:
            context.error_message = str(exc) or DEFAULT_ERROR_MESSAGE
            try:
                self._failed_step.run(context)
            except (StaleRunError, DocumentNotFoundError) as stale:
                return self._supersede(context, stale)
            raise
        return context

    def _supersede(self, context: PipelineContext, exc: Exception) -> PipelineContext:
        Log.warning(f"Run {context.run_token} for document {context.document_id} stopped: {exc}")
        context.superseded = True
        return context


def build_processor(
    settings: Settings,
    doc_repo: DocumentRepository,
    blob_storage: BaseBlobStorage,
) -> Processor:
    """Build a Processor with all required adapters."""
    fetcher = SourceFetcher(blob_storage, settings.source_fetch_timeout_seconds)
    extractor = ExtractorFactory.create(settings, fetcher)
    cleaner = CleanerFactory.create(settings)
    synthesizer = SynthesisFactory.create_synthesizer(settings, blob_storage)
    steps = [
        LoadDocumentStep(doc_repo),
        ExtractTextStep(extractor),
        PersistExtractedStep(doc_repo),
        CleanTextStep(cleaner),
        PersistCleanedStep(doc_repo),
        SynthesizeStep(synthesizer),
        PersistReadyStep(doc_repo),
    ]
    return Processor(steps=steps, failed_step=MarkErrorStep(doc_repo))
