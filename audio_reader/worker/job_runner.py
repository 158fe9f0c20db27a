from audio_reader.logging.logger import Log
from audio_reader.processor.processor import Processor
from audio_reader.store.models import JobRecord
from audio_reader.store.repositories.job_repository import JobRepository

SUPERSEDED_NOTE = "superseded"


class JobRunner:
    """Run one job, catch exceptions, and record its outcome. Jobs are never retried."""

    def __init__(self, processor: Processor, job_repo: JobRepository) -> None:
        self._processor = processor
        self._job_repo = job_repo

    def run(self, job: JobRecord) -> None:
        """Execute a single job with error handling."""
        Log.info(f"Running job {job.id} for document {job.document_id}")
        try:
            context = self._processor.process(job.document_id, job.run_token, job.voice_id)
        except Exception as exc:
            Log.error(f"Job {job.id} failed: {exc}")
            self._job_repo.mark_failed(job.id, str(exc) or "Processing failed")
            return

        if context.superseded:
            self._job_repo.mark_done(job.id, note=SUPERSEDED_NOTE)
            Log.info(f"Job {job.id} superseded by a newer run")
        else:
            self._job_repo.mark_done(job.id)
            Log.info(f"Job {job.id} completed successfully")
