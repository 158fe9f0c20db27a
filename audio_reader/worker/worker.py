import time

import redis

from audio_reader.config.settings import Settings
from audio_reader.logging.logger import Log
from audio_reader.store.models import JobRecord
from audio_reader.store.repositories.job_repository import JobRepository
from audio_reader.worker.job_runner import JobRunner


class Worker:
    """Poll loop: claim -> dispatch, sleeping when the queue is empty."""

    def __init__(
        self,
        job_repo: JobRepository,
        job_runner: JobRunner,
        settings: Settings,
    ) -> None:
        self._job_repo = job_repo
        self._job_runner = job_runner
        self._settings = settings

    def run(self, max_jobs: int | None = None) -> None:
        """Main poll loop. Runs forever until interrupted.

        If max_jobs is set, stop after processing that many jobs (for testing).
        """
        Log.info("Worker started, polling for jobs")
        jobs_done = 0
        try:
            while True:
                if max_jobs is not None and jobs_done >= max_jobs:
                    break
                job = self._try_claim_job()
                if job:
                    self._job_runner.run(job)
                    jobs_done += 1
                else:
                    Log.debug("No jobs available, sleeping")
                    time.sleep(self._settings.job_poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

    def _try_claim_job(self) -> JobRecord | None:
        """Attempt to claim the next pending job. Store outages are retried on the next poll."""
        try:
            return self._job_repo.claim_next_job()
        except redis.RedisError as exc:
            Log.warning(f"Store error, will retry: {exc}")
            return None
