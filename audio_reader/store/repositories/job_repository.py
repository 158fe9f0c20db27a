import uuid

import redis

from audio_reader.store.models import JobRecord, JobStatus, job_key, utc_now_iso


class JobRepository:
    """Redis-backed job queue: a pending list, a processing list and one hash per job."""

    def __init__(self, client: redis.Redis, queue_name: str) -> None:
        self._client = client
        self._pending_key = f"queue:{queue_name}:pending"
        self._processing_key = f"queue:{queue_name}:processing"

    def enqueue(self, document_id: str, run_token: str, voice_id: str) -> JobRecord:
        """Create a pending job for one processing run."""
        job = self.new_job(document_id, run_token, voice_id)
        pipe = self._client.pipeline(transaction=True)
        self.stage(pipe, job)
        pipe.execute()
        return job

    def new_job(self, document_id: str, run_token: str, voice_id: str) -> JobRecord:
        """Build a pending job record without writing it."""
        now = utc_now_iso()
        return JobRecord(
            id=uuid.uuid4().hex,
            document_id=document_id,
            run_token=run_token,
            voice_id=voice_id,
            status=JobStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def stage(self, pipe: redis.client.Pipeline, job: JobRecord) -> None:
        """Queue the writes that publish ``job`` onto an open transaction."""
        pipe.hset(
            job_key(job.id),
            mapping={
                "id": job.id,
                "documentId": job.document_id,
                "runToken": job.run_token,
                "voiceId": job.voice_id,
                "status": job.status,
                "createdAt": job.created_at,
                "updatedAt": job.updated_at,
            },
        )
        pipe.lpush(self._pending_key, job.id)

    def claim_next_job(self) -> JobRecord | None:
        """Atomically move the oldest pending job onto the processing list."""
        job_id = self._client.lmove(self._pending_key, self._processing_key, "RIGHT", "LEFT")
        if job_id is None:
            return None

        self._client.hset(
            job_key(job_id),
            mapping={"status": JobStatus.PROCESSING, "updatedAt": utc_now_iso()},
        )
        return self.find_by_id(job_id)

    def mark_done(self, job_id: str, note: str | None = None) -> None:
        """Mark a job as done and drop it from the processing list."""
        fields = {"status": JobStatus.DONE, "updatedAt": utc_now_iso()}
        if note:
            fields["note"] = note
        self._finish(job_id, fields)

    def mark_failed(self, job_id: str, error: str) -> None:
        """Mark a job as failed. Failed jobs are never re-queued."""
        self._finish(
            job_id,
            {"status": JobStatus.FAILED, "error": error, "updatedAt": utc_now_iso()},
        )

    def find_by_id(self, job_id: str) -> JobRecord | None:
        data = self._client.hgetall(job_key(job_id))
        if not data:
            return None
        return JobRecord.from_hash(data)

    def _finish(self, job_id: str, fields: dict[str, str]) -> None:
        pipe = self._client.pipeline(transaction=True)
        pipe.hset(job_key(job_id), mapping=fields)
        pipe.lrem(self._processing_key, 0, job_id)
        pipe.execute()
