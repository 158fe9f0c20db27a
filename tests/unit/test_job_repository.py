from audio_reader.store.models import JobStatus
from audio_reader.store.repositories.job_repository import JobRepository


def _repo(redis_client) -> JobRepository:
    return JobRepository(redis_client, "test")


class TestJobRepositoryQueue:
    def test_claim_returns_none_when_empty(self, redis_client) -> None:
        assert _repo(redis_client).claim_next_job() is None

    def test_enqueue_then_claim(self, redis_client) -> None:
        repo = _repo(redis_client)
        job = repo.enqueue("doc_1", "run-1", "Joanna")

        claimed = repo.claim_next_job()

        assert claimed is not None
        assert claimed.id == job.id
        assert claimed.document_id == "doc_1"
        assert claimed.run_token == "run-1"
        assert claimed.voice_id == "Joanna"
        assert claimed.status == JobStatus.PROCESSING
        assert redis_client.lrange("queue:test:processing", 0, -1) == [job.id]

    def test_claims_in_fifo_order(self, redis_client) -> None:
        repo = _repo(redis_client)
        first = repo.enqueue("doc_1", "run-1", "Joanna")
        second = repo.enqueue("doc_2", "run-2", "Joanna")

        assert repo.claim_next_job().id == first.id
        assert repo.claim_next_job().id == second.id
        assert repo.claim_next_job() is None

    def test_new_job_is_not_written_until_staged(self, redis_client) -> None:
        repo = _repo(redis_client)
        job = repo.new_job("doc_1", "run-1", "Joanna")

        assert repo.find_by_id(job.id) is None

        pipe = redis_client.pipeline(transaction=True)
        repo.stage(pipe, job)
        pipe.execute()

        assert repo.find_by_id(job.id).status == JobStatus.PENDING
        assert repo.claim_next_job().id == job.id


class TestJobRepositoryCompletion:
    def test_mark_done_records_status_and_note(self, redis_client) -> None:
        repo = _repo(redis_client)
        job = repo.enqueue("doc_1", "run-1", "Joanna")
        repo.claim_next_job()

        repo.mark_done(job.id, note="superseded")

        assert repo.find_by_id(job.id).status == JobStatus.DONE
        assert redis_client.hget(f"job:{job.id}", "note") == "superseded"
        assert redis_client.llen("queue:test:processing") == 0

    def test_mark_failed_is_not_requeued(self, redis_client) -> None:
        repo = _repo(redis_client)
        job = repo.enqueue("doc_1", "run-1", "Joanna")
        repo.claim_next_job()

        repo.mark_failed(job.id, "boom")

        failed = repo.find_by_id(job.id)
        assert failed.status == JobStatus.FAILED
        assert failed.error_message == "boom"
        assert repo.claim_next_job() is None

    def test_find_missing_returns_none(self, redis_client) -> None:
        assert _repo(redis_client).find_by_id("nope") is None
