from unittest.mock import MagicMock, patch

import redis

from audio_reader.store.models import JobRecord
from audio_reader.worker.worker import Worker


def _make_worker() -> tuple[Worker, MagicMock, MagicMock]:
    """Create a Worker with mocked dependencies."""
    mock_repo = MagicMock()
    mock_runner = MagicMock()
    settings = MagicMock(job_poll_interval_seconds=1)
    worker = Worker(mock_repo, mock_runner, settings)
    return worker, mock_repo, mock_runner


def _make_job(job_id: str = "job-1") -> JobRecord:
    return JobRecord(
        id=job_id, document_id="doc_1", run_token="run-1", voice_id="Joanna", status="processing"
    )


class TestWorkerDispatch:
    def test_dispatches_job_to_runner(self) -> None:
        worker, _repo, mock_runner = _make_worker()
        job = _make_job()

        with patch.object(worker, "_try_claim_job", side_effect=[job, KeyboardInterrupt]):
            worker.run()

        mock_runner.run.assert_called_once_with(job)

    def test_stops_after_max_jobs(self) -> None:
        worker, mock_repo, mock_runner = _make_worker()
        mock_repo.claim_next_job.side_effect = [_make_job("job-1"), _make_job("job-2")]

        worker.run(max_jobs=2)

        assert mock_runner.run.call_count == 2
        assert mock_repo.claim_next_job.call_count == 2


class TestWorkerSleep:
    def test_sleeps_when_no_job(self) -> None:
        worker, _repo, _runner = _make_worker()

        with (
            patch.object(worker, "_try_claim_job", side_effect=[None, KeyboardInterrupt]),
            patch("audio_reader.worker.worker.time.sleep") as mock_sleep,
        ):
            worker.run()

        mock_sleep.assert_called_once_with(1)


class TestWorkerStoreErrors:
    def test_store_error_counts_as_no_job(self) -> None:
        worker, mock_repo, _runner = _make_worker()
        mock_repo.claim_next_job.side_effect = redis.ConnectionError("down")

        assert worker._try_claim_job() is None


class TestWorkerShutdown:
    def test_keyboard_interrupt_stops_loop(self) -> None:
        worker, _repo, mock_runner = _make_worker()

        with patch.object(worker, "_try_claim_job", side_effect=KeyboardInterrupt):
            worker.run()

        mock_runner.run.assert_not_called()
