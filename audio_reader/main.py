from audio_reader.config.settings import Settings
from audio_reader.logging.logger import Log
from audio_reader.processor.processor import build_processor
from audio_reader.storage.factory import BlobStorageFactory
from audio_reader.store.connection import close_client, create_client
from audio_reader.store.repositories.document_repository import DocumentRepository
from audio_reader.store.repositories.job_repository import JobRepository
from audio_reader.worker.job_runner import JobRunner
from audio_reader.worker.worker import Worker


def main() -> None:
    """Entry point: connect store -> build dependencies -> start worker loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    client = create_client(settings)

    try:
        doc_repo = DocumentRepository(client)
        job_repo = JobRepository(client, settings.job_queue_name)
        blob_storage = BlobStorageFactory.create(settings)
        processor = build_processor(settings, doc_repo, blob_storage)
        job_runner = JobRunner(processor, job_repo)
        worker = Worker(job_repo, job_runner, settings)
        worker.run()
    finally:
        close_client(client)


if __name__ == "__main__":
    main()
