"""Flask application factory for the document API."""

from dataclasses import dataclass

import redis
from flask import Flask

from audio_reader.api.errors import register_error_handlers
from audio_reader.api.routes import api_bp
from audio_reader.config.settings import Settings
from audio_reader.logging.logger import Log
from audio_reader.processor.service import DocumentService, ProcessingService
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.storage.factory import BlobStorageFactory
from audio_reader.store.connection import create_client
from audio_reader.store.repositories.document_repository import DocumentRepository
from audio_reader.store.repositories.job_repository import JobRepository
from audio_reader.synthesis.factory import SynthesisFactory
from audio_reader.synthesis.preview import VoicePreviewer

EXTENSION_KEY = "audio_reader"


@dataclass
class Services:
    """Collaborators shared by all request handlers."""

    settings: Settings
    redis_client: redis.Redis
    documents: DocumentService
    processing: ProcessingService
    previewer: VoicePreviewer


def create_app(
    settings: Settings | None = None,
    *,
    redis_client: redis.Redis | None = None,
    blob_storage: BaseBlobStorage | None = None,
    previewer: VoicePreviewer | None = None,
) -> Flask:
    """Build the app. Collaborators not passed in are built from settings."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    if redis_client is None:
        redis_client = create_client(settings)
    if blob_storage is None:
        blob_storage = BlobStorageFactory.create(settings)
    if previewer is None:
        previewer = SynthesisFactory.create_previewer(settings)

    doc_repo = DocumentRepository(redis_client)
    job_repo = JobRepository(redis_client, settings.job_queue_name)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes + 1024 * 1024
    app.extensions[EXTENSION_KEY] = Services(
        settings=settings,
        redis_client=redis_client,
        documents=DocumentService(doc_repo, blob_storage, settings.max_upload_bytes),
        processing=ProcessingService(doc_repo, job_repo, settings.default_voice_id),
        previewer=previewer,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)
    return app
