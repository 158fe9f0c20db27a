"""Request-side operations: upload, processing trigger, status, deletion."""

import secrets
import string
import time
import uuid
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

from audio_reader.logging.logger import Log
from audio_reader.processor.exceptions import (
    DocumentNotFoundError,
    DocumentNotReadyError,
    ForbiddenError,
    ValidationError,
)
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.store.models import DocumentRecord, DocumentStatus, JobRecord, utc_now_iso
from audio_reader.store.repositories.document_repository import DocumentRepository
from audio_reader.store.repositories.job_repository import JobRepository
from audio_reader.synthesis.speech_marks import marks_to_objects, parse_marks

ALLOWED_FILE_TYPES = frozenset(
    {
        "application/pdf",
        "image/png",
        "image/jpeg",
        "image/jpg",
        "image/gif",
        "image/bmp",
        "image/webp",
    }
)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_document_id() -> str:
    """``doc_<epoch-ms>_<9 random base36 chars>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"doc_{int(time.time() * 1000)}_{suffix}"


def title_from_filename(filename: str) -> str:
    stem, dot, _extension = filename.rpartition(".")
    return stem if dot and stem else filename


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    content_type: str
    data: bytes


class DocumentService:
    def __init__(
        self,
        doc_repo: DocumentRepository,
        blob_storage: BaseBlobStorage,
        max_upload_bytes: int,
    ) -> None:
        self._doc_repo = doc_repo
        self._blob_storage = blob_storage
        self._max_upload_bytes = max_upload_bytes

    def upload(self, user_id: str, upload: UploadedFile) -> DocumentRecord:
        """Store the file and create its record with status ``uploaded``.

        Raises:
            ValidationError: for an unsupported type or an oversized file.
        """
        if upload.content_type not in ALLOWED_FILE_TYPES:
            raise ValidationError("Unsupported file type")
        if len(upload.data) > self._max_upload_bytes:
            raise ValidationError("File too large")

        filename = PurePath(upload.filename).name or "document"
        document_id = new_document_id()
        file_url = self._blob_storage.put(
            f"documents/{document_id}/{filename}",
            upload.data,
            upload.content_type,
        )
        document = DocumentRecord(
            id=document_id,
            user_id=user_id,
            title=title_from_filename(filename),
            original_filename=filename,
            file_type=upload.content_type,
            file_size=len(upload.data),
            file_url=file_url,
            status=DocumentStatus.UPLOADED,
            uploaded_at=utc_now_iso(),
        )
        self._doc_repo.create(document)
        Log.info(f"Uploaded document {document_id} for user {user_id}: {len(upload.data)} bytes")
        return document

    def get_status(self, document_id: str, user_id: str) -> dict[str, str]:
        """Status view of an owned document. Foreign documents look missing."""
        document = self._find_owned(document_id, user_id)
        view = {"id": document.id, "status": document.status, "title": document.title}
        if document.error is not None:
            view["error"] = document.error
        if document.audio_url is not None:
            view["audioUrl"] = document.audio_url
        if document.processed_at is not None:
            view["processedAt"] = document.processed_at
        return view

    def get_reader_view(self, document_id: str, user_id: str) -> dict[str, Any]:
        """Everything the reader needs to play a finished document.

        Raises:
            DocumentNotFoundError: if the document is missing or not owned by ``user_id``.
            DocumentNotReadyError: if processing has not completed successfully.
        """
        document = self._find_owned(document_id, user_id)
        if document.status != DocumentStatus.READY:
            raise DocumentNotReadyError("Document not ready for reading")
        return {
            "id": document.id,
            "title": document.title,
            "cleanedText": document.cleaned_text or "",
            "audioUrl": document.audio_url,
            "fileUrl": document.file_url,
            "fileType": document.file_type,
            "uploadedAt": document.uploaded_at,
            "speechMarks": marks_to_objects(parse_marks(document.speech_marks)),
        }

    def delete_document(self, document_id: str) -> bool:
        """Remove the record, its index entry, and its blobs. Returns False if it was missing."""
        document = self._doc_repo.delete(document_id)
        if document is None:
            return False
        for url in (document.file_url, document.audio_url):
            if url:
                self._blob_storage.delete(url)
        Log.info(f"Deleted document {document_id}")
        return True

    def _find_owned(self, document_id: str, user_id: str) -> DocumentRecord:
        document = self._doc_repo.find_by_id(document_id)
        if document.user_id != user_id:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document


class ProcessingService:
    def __init__(
        self,
        doc_repo: DocumentRepository,
        job_repo: JobRepository,
        default_voice_id: str,
    ) -> None:
        self._doc_repo = doc_repo
        self._job_repo = job_repo
        self._default_voice_id = default_voice_id

    def request_processing(
        self,
        document_id: str,
        user_id: str,
        voice_id: str | None = None,
    ) -> JobRecord:
        """Start a new processing run and queue it for the worker.

        Raises:
            DocumentNotFoundError: if the document does not exist.
            ForbiddenError: if ``user_id`` does not own the document.
        """
        document = self._doc_repo.find_by_id(document_id)
        if document.user_id != user_id:
            raise ForbiddenError("Unauthorized")

        voice_id = voice_id or self._default_voice_id
        run_token = uuid.uuid4().hex
        job = self._job_repo.new_job(document_id, run_token, voice_id)
        self._doc_repo.mark_processing(
            document_id,
            run_token,
            voice_id,
            on_commit=lambda pipe: self._job_repo.stage(pipe, job),
        )
        Log.info(f"Queued job {job.id} for document {document_id} with voice {voice_id}")
        return job
