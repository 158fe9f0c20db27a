from collections.abc import Callable

import redis

from audio_reader.processor.exceptions import DocumentNotFoundError, StaleRunError
from audio_reader.store.models import (
    DocumentRecord,
    DocumentStatus,
    document_key,
    user_documents_key,
    utc_now_iso,
)

# Artifacts of a previous run that must not survive into a new one.
_RUN_SCOPED_FIELDS = ("audioUrl", "speechMarks", "error", "errorAt", "processedAt")


class DocumentRepository:
    """Store operations for `document:{id}` hashes and their user index."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Load a document record.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        data = self._client.hgetall(document_key(document_id))
        if not data:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return DocumentRecord.from_hash(data)

    def create(self, document: DocumentRecord) -> None:
        """Persist a new document and add it to its owner's index."""
        pipe = self._client.pipeline(transaction=True)
        pipe.hset(document_key(document.id), mapping=document.to_hash())
        pipe.sadd(user_documents_key(document.user_id), document.id)
        pipe.execute()

    def list_ids_for_user(self, user_id: str) -> set[str]:
        return set(self._client.smembers(user_documents_key(user_id)))

    def mark_processing(
        self,
        document_id: str,
        run_token: str,
        voice_id: str,
        on_commit: Callable[[redis.client.Pipeline], None] | None = None,
    ) -> str:
        """Hand the record to a new run and return the processing start time.

        Replaces the run token so writes from any older run are rejected, and
        clears artifacts the previous run left behind. ``on_commit`` may queue
        further commands that are applied in the same transaction.

        Raises:
            DocumentNotFoundError: if the record no longer exists.
        """
        started_at = utc_now_iso()
        key = document_key(document_id)

        def _apply(pipe: redis.client.Pipeline) -> None:
            if not pipe.exists(key):
                raise DocumentNotFoundError(f"Document {document_id} not found")
            pipe.multi()
            pipe.hdel(key, *_RUN_SCOPED_FIELDS)
            pipe.hset(
                key,
                mapping={
                    "status": DocumentStatus.PROCESSING,
                    "processingStartedAt": started_at,
                    "voiceId": voice_id,
                    "runToken": run_token,
                },
            )
            if on_commit is not None:
                on_commit(pipe)

        self._client.transaction(_apply, key)
        return started_at

    def update_fields(self, document_id: str, run_token: str, fields: dict[str, str]) -> None:
        """Merge fields into the record if the run still owns it.

        Raises:
            DocumentNotFoundError: if the record no longer exists.
            StaleRunError: if a newer run replaced the token.
        """
        key = document_key(document_id)

        def _apply(pipe: redis.client.Pipeline) -> None:
            current = pipe.hget(key, "runToken")
            if current is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            if current != run_token:
                raise StaleRunError(
                    f"Run {run_token} no longer owns document {document_id}"
                )
            pipe.multi()
            pipe.hset(key, mapping=fields)

        self._client.transaction(_apply, key)

    def delete(self, document_id: str) -> DocumentRecord | None:
        """Remove the record and its index entry. Returns what was removed."""
        try:
            document = self.find_by_id(document_id)
        except DocumentNotFoundError:
            return None
        pipe = self._client.pipeline(transaction=True)
        pipe.srem(user_documents_key(document.user_id), document_id)
        pipe.delete(document_key(document_id))
        pipe.execute()
        return document
