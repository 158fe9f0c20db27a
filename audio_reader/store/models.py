from dataclasses import dataclass
from datetime import datetime, timezone


class DocumentStatus:
    """Lifecycle states of a document record."""

    UPLOADED = "uploaded"
    PROCESSING = "processing"
    READY = "ready"
    ERROR = "error"


class JobStatus:
    """Lifecycle states of a background processing job."""

    PENDING = "pending"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def document_key(document_id: str) -> str:
    return f"document:{document_id}"


def user_documents_key(user_id: str) -> str:
    return f"user:{user_id}:documents"


def job_key(job_id: str) -> str:
    return f"job:{job_id}"


@dataclass
class DocumentRecord:
    """Represents a `document:{id}` hash in the metadata store."""

    id: str
    user_id: str
    title: str
    original_filename: str
    file_type: str
    file_size: int
    file_url: str
    status: str
    uploaded_at: str
    processing_started_at: str | None = None
    voice_id: str | None = None
    run_token: str | None = None
    extracted_text: str | None = None
    extracted_at: str | None = None
    cleaned_text: str | None = None
    cleaned_at: str | None = None
    audio_url: str | None = None
    speech_marks: str | None = None
    processed_at: str | None = None
    error: str | None = None
    error_at: str | None = None

    @classmethod
    def from_hash(cls, data: dict[str, str]) -> "DocumentRecord":
        """Build a record from the flat string map stored in Redis."""
        return cls(
            id=data["id"],
            user_id=data["userId"],
            title=data.get("title", ""),
            original_filename=data.get("originalFilename", ""),
            file_type=data.get("fileType", ""),
            file_size=int(data.get("fileSize") or 0),
            file_url=data.get("fileUrl", ""),
            status=data.get("status", DocumentStatus.UPLOADED),
            uploaded_at=data.get("uploadedAt", ""),
            processing_started_at=data.get("processingStartedAt"),
            voice_id=data.get("voiceId"),
            run_token=data.get("runToken"),
            extracted_text=data.get("extractedText"),
            extracted_at=data.get("extractedAt"),
            cleaned_text=data.get("cleanedText"),
            cleaned_at=data.get("cleanedAt"),
            audio_url=data.get("audioUrl"),
            speech_marks=data.get("speechMarks"),
            processed_at=data.get("processedAt"),
            error=data.get("error"),
            error_at=data.get("errorAt"),
        )

    def to_hash(self) -> dict[str, str]:
        """Serialize to the flat string map stored in Redis, skipping unset fields."""
        fields = {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "originalFilename": self.original_filename,
            "fileType": self.file_type,
            "fileSize": str(self.file_size),
            "fileUrl": self.file_url,
            "status": self.status,
            "uploadedAt": self.uploaded_at,
            "processingStartedAt": self.processing_started_at,
            "voiceId": self.voice_id,
            "runToken": self.run_token,
            "extractedText": self.extracted_text,
            "extractedAt": self.extracted_at,
            "cleanedText": self.cleaned_text,
            "cleanedAt": self.cleaned_at,
            "audioUrl": self.audio_url,
            "speechMarks": self.speech_marks,
            "processedAt": self.processed_at,
            "error": self.error,
            "errorAt": self.error_at,
        }
        return {key: value for key, value in fields.items() if value is not None}


@dataclass
class JobRecord:
    """Represents a `job:{id}` hash in the metadata store."""

    id: str
    document_id: str
    run_token: str
    voice_id: str
    status: str
    error_message: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_hash(cls, data: dict[str, str]) -> "JobRecord":
        return cls(
            id=data["id"],
            document_id=data["documentId"],
            run_token=data["runToken"],
            voice_id=data.get("voiceId", ""),
            status=data.get("status", JobStatus.PENDING),
            error_message=data.get("error"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )
