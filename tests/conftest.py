import io
from collections.abc import Generator
from pathlib import Path

import fakeredis
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from audio_reader.config.settings import Settings
from audio_reader.storage.local_adapter import LocalBlobStorage
from audio_reader.store.models import DocumentRecord, DocumentStatus


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def redis_client() -> Generator[fakeredis.FakeRedis, None, None]:
    client = fakeredis.FakeRedis(decode_responses=True)
    try:
        yield client
    finally:
        client.flushall()
        client.close()


@pytest.fixture()
def blob_storage(tmp_path: Path) -> LocalBlobStorage:
    return LocalBlobStorage(tmp_path / "blobs")


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        local_storage_dir=str(tmp_path / "blobs"),
        extraction_provider="example",
        cleanup_provider="none",
        openai_api_key="test-key",
    )


def _make_document(
    document_id: str = "doc_1_abc",
    user_id: str = "user-1",
    file_url: str = "file:///tmp/source.pdf",
    file_type: str = "application/pdf",
    **overrides: object,
) -> DocumentRecord:
    fields: dict[str, object] = {
        "id": document_id,
        "user_id": user_id,
        "title": "source",
        "original_filename": "source.pdf",
        "file_type": file_type,
        "file_size": 1024,
        "file_url": file_url,
        "status": DocumentStatus.UPLOADED,
        "uploaded_at": "2026-01-01T00:00:00.000Z",
    }
    fields.update(overrides)
    return DocumentRecord(**fields)  # type: ignore[arg-type]


@pytest.fixture()
def make_document():
    """Factory for document records with overridable fields."""
    return _make_document
