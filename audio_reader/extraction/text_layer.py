"""Local extraction of a PDF's embedded text layer (no OCR)."""

import io
from abc import abstractmethod

import pdfplumber
import pymupdf

from audio_reader.extraction.base import PDF_MIME_TYPE, BaseExtractor, require_text
from audio_reader.extraction.exceptions import ExtractionError
from audio_reader.extraction.source_fetcher import SourceFetcher


class TextLayerExtractor(BaseExtractor):
    """Fetches a PDF and reads its text layer. Images are rejected."""

    def __init__(self, fetcher: SourceFetcher) -> None:
        self._fetcher = fetcher

    def extract(self, file_url: str, mime_type: str) -> str:
        if mime_type != PDF_MIME_TYPE:
            raise ExtractionError(
                f"{type(self).__name__} only reads PDF text layers, got {mime_type}"
            )
        pdf_bytes = self._fetcher.fetch(file_url)
        try:
            text = self.read_pdf_text(pdf_bytes)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Failed to extract text from PDF: {exc}") from exc
        return require_text(text)

    @abstractmethod
    def read_pdf_text(self, pdf_bytes: bytes) -> str:
        """Return the page texts joined by newlines."""


class PdfPlumberAdapter(TextLayerExtractor):
    """Extracts text from PDF using pdfplumber."""

    def read_pdf_text(self, pdf_bytes: bytes) -> str:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
        return "\n".join(pages).strip()


class PyMuPdfAdapter(TextLayerExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def read_pdf_text(self, pdf_bytes: bytes) -> str:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            pages = [page.get_text() for page in doc]
        return "\n".join(pages).strip()
