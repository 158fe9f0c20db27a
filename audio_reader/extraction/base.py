from abc import ABC, abstractmethod

from audio_reader.extraction.exceptions import ExtractionError

PDF_MIME_TYPE = "application/pdf"
NO_TEXT_MESSAGE = "No text could be extracted from the document"


def is_supported_mime_type(mime_type: str) -> bool:
    return mime_type == PDF_MIME_TYPE or mime_type.startswith("image/")


def require_text(text: str | None) -> str:
    """Return trimmed text, failing when nothing readable is left."""
    stripped = (text or "").strip()
    if not stripped:
        raise ExtractionError(NO_TEXT_MESSAGE)
    return stripped


class BaseExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, file_url: str, mime_type: str) -> str:
        """Extract plain text from a stored PDF or image.

        Args:
            file_url: Location of the uploaded source file.
            mime_type: MIME type recorded at upload.

        Returns:
            Extracted text, trimmed and non-empty.

        Raises:
            ExtractionError: if the fetch or provider call fails, the type is
                unsupported, or no text was recovered.
        """
