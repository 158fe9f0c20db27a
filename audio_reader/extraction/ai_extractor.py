"""Vision/document language model text extraction."""

from audio_reader.ai.client_base import Attachment, BaseAIClient
from audio_reader.ai.exceptions import AIClientError
from audio_reader.ai.prompt_loader import load_prompt
from audio_reader.extraction.base import (
    PDF_MIME_TYPE,
    BaseExtractor,
    is_supported_mime_type,
    require_text,
)
from audio_reader.extraction.exceptions import ExtractionError
from audio_reader.extraction.source_fetcher import SourceFetcher
from audio_reader.logging.logger import Log

_SYSTEM_PROMPT = "You transcribe documents verbatim."


class AIExtractor(BaseExtractor):
    """Sends the file to a document-capable model and asks for its text verbatim."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        fetcher: SourceFetcher,
    ) -> None:
        self._client = client
        self._model = model
        self._fetcher = fetcher
        self._pdf_prompt = load_prompt("extraction_pdf_prompt.txt")
        self._image_prompt = load_prompt("extraction_image_prompt.txt")

    def extract(self, file_url: str, mime_type: str) -> str:
        if not is_supported_mime_type(mime_type):
            raise ExtractionError(f"Unsupported file type: {mime_type}")

        data = self._fetcher.fetch(file_url)
        Log.debug(f"Fetched {len(data)} bytes from {file_url}")

        is_pdf = mime_type == PDF_MIME_TYPE
        kind = "PDF" if is_pdf else "image"
        try:
            text = self._client.create_chat_completion(
                model=self._model,
                temperature=0.0,
                system_prompt=_SYSTEM_PROMPT,
                user_prompt=self._pdf_prompt if is_pdf else self._image_prompt,
                attachment=Attachment(
                    data=data,
                    mime_type=mime_type,
                    filename="document.pdf" if is_pdf else "document",
                ),
            )
        except AIClientError as exc:
            raise ExtractionError(f"Failed to extract text from {kind}: {exc}") from exc
        return require_text(text)
