"""Language model text cleanup with a local fallback."""

from audio_reader.ai.client_base import BaseAIClient
from audio_reader.ai.prompt_loader import load_prompt
from audio_reader.cleanup.base import BaseCleaner
from audio_reader.cleanup.fallback import normalize_text
from audio_reader.logging.logger import Log


class Cleaner(BaseCleaner):
    """Asks a language model to make OCR output readable aloud."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        temperature: float = 0.2,
        system_prompt: str | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = (
            system_prompt if system_prompt is not None else load_prompt("cleanup_prompt.txt")
        )

    def clean(self, raw_text: str) -> str:
        try:
            cleaned = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=raw_text,
            ).strip()
        except Exception as exc:  # noqa: BLE001 - any provider failure degrades to local cleanup
            Log.warning(f"AI cleanup failed, using local normalization: {exc}")
            return normalize_text(raw_text)

        if not cleaned:
            Log.warning("AI cleanup returned empty text, using local normalization")
            return normalize_text(raw_text)
        return cleaned


class LocalCleaner(BaseCleaner):
    """Cleanup without a language model."""

    def clean(self, raw_text: str) -> str:
        return normalize_text(raw_text)
