"""Speech synthesis with primary-to-secondary provider fallback."""

from dataclasses import dataclass, field

from audio_reader.logging.logger import Log
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.storage.exceptions import StorageError
from audio_reader.synthesis.exceptions import SynthesisError
from audio_reader.synthesis.primary_client import PrimarySpeechClient
from audio_reader.synthesis.secondary_client import SecondarySpeechClient
from audio_reader.synthesis.speech_marks import SpeechMark, normalize_marks
from audio_reader.text.tokens import tokenize_words

AUDIO_CONTENT_TYPE = "audio/mpeg"


def audio_path(document_id: str) -> str:
    return f"audio/{document_id}.mp3"


@dataclass
class SynthesisResult:
    audio_url: str
    speech_marks: list[SpeechMark] = field(default_factory=list)


class Synthesizer:
    """Turns cleaned text into one stored MP3 plus optional word timing.

    The primary client is tried first when configured. Any primary failure
    falls through to the secondary client, which renders with a fixed voice
    and supplies no timing.
    """

    def __init__(
        self,
        *,
        primary: PrimarySpeechClient | None,
        secondary: SecondarySpeechClient,
        secondary_voice: str,
        blob_storage: BaseBlobStorage,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._secondary_voice = secondary_voice
        self._blob_storage = blob_storage

    def synthesize(self, text: str, document_id: str, voice_id: str) -> SynthesisResult:
        """Render ``text`` and store it at ``audio/{document_id}.mp3``.

        Raises:
            SynthesisError: if every attempted provider failed, or the audio
                could not be stored.
        """
        primary_error: SynthesisError | None = None
        if self._primary is not None:
            try:
                speech = self._primary.synthesize(text, voice_id)
            except SynthesisError as exc:
                primary_error = exc
                Log.warning(
                    f"Primary speech provider failed for document {document_id}, "
                    f"falling back: {exc}"
                )
            else:
                marks = normalize_marks(speech.raw_marks, len(tokenize_words(text)))
                url = self._store(document_id, speech.audio)
                Log.info(
                    f"Synthesized document {document_id} with primary provider: "
                    f"{len(speech.audio)} bytes, {len(marks)} marks"
                )
                return SynthesisResult(audio_url=url, speech_marks=marks)

        try:
            audio = self._secondary.synthesize(text, self._secondary_voice)
        except SynthesisError as exc:
            if primary_error is not None:
                raise SynthesisError(
                    f"All speech providers failed. Primary: {primary_error}. Secondary: {exc}"
                ) from exc
            raise
        url = self._store(document_id, audio)
        Log.info(
            f"Synthesized document {document_id} with secondary provider: {len(audio)} bytes"
        )
        return SynthesisResult(audio_url=url)

    def _store(self, document_id: str, audio: bytes) -> str:
        try:
            return self._blob_storage.put(audio_path(document_id), audio, AUDIO_CONTENT_TYPE)
        except StorageError as exc:
            raise SynthesisError(f"Failed to store audio: {exc}") from exc
