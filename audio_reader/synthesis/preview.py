from audio_reader.synthesis.exceptions import SynthesisError
from audio_reader.synthesis.primary_client import PrimarySpeechClient
from audio_reader.synthesis.secondary_client import SecondarySpeechClient
from audio_reader.synthesis.voices import PRIMARY, provider_for_voice

DEFAULT_PREVIEW_TEXT = (
    "Hello, this is a preview of how this voice sounds. "
    "You can use this voice for your document."
)


class VoicePreviewer:
    """Synthesizes a short sample with the provider that owns the voice. Nothing is stored."""

    def __init__(
        self,
        *,
        primary: PrimarySpeechClient | None,
        secondary: SecondarySpeechClient,
    ) -> None:
        self._primary = primary
        self._secondary = secondary

    def preview(self, text: str, voice_id: str) -> bytes:
        """Return MP3 bytes for ``text`` spoken by ``voice_id``.

        Raises:
            VoiceNotFoundError: if the voice is in neither catalog.
            SynthesisError: if the owning provider is unavailable or fails.
        """
        if provider_for_voice(voice_id) == PRIMARY:
            if self._primary is None:
                raise SynthesisError("Primary speech provider is not configured")
            return self._primary.synthesize(text, voice_id).audio
        return self._secondary.synthesize(text, voice_id)
