from audio_reader.config.settings import Settings
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.synthesis.preview import VoicePreviewer
from audio_reader.synthesis.primary_client import PrimarySpeechClient
from audio_reader.synthesis.secondary_client import SecondarySpeechClient
from audio_reader.synthesis.synthesizer import Synthesizer


class SynthesisFactory:
    """Builds speech clients from settings. An empty primary URL leaves the primary unconfigured."""

    @classmethod
    def create_primary(cls, settings: Settings) -> PrimarySpeechClient | None:
        url = settings.synthesis_primary_url.strip()
        if not url:
            return None
        return PrimarySpeechClient(url, settings.synthesis_primary_timeout_seconds)

    @classmethod
    def create_secondary(cls, settings: Settings) -> SecondarySpeechClient:
        return SecondarySpeechClient(
            api_key=settings.openai_api_key,
            model=settings.synthesis_secondary_model,
            timeout_seconds=settings.synthesis_timeout_seconds,
        )

    @classmethod
    def create_synthesizer(cls, settings: Settings, blob_storage: BaseBlobStorage) -> Synthesizer:
        return Synthesizer(
            primary=cls.create_primary(settings),
            secondary=cls.create_secondary(settings),
            secondary_voice=settings.synthesis_secondary_voice,
            blob_storage=blob_storage,
        )

    @classmethod
    def create_previewer(cls, settings: Settings) -> VoicePreviewer:
        return VoicePreviewer(
            primary=cls.create_primary(settings),
            secondary=cls.create_secondary(settings),
        )
