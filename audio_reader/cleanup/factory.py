from audio_reader.ai.factory import AIClientFactory
from audio_reader.cleanup.base import BaseCleaner
from audio_reader.cleanup.cleaner import Cleaner, LocalCleaner
from audio_reader.config.settings import Settings


class CleanerFactory:
    """Creates the configured cleanup adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseCleaner:
        provider = settings.cleanup_provider.lower()
        if provider == "none":
            return LocalCleaner()
        if not AIClientFactory.is_supported(provider):
            raise ValueError(
                f"Unknown cleanup provider '{provider}'. "
                f"Choose from: {[*AIClientFactory.supported_providers(), 'none']}"
            )
        client = AIClientFactory.create(provider, settings, settings.cleanup_timeout_seconds)
        return Cleaner(
            client=client,
            model=settings.cleanup_model_name,
            temperature=settings.cleanup_temperature,
        )
