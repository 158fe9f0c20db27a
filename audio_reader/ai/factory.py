from typing import ClassVar

from audio_reader.ai.client_base import BaseAIClient
from audio_reader.ai.example_client_adapter import ExampleClientAdapter
from audio_reader.ai.openai_client_adapter import OpenAIClientAdapter
from audio_reader.config.settings import Settings


class AIClientFactory:
    """Creates language model clients for the extraction and cleanup stages."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
    }

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def is_supported(cls, provider: str) -> bool:
        return provider.lower() in cls.supported_providers()

    @classmethod
    def create(cls, provider: str, settings: Settings, timeout_seconds: int) -> BaseAIClient:
        """Create a client for ``provider`` using credentials from settings."""
        provider = provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for provider openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown AI provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "gemini": settings.gemini_api_key,
        }
        return key_map.get(provider, "") or ""
