from unittest.mock import patch

import pytest

from audio_reader.ai.example_client_adapter import ExampleClientAdapter
from audio_reader.ai.factory import AIClientFactory
from audio_reader.ai.openai_client_adapter import OpenAIClientAdapter
from audio_reader.config.settings import Settings


class TestAIClientFactory:
    def test_example_provider(self) -> None:
        client = AIClientFactory.create("example", Settings(_env_file=None), 10)

        assert isinstance(client, ExampleClientAdapter)

    def test_openai_provider_uses_default_base_url(self) -> None:
        settings = Settings(_env_file=None, openai_api_key="sk-test")
        with patch("audio_reader.ai.factory.OpenAIClientAdapter") as adapter_cls:
            AIClientFactory.create("openai", settings, 10)

        adapter_cls.assert_called_once_with(api_key="sk-test", timeout_seconds=10, base_url=None)

    def test_gemini_uses_compatible_endpoint(self) -> None:
        settings = Settings(_env_file=None, gemini_api_key="g-key")
        with patch("audio_reader.ai.factory.OpenAIClientAdapter") as adapter_cls:
            AIClientFactory.create("gemini", settings, 10)

        adapter_cls.assert_called_once_with(
            api_key="g-key",
            timeout_seconds=10,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="openai_compatible_base_url"):
            AIClientFactory.create("openai_compatible", Settings(_env_file=None), 10)

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown AI provider"):
            AIClientFactory.create("nope", Settings(_env_file=None), 10)

    def test_real_adapter_type(self) -> None:
        client = AIClientFactory.create("openai", Settings(_env_file=None, openai_api_key="k"), 10)

        assert isinstance(client, OpenAIClientAdapter)
