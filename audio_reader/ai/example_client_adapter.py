"""Example AI client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAIClient and register the provider in AIClientFactory.
"""

from typing import ClassVar

from audio_reader.ai.client_base import Attachment, BaseAIClient


class ExampleClientAdapter(BaseAIClient):
    """Example adapter with deterministic output and no network calls.

    Prompts with an attachment get a fixed extracted text back; plain text
    prompts are echoed unchanged, which makes cleanup an identity transform.
    """

    DEFAULT_EXTRACTED_TEXT: ClassVar[str] = (
        "This is example text extracted without calling a provider."
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        attachment: Attachment | None = None,
    ) -> str:
        _ = model, temperature, system_prompt
        if attachment is not None:
            return self.DEFAULT_EXTRACTED_TEXT
        return user_prompt
