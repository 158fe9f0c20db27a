from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Attachment:
    """Binary document sent alongside a prompt (PDF page scan, photo, ...)."""

    data: bytes
    mime_type: str
    filename: str = "document"


class BaseAIClient(ABC):
    """Contract for provider-specific language model clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        attachment: Attachment | None = None,
    ) -> str:
        """Return provider response as plain text."""
