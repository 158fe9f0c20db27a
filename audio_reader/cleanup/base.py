from abc import ABC, abstractmethod


class BaseCleaner(ABC):
    """Contract for all cleanup adapters."""

    @abstractmethod
    def clean(self, raw_text: str) -> str:
        """Turn raw extracted text into prose ready for speech synthesis.

        Never raises: implementations degrade to ``normalize_text``.
        """
