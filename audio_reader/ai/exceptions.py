from audio_reader.exceptions import AudioReaderError


class AIClientError(AudioReaderError):
    """Raised when a language model call fails or returns nothing usable."""


class AINetworkError(AIClientError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
