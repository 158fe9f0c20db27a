from audio_reader.exceptions import AudioReaderError


class ClientError(AudioReaderError):
    """Base exception for API consumer errors."""


class PollTimeoutError(ClientError, TimeoutError):
    """Raised when processing did not finish within the polling budget."""


class ProcessingFailedError(ClientError):
    """Raised when the document ended in the error state."""


class StatusQueryError(ClientError):
    """Raised when the status endpoint answered with a non-2xx response."""
