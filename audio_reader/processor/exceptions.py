from audio_reader.exceptions import AudioReaderError


class ProcessorError(AudioReaderError):
    """Base exception for all processor-related errors."""


class NotFoundError(ProcessorError):
    """Raised when a referenced entity does not exist."""


class DocumentNotFoundError(NotFoundError):
    """Raised when a document cannot be found in the store."""


class AuthorizationError(ProcessorError):
    """Raised when the caller may not act on the requested resource."""


class NotAuthenticatedError(AuthorizationError):
    """Raised when the request carries no valid session."""


class ForbiddenError(AuthorizationError):
    """Raised when the caller does not own the requested resource."""


class ValidationError(ProcessorError):
    """Raised when a request or upload fails validation."""


class StaleRunError(ProcessorError):
    """Raised when a guarded write belongs to a run that was superseded."""


class DocumentNotReadyError(ProcessorError):
    """Raised when a document is read before processing finished."""
