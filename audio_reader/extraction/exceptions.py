from audio_reader.exceptions import AudioReaderError


class ExtractionError(AudioReaderError):
    """Raised when text cannot be extracted from a stored file."""
