from audio_reader.exceptions import AudioReaderError


class StorageError(AudioReaderError):
    """Raised when a blob cannot be written, read or deleted."""
