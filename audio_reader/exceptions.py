class AudioReaderError(Exception):
    """Base exception for all audio reader errors."""
