from audio_reader.exceptions import AudioReaderError


class SynthesisError(AudioReaderError):
    """Raised when no speech provider could synthesize the text."""


class VoiceNotFoundError(SynthesisError):
    """Raised when a voice id is in neither provider catalog."""
