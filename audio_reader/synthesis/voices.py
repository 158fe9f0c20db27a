"""Voice catalogs for the two speech providers.

The catalog a voice id belongs to decides which provider renders it.
"""

from dataclasses import dataclass

from audio_reader.synthesis.exceptions import VoiceNotFoundError

PRIMARY = "primary"
SECONDARY = "secondary"


@dataclass(frozen=True, slots=True)
class VoiceProfile:
    """Declarative voice profile used by the voice picker.

    Attributes:
        id: Provider-native voice identifier.
        name: Human-readable label.
        language: BCP-47 language tag.
    """

    id: str
    name: str
    language: str


PRIMARY_VOICES: tuple[VoiceProfile, ...] = (
    VoiceProfile("Joanna", "Joanna (US Female)", "en-US"),
    VoiceProfile("Matthew", "Matthew (US Male)", "en-US"),
    VoiceProfile("Amy", "Amy (UK Female)", "en-GB"),
    VoiceProfile("Brian", "Brian (UK Male)", "en-GB"),
    VoiceProfile("Emma", "Emma (UK Female)", "en-GB"),
    VoiceProfile("Olivia", "Olivia (AU Female)", "en-AU"),
    VoiceProfile("Salli", "Salli (US Female)", "en-US"),
    VoiceProfile("Kimberly", "Kimberly (US Female)", "en-US"),
    VoiceProfile("Kendra", "Kendra (US Female)", "en-US"),
    VoiceProfile("Justin", "Justin (US Male)", "en-US"),
    VoiceProfile("Joey", "Joey (US Male)", "en-US"),
)

SECONDARY_VOICES: tuple[VoiceProfile, ...] = (
    VoiceProfile("alloy", "Alloy (Neutral)", "en-US"),
    VoiceProfile("echo", "Echo (Male)", "en-US"),
    VoiceProfile("fable", "Fable (British Male)", "en-GB"),
    VoiceProfile("onyx", "Onyx (Deep Male)", "en-US"),
    VoiceProfile("nova", "Nova (Female)", "en-US"),
    VoiceProfile("shimmer", "Shimmer (Soft Female)", "en-US"),
)

_PRIMARY_IDS = frozenset(voice.id for voice in PRIMARY_VOICES)
_SECONDARY_IDS = frozenset(voice.id for voice in SECONDARY_VOICES)


def provider_for_voice(voice_id: str) -> str:
    """Return ``PRIMARY`` or ``SECONDARY`` for a catalog voice.

    Raises:
        VoiceNotFoundError: if the id is in neither catalog.
    """
    if voice_id in _PRIMARY_IDS:
        return PRIMARY
    if voice_id in _SECONDARY_IDS:
        return SECONDARY
    raise VoiceNotFoundError(f"Unknown voice '{voice_id}'")
