from unittest.mock import MagicMock

import pytest

from audio_reader.synthesis.exceptions import SynthesisError, VoiceNotFoundError
from audio_reader.synthesis.preview import VoicePreviewer
from audio_reader.synthesis.primary_client import PrimarySpeech, PrimarySpeechClient
from audio_reader.synthesis.secondary_client import SecondarySpeechClient
from audio_reader.synthesis.speech_marks import SpeechMark
from audio_reader.synthesis.synthesizer import Synthesizer


def _make_synthesizer(
    blob_storage, primary: MagicMock | None
) -> tuple[Synthesizer, MagicMock]:
    secondary = MagicMock(spec=SecondarySpeechClient)
    secondary.synthesize.return_value = b"secondary-mp3"
    synthesizer = Synthesizer(
        primary=primary,
        secondary=secondary,
        secondary_voice="alloy",
        blob_storage=blob_storage,
    )
    return synthesizer, secondary


class TestSynthesizerPrimary:
    def test_uses_primary_audio_and_marks(self, blob_storage) -> None:
        primary = MagicMock(spec=PrimarySpeechClient)
        primary.synthesize.return_value = PrimarySpeech(
            audio=b"primary-mp3",
            raw_marks=[
                {"time": 300, "type": "word"},
                {"time": 0, "wordIndex": 0},
            ],
        )
        synthesizer, secondary = _make_synthesizer(blob_storage, primary)

        result = synthesizer.synthesize("Hello world", "doc_1", "Matthew")

        primary.synthesize.assert_called_once_with("Hello world", "Matthew")
        secondary.synthesize.assert_not_called()
        assert result.audio_url.endswith("audio/doc_1.mp3")
        assert blob_storage.get(result.audio_url) == b"primary-mp3"
        assert result.speech_marks == [SpeechMark(0, 0), SpeechMark(300, 0)]

    def test_primary_failure_falls_back_to_secondary(self, blob_storage) -> None:
        primary = MagicMock(spec=PrimarySpeechClient)
        primary.synthesize.side_effect = SynthesisError("No audio chunks received")
        synthesizer, secondary = _make_synthesizer(blob_storage, primary)

        result = synthesizer.synthesize("Hello world", "doc_1", "Joanna")

        secondary.synthesize.assert_called_once_with("Hello world", "alloy")
        assert blob_storage.get(result.audio_url) == b"secondary-mp3"
        assert result.speech_marks == []

    def test_both_failing_raises(self, blob_storage) -> None:
        primary = MagicMock(spec=PrimarySpeechClient)
        primary.synthesize.side_effect = SynthesisError("primary down")
        synthesizer, secondary = _make_synthesizer(blob_storage, primary)
        secondary.synthesize.side_effect = SynthesisError("secondary down")

        with pytest.raises(SynthesisError, match="primary down.*secondary down"):
            synthesizer.synthesize("Hello", "doc_1", "Joanna")


class TestSynthesizerUnconfiguredPrimary:
    def test_goes_straight_to_secondary(self, blob_storage) -> None:
        synthesizer, secondary = _make_synthesizer(blob_storage, None)

        result = synthesizer.synthesize("Hello", "doc_2", "Joanna")

        secondary.synthesize.assert_called_once_with("Hello", "alloy")
        assert result.audio_url.endswith("audio/doc_2.mp3")
        assert result.speech_marks == []

    def test_secondary_failure_raises(self, blob_storage) -> None:
        synthesizer, secondary = _make_synthesizer(blob_storage, None)
        secondary.synthesize.side_effect = SynthesisError("secondary down")

        with pytest.raises(SynthesisError, match="secondary down"):
            synthesizer.synthesize("Hello", "doc_2", "Joanna")

    def test_rerun_overwrites_same_key(self, blob_storage) -> None:
        synthesizer, secondary = _make_synthesizer(blob_storage, None)
        first = synthesizer.synthesize("Hello", "doc_2", "Joanna")
        secondary.synthesize.return_value = b"newer"

        second = synthesizer.synthesize("Hello", "doc_2", "Joanna")

        assert first.audio_url == second.audio_url
        assert blob_storage.get(second.audio_url) == b"newer"


class TestVoicePreviewer:
    def test_primary_voice_uses_primary(self) -> None:
        primary = MagicMock(spec=PrimarySpeechClient)
        primary.synthesize.return_value = PrimarySpeech(audio=b"polly")
        secondary = MagicMock(spec=SecondarySpeechClient)

        audio = VoicePreviewer(primary=primary, secondary=secondary).preview("Hi", "Amy")

        assert audio == b"polly"
        secondary.synthesize.assert_not_called()

    def test_secondary_voice_uses_that_voice(self) -> None:
        secondary = MagicMock(spec=SecondarySpeechClient)
        secondary.synthesize.return_value = b"openai"

        audio = VoicePreviewer(primary=None, secondary=secondary).preview("Hi", "nova")

        assert audio == b"openai"
        secondary.synthesize.assert_called_once_with("Hi", "nova")

    def test_primary_voice_without_primary_raises(self) -> None:
        previewer = VoicePreviewer(primary=None, secondary=MagicMock(spec=SecondarySpeechClient))

        with pytest.raises(SynthesisError, match="not configured"):
            previewer.preview("Hi", "Joanna")

    def test_unknown_voice_raises(self) -> None:
        previewer = VoicePreviewer(primary=None, secondary=MagicMock(spec=SecondarySpeechClient))

        with pytest.raises(VoiceNotFoundError):
            previewer.preview("Hi", "robot")
