import pytest

from audio_reader.client.synchronizer import SENTENCE, PlaybackSynchronizer
from audio_reader.synthesis.speech_marks import SpeechMark

_MARKS = [SpeechMark(0, 0), SpeechMark(500, 1), SpeechMark(1200, 2)]


class TestSynchronizerWithMarks:
    def test_uses_last_started_mark(self) -> None:
        sync = PlaybackSynchronizer("one two three", _MARKS)

        assert sync.on_time_update(0.6, 10) == 1

    @pytest.mark.parametrize(("seconds", "index"), [(0.0, 0), (0.5, 1), (1.19, 1), (5.0, 2)])
    def test_mark_boundaries(self, seconds: float, index: int) -> None:
        sync = PlaybackSynchronizer("one two three", _MARKS)

        assert sync.on_time_update(seconds, 10) == index

    def test_before_first_mark_keeps_index(self) -> None:
        sync = PlaybackSynchronizer("one two three", [SpeechMark(300, 1)])

        assert sync.on_time_update(0.1, 10) == 0

    def test_marks_are_used_instead_of_proportion(self) -> None:
        sync = PlaybackSynchronizer("one two three", _MARKS)

        assert sync.on_time_update(9.9, 10) == 2
        assert sync.has_marks


class TestSynchronizerProportional:
    def test_word_index_from_progress(self) -> None:
        sync = PlaybackSynchronizer(" ".join(f"w{i}" for i in range(50)))

        assert sync.on_time_update(40, 100) == 20
        assert sync.current_word_index == 20

    def test_clamps_to_last_token(self) -> None:
        sync = PlaybackSynchronizer("a b c")

        assert sync.on_time_update(100, 100) == 2

    def test_sentence_granularity(self) -> None:
        sync = PlaybackSynchronizer("One. Two. Three. Four.", granularity=SENTENCE)

        assert sync.on_time_update(5, 10) == 2
        assert sync.current_sentence_index == 2
        assert sync.current_word_index == 0

    def test_zero_words_is_zero(self) -> None:
        sync = PlaybackSynchronizer("")

        assert sync.on_time_update(3, 10) == 0
        assert sync.reading_progress() == 0
        assert sync.seek_time(0, 10) == 0

    def test_zero_duration_is_zero(self) -> None:
        assert PlaybackSynchronizer("a b c").on_time_update(1, 0) == 0


class TestSynchronizerControls:
    def test_ended_resets_indices(self) -> None:
        sync = PlaybackSynchronizer("a b c d")
        sync.on_time_update(9, 10)

        sync.on_ended()

        assert sync.current_word_index == 0
        assert sync.current_sentence_index == 0

    def test_seek_time_ignores_marks(self) -> None:
        sync = PlaybackSynchronizer("a b c d", [SpeechMark(0, 0)])

        assert sync.seek_time(2, 100) == 50

    def test_reading_progress(self) -> None:
        sync = PlaybackSynchronizer("a b c d")
        sync.on_time_update(5, 10)

        assert sync.reading_progress() == 50

    def test_unknown_granularity_raises(self) -> None:
        with pytest.raises(ValueError):
            PlaybackSynchronizer("a", granularity="paragraph")


class TestSynchronizerFromReaderView:
    def test_uses_text_and_marks(self) -> None:
        view = {
            "cleanedText": "one two three",
            "speechMarks": [{"time": 0, "wordIndex": 0}, {"time": 800, "wordIndex": 2}],
        }

        sync = PlaybackSynchronizer.from_reader_view(view)

        assert sync.words == ["one", "two", "three"]
        assert sync.has_marks
        assert sync.on_time_update(1.0, 10) == 2

    def test_empty_marks_fall_back_to_proportion(self) -> None:
        sync = PlaybackSynchronizer.from_reader_view(
            {"cleanedText": "a. b. c. d.", "speechMarks": []}, granularity=SENTENCE
        )

        assert not sync.has_marks
        assert sync.on_time_update(5, 10) == 2
