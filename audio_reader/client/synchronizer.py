"""Maps audio playback time to the word or sentence being read."""

import math
from bisect import bisect_right
from typing import Any

from audio_reader.synthesis.speech_marks import SpeechMark, marks_from_objects
from audio_reader.text.tokens import tokenize_sentences, tokenize_words

WORD = "word"
SENTENCE = "sentence"


class PlaybackSynchronizer:
    """Tracks the highlighted word and sentence for one document.

    With speech marks, the active word is the one whose mark most recently
    started. Without them, the position is estimated from the fraction of the
    audio already played.
    """

    def __init__(
        self,
        text: str,
        marks: list[SpeechMark] | None = None,
        granularity: str = WORD,
    ) -> None:
        if granularity not in (WORD, SENTENCE):
            raise ValueError(f"Unknown granularity '{granularity}'")
        self.words = tokenize_words(text)
        self.sentences = tokenize_sentences(text)
        self.granularity = granularity
        self._marks = sorted(marks or [], key=lambda mark: mark.time)
        self._mark_times = [mark.time for mark in self._marks]
        self.current_word_index = 0
        self.current_sentence_index = 0

    @classmethod
    def from_reader_view(
        cls, view: dict[str, Any], granularity: str = WORD
    ) -> "PlaybackSynchronizer":
        """Build a synchronizer from the `/api/documents/<id>/reader` payload."""
        return cls(
            view.get("cleanedText") or "",
            marks_from_objects(view.get("speechMarks") or []),
            granularity,
        )

    @property
    def has_marks(self) -> bool:
        return bool(self._marks)

    def _tokens(self) -> list[str]:
        return self.sentences if self.granularity == SENTENCE else self.words

    def on_time_update(self, current_time: float, duration: float) -> int:
        """Recompute the active index for the playback position. Returns it."""
        if self._marks:
            position = bisect_right(self._mark_times, current_time * 1000) - 1
            if position >= 0:
                self.current_word_index = self._marks[position].word_index
            return self.current_word_index

        count = len(self._tokens())
        if count == 0 or duration <= 0:
            index = 0
        else:
            index = min(max(math.floor(current_time / duration * count), 0), count - 1)
        if self.granularity == SENTENCE:
            self.current_sentence_index = index
        else:
            self.current_word_index = index
        return index

    def on_ended(self) -> None:
        self.current_word_index = 0
        self.current_sentence_index = 0

    def seek_time(self, index: int, duration: float) -> float:
        """Playback time in seconds for jumping to a token index."""
        count = len(self._tokens())
        if count == 0:
            return 0.0
        return index / count * duration

    def reading_progress(self) -> float:
        """Percentage of the document read so far at the current granularity."""
        count = len(self._tokens())
        if count == 0:
            return 0.0
        index = (
            self.current_sentence_index if self.granularity == SENTENCE else self.current_word_index
        )
        return index / count * 100
