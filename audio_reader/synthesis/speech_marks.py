"""Speech mark model and its wire format.

Marks are stored on the document as a JSON array of ``{time, wordIndex}``
objects. A stored value of two characters or fewer (``"[]"``) means the
provider supplied no timing.
"""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SpeechMark:
    """Playback offset in milliseconds at which a word starts."""

    time: int
    word_index: int


def marks_to_objects(marks: list[SpeechMark]) -> list[dict[str, int]]:
    return [{"time": mark.time, "wordIndex": mark.word_index} for mark in marks]


def marks_from_objects(items: list[dict[str, Any]]) -> list[SpeechMark]:
    return [SpeechMark(time=int(item["time"]), word_index=int(item["wordIndex"])) for item in items]


def serialize_marks(marks: list[SpeechMark]) -> str:
    return json.dumps(marks_to_objects(marks), separators=(",", ":"))


def has_marks(raw: str | None) -> bool:
    return raw is not None and len(raw) > 2


def parse_marks(raw: str | None) -> list[SpeechMark]:
    """Parse the stored representation back into marks, preserving order.

    Raises:
        ValueError: if a non-empty value is not a JSON array of marks.
    """
    if not has_marks(raw):
        return []
    data = json.loads(raw)  # type: ignore[arg-type]
    if not isinstance(data, list):
        raise ValueError("Speech marks must be a JSON array")
    return marks_from_objects(data)


def normalize_marks(raw_marks: list[Any], word_count: int) -> list[SpeechMark]:
    """Turn provider marks into validated marks sorted by time.

    Entries without a usable ``time`` are dropped. The word index comes from
    ``wordIndex`` or, for Polly-style ``{"type": "word"}`` marks without one,
    from the mark's position among word marks. Indices outside
    ``[0, word_count)`` are dropped.
    """
    marks: list[SpeechMark] = []
    next_word = 0
    for entry in raw_marks:
        if not isinstance(entry, dict):
            continue
        time = _as_int(entry.get("time"))
        if time is None or time < 0:
            continue
        if "wordIndex" in entry:
            word_index = _as_int(entry["wordIndex"])
        elif entry.get("type") == "word":
            word_index = next_word
            next_word += 1
        else:
            continue
        if word_index is None or not 0 <= word_index < word_count:
            continue
        marks.append(SpeechMark(time=time, word_index=word_index))
    return sorted(marks, key=lambda mark: mark.time)


def _as_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return None
