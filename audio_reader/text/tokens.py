"""Word and sentence tokenization shared by speech marks and the reader."""

import re

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def tokenize_words(text: str) -> list[str]:
    """Split text into maximal runs of non-whitespace characters."""
    return text.split()


def tokenize_sentences(text: str) -> list[str]:
    """Split text on whitespace that follows ``.``, ``!`` or ``?``."""
    return [sentence for sentence in _SENTENCE_BOUNDARY.split(text.strip()) if sentence]
