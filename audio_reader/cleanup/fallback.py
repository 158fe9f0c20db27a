import re

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Deterministic local cleanup used when no language model is available.

    Collapses every whitespace run inside a paragraph to one space, keeps a
    single blank line between paragraphs and trims the ends. Idempotent, and
    non-empty input never yields an empty result: whitespace-only text
    becomes a single space.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    paragraphs = (
        _WHITESPACE_RUN.sub(" ", paragraph).strip()
        for paragraph in _PARAGRAPH_BREAK.split(text)
    )
    normalized = "\n\n".join(paragraph for paragraph in paragraphs if paragraph)
    if not normalized and text:
        return " "
    return normalized
