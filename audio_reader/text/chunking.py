"""Split long text into provider-sized pieces on sentence boundaries."""

from audio_reader.text.tokens import tokenize_sentences


def split_for_synthesis(text: str, max_chars: int) -> list[str]:
    """Pack whole sentences into chunks of at most ``max_chars`` characters.

    Sentences longer than the limit are cut on the last space before it, or
    hard-cut when there is none. Joining the chunks with single spaces gives
    back the text with its inter-sentence whitespace collapsed.
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be positive")

    chunks: list[str] = []
    current = ""
    for sentence in tokenize_sentences(text.strip()):
        for piece in _split_long(sentence, max_chars):
            if not current:
                current = piece
            elif len(current) + 1 + len(piece) <= max_chars:
                current = f"{current} {piece}"
            else:
                chunks.append(current)
                current = piece
    if current:
        chunks.append(current)
    return chunks


def _split_long(sentence: str, max_chars: int) -> list[str]:
    pieces: list[str] = []
    rest = sentence
    while len(rest) > max_chars:
        cut = rest.rfind(" ", 0, max_chars + 1)
        if cut <= 0:
            cut = max_chars
        pieces.append(rest[:cut].rstrip())
        rest = rest[cut:].lstrip()
    if rest:
        pieces.append(rest)
    return pieces
