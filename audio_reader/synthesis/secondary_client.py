import httpx
import openai

from audio_reader.synthesis.exceptions import SynthesisError
from audio_reader.text.chunking import split_for_synthesis

# The speech endpoint rejects inputs longer than this.
MAX_INPUT_CHARS = 4096


class SecondarySpeechClient:
    """OpenAI speech client: ``{model, voice, input}`` in, raw MP3 bytes out.

    Text longer than one request allows is synthesized sentence-aligned in
    pieces and the MP3 streams are concatenated in order.
    """

    def __init__(self, *, api_key: str, model: str, timeout_seconds: int) -> None:
        self._model = model
        self._client = openai.OpenAI(api_key=api_key, timeout=timeout_seconds)

    def synthesize(self, text: str, voice: str) -> bytes:
        pieces = split_for_synthesis(text, MAX_INPUT_CHARS)
        if not pieces:
            raise SynthesisError("Nothing to synthesize")
        return b"".join(self._synthesize_piece(piece, voice) for piece in pieces)

    def _synthesize_piece(self, text: str, voice: str) -> bytes:
        try:
            response = self._client.audio.speech.create(
                model=self._model,
                voice=voice,
                input=text,
                response_format="mp3",
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SynthesisError(f"Secondary speech provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise SynthesisError(f"Secondary speech provider API error: {exc}") from exc

        audio = response.content
        if not audio:
            raise SynthesisError("Empty audio response from secondary speech provider")
        return audio
