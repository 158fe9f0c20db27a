import base64
import binascii
from dataclasses import dataclass, field
from typing import Any

import httpx

from audio_reader.synthesis.exceptions import SynthesisError


@dataclass
class PrimarySpeech:
    """Decoded response of the primary speech endpoint."""

    audio: bytes
    raw_marks: list[Any] = field(default_factory=list)


class PrimarySpeechClient:
    """HTTP client for the primary (Polly-style) speech endpoint.

    Request: ``POST {text, voiceId}``. Response: ``{audioChunks: [base64...],
    speechMarks?: [...]}``.
    """

    def __init__(self, url: str, timeout_seconds: int) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds

    def synthesize(self, text: str, voice_id: str) -> PrimarySpeech:
        """Return decoded audio and raw timing marks.

        Raises:
            SynthesisError: on transport errors, non-2xx responses, malformed
                JSON, or missing/undecodable audio chunks.
        """
        try:
            response = httpx.post(
                self._url,
                json={"text": text, "voiceId": voice_id},
                headers={"Accept": "application/json"},
                timeout=self._timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise SynthesisError(f"Primary speech provider network error: {exc}") from exc

        if not response.is_success:
            raise SynthesisError(
                f"Primary speech provider error: {response.status_code} "
                f"{response.reason_phrase} - {response.text[:500]}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise SynthesisError(f"Primary speech provider returned invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise SynthesisError("Primary speech provider response must be an object")

        chunks = payload.get("audioChunks")
        if not isinstance(chunks, list) or not chunks:
            raise SynthesisError("No audio chunks received from primary speech provider")
        if not all(isinstance(chunk, str) for chunk in chunks):
            raise SynthesisError("Primary speech provider audio chunks must be strings")

        try:
            audio = base64.b64decode("".join(chunks), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise SynthesisError(f"Primary speech provider audio is not base64: {exc}") from exc
        if not audio:
            raise SynthesisError("Primary speech provider returned empty audio")

        raw_marks = payload.get("speechMarks")
        return PrimarySpeech(
            audio=audio,
            raw_marks=raw_marks if isinstance(raw_marks, list) else [],
        )
