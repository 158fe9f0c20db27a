import base64

import httpx
import openai

from audio_reader.ai.client_base import Attachment, BaseAIClient
from audio_reader.ai.exceptions import AIClientError, AINetworkError


class OpenAIClientAdapter(BaseAIClient):
    """AI client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        attachment: Attachment | None = None,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": self._user_content(user_prompt, attachment)},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AINetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AINetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIClientError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AIClientError("AI returned empty response")
        return content

    @staticmethod
    def _user_content(
        user_prompt: str, attachment: Attachment | None
    ) -> str | list[dict[str, object]]:
        if attachment is None:
            return user_prompt

        encoded = base64.b64encode(attachment.data).decode("ascii")
        data_url = f"data:{attachment.mime_type};base64,{encoded}"
        if attachment.mime_type.startswith("image/"):
            part: dict[str, object] = {"type": "image_url", "image_url": {"url": data_url}}
        else:
            part = {
                "type": "file",
                "file": {"filename": attachment.filename, "file_data": data_url},
            }
        return [{"type": "text", "text": user_prompt}, part]
