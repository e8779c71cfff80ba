"""Google Gemini provider via google-genai SDK."""

from typing import Any

from google import genai
from google.genai import types

from litcode_tutor.errors import MalformedResponseError
from litcode_tutor.llm.providers.base import LLMProvider
from litcode_tutor.llm.schemas import History, Speaker

SYSTEM_ACKNOWLEDGMENT = "Understood. I will follow these instructions."


def _content(role: str, text: str) -> dict[str, Any]:
    return {"role": role, "parts": [{"text": text}]}


class GeminiProvider(LLMProvider):
    """Gemini provider using google-genai SDK.

    The system prompt travels as a synthesized opening exchange: a user
    turn stating the instructions and a model turn acknowledging them.
    Replayed history follows untouched.
    """

    provider_name = "gemini"
    role_map = {Speaker.USER: "user", Speaker.ASSISTANT: "model"}

    def build_request(
        self,
        system_prompt: str,
        history: History,
        user_message: str,
    ) -> dict[str, Any]:
        contents: list[dict[str, Any]] = []
        if system_prompt:
            contents.append(_content("user", system_prompt))
            contents.append(_content("model", SYSTEM_ACKNOWLEDGMENT))
        contents.extend(
            _content(self._native_role(turn.speaker), turn.text) for turn in history
        )
        contents.append(_content("user", user_message))
        return {
            "model": self._default_model,
            "contents": contents,
            "config": types.GenerateContentConfig(
                temperature=self._temperature,
                max_output_tokens=self._max_tokens,
            ),
        }

    async def _send(self, payload: dict[str, Any], api_key: str) -> str:
        async with genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(self._timeout_s * 1000)),
        ).aio as client:
            response = await client.models.generate_content(**payload)
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        try:
            if not response.candidates:
                raise MalformedResponseError("response did not include candidates")
            return response.text or ""
        except (AttributeError, IndexError, TypeError) as exc:
            raise MalformedResponseError(str(exc)) from exc
