"""OpenAI-compatible provider."""

from typing import Any

import openai

from litcode_tutor.errors import MalformedResponseError
from litcode_tutor.llm.providers.base import LLMProvider
from litcode_tutor.llm.schemas import History, Speaker


class OpenAICompatProvider(LLMProvider):
    """Provider for OpenAI API and compatible services.

    Compatible services use the same API format with a different base_url.
    """

    role_map = {Speaker.USER: "user", Speaker.ASSISTANT: "assistant"}

    def __init__(
        self,
        default_model: str,
        *,
        provider_name: str = "openai",
        base_url: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(default_model, **kwargs)
        self.provider_name = provider_name
        self._base_url = base_url

    def build_request(
        self,
        system_prompt: str,
        history: History,
        user_message: str,
    ) -> dict[str, Any]:
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.extend(
            {"role": self._native_role(turn.speaker), "content": turn.text}
            for turn in history
        )
        messages.append({"role": "user", "content": user_message})
        return {
            "model": self._default_model,
            "messages": messages,
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }

    async def _send(self, payload: dict[str, Any], api_key: str) -> str:
        async with openai.AsyncOpenAI(
            api_key=api_key,
            base_url=self._base_url,
            timeout=self._timeout_s,
            max_retries=0,
        ) as client:
            # OpenAI SDK expects union of typed message params, but
            # accepts plain dicts at runtime.
            response = await client.chat.completions.create(**payload)  # type: ignore[call-overload]
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as exc:
            raise MalformedResponseError(str(exc) or "no choices") from exc
