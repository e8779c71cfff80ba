"""Anthropic Claude provider."""

from typing import Any

import anthropic

from litcode_tutor.errors import MalformedResponseError
from litcode_tutor.llm.providers.base import LLMProvider
from litcode_tutor.llm.schemas import History, Speaker

# Messages API rejects temperatures above 1.0
_MAX_TEMPERATURE = 1.0


class AnthropicProvider(LLMProvider):
    """Anthropic provider using official SDK."""

    provider_name = "claude"
    role_map = {Speaker.USER: "user", Speaker.ASSISTANT: "assistant"}

    def build_request(
        self,
        system_prompt: str,
        history: History,
        user_message: str,
    ) -> dict[str, Any]:
        messages = [
            {"role": self._native_role(turn.speaker), "content": turn.text}
            for turn in history
        ]
        messages.append({"role": "user", "content": user_message})
        payload: dict[str, Any] = {
            "model": self._default_model,
            "max_tokens": self._max_tokens,
            "temperature": min(self._temperature, _MAX_TEMPERATURE),
            "messages": messages,
        }
        if system_prompt:
            payload["system"] = system_prompt
        return payload

    async def _send(self, payload: dict[str, Any], api_key: str) -> str:
        async with anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=self._timeout_s,
            max_retries=0,
        ) as client:
            response = await client.messages.create(**payload)
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        try:
            return "".join(
                block.text for block in response.content if block.type == "text"
            )
        except (AttributeError, TypeError) as exc:
            raise MalformedResponseError(str(exc)) from exc
