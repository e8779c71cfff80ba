"""LLM provider implementations.

PROVIDER_REGISTRY maps each Backend to its adapter class. To add a
new backend:

1. Add a member to Backend (llm/schemas.py)
2. Create a new module in this package implementing LLMProvider
3. Add entries to PROVIDER_REGISTRY below and PROVIDER_CONFIGS (factory.py)
"""

from litcode_tutor.llm.providers.anthropic import AnthropicProvider
from litcode_tutor.llm.providers.base import LLMProvider
from litcode_tutor.llm.providers.gemini import GeminiProvider
from litcode_tutor.llm.providers.openai_compat import OpenAICompatProvider
from litcode_tutor.llm.schemas import Backend

PROVIDER_REGISTRY: dict[Backend, type[LLMProvider]] = {
    Backend.GEMINI: GeminiProvider,
    Backend.OPENAI: OpenAICompatProvider,
    Backend.CLAUDE: AnthropicProvider,
}

__all__ = [
    "PROVIDER_REGISTRY",
    "AnthropicProvider",
    "GeminiProvider",
    "LLMProvider",
    "OpenAICompatProvider",
]
