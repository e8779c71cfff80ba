"""LLM infrastructure: providers, schemas, router.

Quick start::

    from litcode_tutor.config import get_settings
    from litcode_tutor.llm import create_provider_router

    router = create_provider_router(get_settings())
    result = await router.complete("claude", system_prompt, history, message, key)
"""

from litcode_tutor.llm.router import ProviderRouter
from litcode_tutor.llm.schemas import (
    Backend,
    CompletionResult,
    ConversationTurn,
    ProblemSnapshot,
    PromptIntent,
    Speaker,
    TutorConfig,
)
from litcode_tutor.llm.setup import create_provider_router

__all__ = [
    "Backend",
    "CompletionResult",
    "ConversationTurn",
    "ProblemSnapshot",
    "PromptIntent",
    "ProviderRouter",
    "Speaker",
    "TutorConfig",
    "create_provider_router",
]
