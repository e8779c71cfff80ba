"""Provider factory -- creates one adapter per backend.

Uses PROVIDER_REGISTRY for extensibility. Adding a new provider
requires only a new entry in PROVIDER_CONFIGS.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from litcode_tutor.config import Settings
from litcode_tutor.llm.providers import PROVIDER_REGISTRY, LLMProvider
from litcode_tutor.llm.schemas import Backend

logger = structlog.get_logger()


@dataclass(frozen=True)
class ProviderFactoryConfig:
    """Typed configuration for creating an LLM provider instance."""

    get_default_model: Callable[[Settings], str]
    get_base_url: Callable[[Settings], str | None] | None = None


PROVIDER_CONFIGS: dict[Backend, ProviderFactoryConfig] = {
    Backend.GEMINI: ProviderFactoryConfig(
        get_default_model=lambda s: s.gemini_default_model,
    ),
    Backend.OPENAI: ProviderFactoryConfig(
        get_default_model=lambda s: s.openai_default_model,
        get_base_url=lambda s: s.openai_base_url,
    ),
    Backend.CLAUDE: ProviderFactoryConfig(
        get_default_model=lambda s: s.claude_default_model,
    ),
}


def create_providers(settings: Settings) -> dict[Backend, LLMProvider]:
    """Instantiate an adapter for every registered backend.

    Adapters need no API key up front (keys arrive per call), so
    every backend with a factory config is always available.

    Returns dict: backend -> LLMProvider instance.
    """
    providers: dict[Backend, LLMProvider] = {}

    for backend, provider_cls in PROVIDER_REGISTRY.items():
        config = PROVIDER_CONFIGS.get(backend)
        if config is None:
            continue

        kwargs: dict[str, Any] = {
            "default_model": config.get_default_model(settings),
            "timeout_s": settings.request_timeout_s,
            "max_tokens": settings.max_tokens,
            "temperature": settings.temperature,
        }

        if config.get_base_url is not None:
            kwargs["base_url"] = config.get_base_url(settings)

        providers[backend] = provider_cls(**kwargs)
        logger.info(
            "llm_provider_registered",
            provider=backend.value,
            model=kwargs["default_model"],
        )

    return providers
