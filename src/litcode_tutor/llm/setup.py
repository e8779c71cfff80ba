"""One-stop factory for assembling the LLM stack.

Usage::

    from litcode_tutor.config import get_settings
    from litcode_tutor.llm import create_provider_router

    router = create_provider_router(get_settings())
    result = await router.complete("gemini", system, history, message, key)
"""

import structlog

from litcode_tutor.config import Settings
from litcode_tutor.llm.factory import create_providers
from litcode_tutor.llm.router import ProviderRouter

logger = structlog.get_logger()


def create_provider_router(settings: Settings) -> ProviderRouter:
    """Assemble ProviderRouter with one adapter per backend.

    Args:
        settings: Application settings with default models and
            generation parameters.

    Returns:
        Configured ProviderRouter ready for use.
    """
    router = ProviderRouter(create_providers(settings))
    logger.info(
        "provider_router_created",
        providers=[b.value for b in router.backends],
        timeout_s=settings.request_timeout_s,
    )
    return router
