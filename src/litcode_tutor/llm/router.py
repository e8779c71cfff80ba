"""ProviderRouter -- central entry point for all LLM calls.

Single polymorphism point: resolves the backend identifier to its
adapter, forwards the call, and attributes failures to the backend
that produced them. Exactly one adapter call per request, no fallback
to other backends.
"""

from collections.abc import Mapping

import structlog

from litcode_tutor.errors import BackendErrorKind
from litcode_tutor.llm.providers.base import (
    Credentials,
    LLMProvider,
    classify_error,
    describe_error,
)
from litcode_tutor.llm.schemas import Backend, CompletionResult, History

logger = structlog.get_logger()


class ProviderRouter:
    """Routes a completion to the adapter for the selected backend.

    Holds only the immutable backend -> adapter table; credentials and
    history arrive with each call and are never retained.
    """

    def __init__(self, providers: Mapping[Backend, LLMProvider]) -> None:
        self._providers: dict[Backend, LLMProvider] = dict(providers)

    @property
    def backends(self) -> list[Backend]:
        return list(self._providers)

    def get_provider(self, backend: str | Backend) -> LLMProvider | None:
        parsed = Backend.parse(backend)
        if parsed is None:
            return None
        return self._providers.get(parsed)

    async def complete(
        self,
        backend: str | Backend,
        system_prompt: str,
        history: History,
        user_message: str,
        credentials: Credentials,
    ) -> CompletionResult:
        """Dispatch one completion and return a uniformly wrapped result."""
        parsed = Backend.parse(backend)
        provider = self._providers.get(parsed) if parsed is not None else None
        if parsed is None or provider is None:
            logger.warning(
                "unknown_backend_requested",
                backend=str(backend),
                available=[b.value for b in self._providers],
            )
            return CompletionResult.failure(
                BackendErrorKind.INVALID_PROVIDER,
                describe_error(BackendErrorKind.INVALID_PROVIDER, f"'{backend}'"),
            )

        try:
            result = await provider.complete(
                system_prompt,
                tuple(history),
                user_message,
                credentials,
            )
        except Exception as exc:
            kind = classify_error(exc)
            logger.error(
                "llm_provider_raised",
                provider=parsed.value,
                error_kind=kind.value,
                exc_info=True,
            )
            result = CompletionResult.failure(kind, describe_error(kind, exc))

        return result.attributed_to(parsed.value)
