"""SocraticTutor: the three tutor workflows on top of ProviderRouter."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from litcode_tutor.agents.prompt_builder import PreparedPrompt, build_prompt
from litcode_tutor.config import get_settings
from litcode_tutor.llm.providers.base import Credentials
from litcode_tutor.llm.router import ProviderRouter
from litcode_tutor.llm.schemas import (
    Backend,
    CompletionResult,
    ConversationTurn,
    ProblemSnapshot,
    PromptIntent,
    TutorConfig,
)
from litcode_tutor.llm.setup import create_provider_router

logger = structlog.get_logger()


class SocraticTutor:
    """Builds the prompt for an intent and sends it through the router.

    Steps:
        1. build_prompt: render YAML template for the intent
        2. router.complete: one call to the selected backend

    Every method returns a CompletionResult; nothing raises for backend
    failures.

    Args:
        router: ProviderRouter used for every call.
    """

    def __init__(self, router: ProviderRouter) -> None:
        self._router = router

    async def analyze_complexity(
        self,
        credentials: Credentials,
        backend: str | Backend,
        code: str,
    ) -> CompletionResult:
        """Ask the backend for time/space complexity of ``code``."""
        prepared = build_prompt(
            PromptIntent.COMPLEXITY_ANALYSIS, ProblemSnapshot(code=code)
        )
        return await self._dispatch(
            PromptIntent.COMPLEXITY_ANALYSIS, prepared, credentials, backend
        )

    async def get_follow_up_challenge(
        self,
        credentials: Credentials,
        backend: str | Backend,
        problem: ProblemSnapshot,
    ) -> CompletionResult:
        """Ask the backend for one follow-up question about the solution."""
        prepared = build_prompt(PromptIntent.FOLLOW_UP_CHALLENGE, problem)
        return await self._dispatch(
            PromptIntent.FOLLOW_UP_CHALLENGE, prepared, credentials, backend
        )

    async def chat(
        self,
        credentials: Credentials,
        backend: str | Backend,
        problem: ProblemSnapshot,
        history: Sequence[ConversationTurn],
        user_message: str,
    ) -> CompletionResult:
        """Send one chat turn; ``history`` is replayed unmodified."""
        prepared = build_prompt(
            PromptIntent.CHAT, problem, user_message=user_message
        )
        return await self._dispatch(
            PromptIntent.CHAT, prepared, credentials, backend, history=history
        )

    async def run(
        self,
        intent: PromptIntent | str,
        config: TutorConfig,
        problem: ProblemSnapshot,
        *,
        history: Sequence[ConversationTurn] = (),
        user_message: str = "",
    ) -> CompletionResult:
        """Dispatch any intent using the caller's TutorConfig.

        Raises:
            ValueError: If ``intent`` is not a PromptIntent value.
        """
        credentials = config.credentials_for()
        match PromptIntent(intent):
            case PromptIntent.COMPLEXITY_ANALYSIS:
                return await self.analyze_complexity(
                    credentials, config.backend, problem.code
                )
            case PromptIntent.FOLLOW_UP_CHALLENGE:
                return await self.get_follow_up_challenge(
                    credentials, config.backend, problem
                )
            case PromptIntent.CHAT:
                return await self.chat(
                    credentials, config.backend, problem, history, user_message
                )

    async def _dispatch(
        self,
        intent: PromptIntent,
        prepared: PreparedPrompt,
        credentials: Credentials,
        backend: str | Backend,
        *,
        history: Sequence[ConversationTurn] = (),
    ) -> CompletionResult:
        logger.debug(
            "tutor_request",
            intent=intent.value,
            backend=str(backend),
            prompt_version=prepared.prompt_version,
            history_turns=len(history),
        )
        result = await self._router.complete(
            backend,
            prepared.system_prompt,
            history,
            prepared.user_prompt,
            credentials,
        )
        logger.info(
            "tutor_response",
            intent=intent.value,
            backend=str(backend),
            ok=result.ok,
            error_kind=result.error_kind.value if result.error_kind else None,
        )
        return result


def _tutor(router: ProviderRouter | None) -> SocraticTutor:
    return SocraticTutor(router or create_provider_router(get_settings()))


async def analyze_complexity(
    credentials: Credentials,
    backend: str | Backend,
    code: str,
    *,
    router: ProviderRouter | None = None,
) -> CompletionResult:
    """Complexity analysis of ``code`` on the selected backend."""
    return await _tutor(router).analyze_complexity(credentials, backend, code)


async def get_follow_up_challenge(
    credentials: Credentials,
    backend: str | Backend,
    problem: ProblemSnapshot,
    *,
    router: ProviderRouter | None = None,
) -> CompletionResult:
    """One follow-up interview question for the learner's solution."""
    return await _tutor(router).get_follow_up_challenge(credentials, backend, problem)


async def chat(
    credentials: Credentials,
    backend: str | Backend,
    problem: ProblemSnapshot,
    history: Sequence[ConversationTurn],
    user_message: str,
    *,
    router: ProviderRouter | None = None,
) -> CompletionResult:
    """One Socratic chat turn."""
    return await _tutor(router).chat(
        credentials, backend, problem, history, user_message
    )
