"""Socratic coding tutor over interchangeable LLM backends.

Quick start::

    from litcode_tutor import ProblemSnapshot, analyze_complexity

    result = await analyze_complexity(api_key, "gemini", code)
    print(result.display_text)
"""

from litcode_tutor.agents.tutor import (
    SocraticTutor,
    analyze_complexity,
    chat,
    get_follow_up_challenge,
)
from litcode_tutor.errors import BackendErrorKind
from litcode_tutor.llm.schemas import (
    Backend,
    CompletionResult,
    ConversationTurn,
    ProblemSnapshot,
    PromptIntent,
    Speaker,
    TutorConfig,
)

__all__ = [
    "Backend",
    "BackendErrorKind",
    "CompletionResult",
    "ConversationTurn",
    "ProblemSnapshot",
    "PromptIntent",
    "SocraticTutor",
    "Speaker",
    "TutorConfig",
    "analyze_complexity",
    "chat",
    "get_follow_up_challenge",
]
