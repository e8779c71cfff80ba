"""Maps (intent, problem snapshot) to the prompts sent to a backend.

Pure and deterministic: no network, no clock, no randomness. Templates
are package data under ``litcode_tutor/prompts``.
"""

from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

from litcode_tutor.agents.prompt_loader import PromptData, load_prompt, render_template
from litcode_tutor.llm.schemas import ProblemSnapshot, PromptIntent

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"

PROMPT_PATHS: dict[PromptIntent, Path] = {
    PromptIntent.CHAT: PROMPTS_DIR / "chat.yaml",
    PromptIntent.COMPLEXITY_ANALYSIS: PROMPTS_DIR / "complexity_analysis.yaml",
    PromptIntent.FOLLOW_UP_CHALLENGE: PROMPTS_DIR / "follow_up_challenge.yaml",
}

TITLE_PLACEHOLDER = "Unknown Problem"
DESCRIPTION_PLACEHOLDER = "Could not find description."
CODE_PLACEHOLDER = "// No code found. Please ensure code is visible in the editor."


class PreparedPrompt(NamedTuple):
    """Rendered prompts ready for the router."""

    system_prompt: str
    user_prompt: str
    prompt_version: str


@lru_cache(maxsize=len(PROMPT_PATHS))
def _template_for(intent: PromptIntent) -> PromptData:
    return load_prompt(PROMPT_PATHS[intent])


def _or_placeholder(value: str, placeholder: str) -> str:
    return value if value.strip() else placeholder


def build_prompt(
    intent: PromptIntent,
    problem: ProblemSnapshot,
    *,
    user_message: str = "",
) -> PreparedPrompt:
    """Render the system prompt and user message for an intent.

    Args:
        intent: Which workflow the call serves.
        problem: Snapshot of the problem page; empty fields are
            replaced by placeholder text.
        user_message: The learner's question, used verbatim by the
            chat intent and ignored by the others.

    Returns:
        PreparedPrompt with both rendered strings and the template version.
    """
    template = _template_for(intent)
    values = {
        "title": _or_placeholder(problem.title, TITLE_PLACEHOLDER),
        "description": _or_placeholder(problem.description, DESCRIPTION_PLACEHOLDER),
        "code": _or_placeholder(problem.code, CODE_PLACEHOLDER),
        "question": user_message,
    }
    return PreparedPrompt(
        system_prompt=render_template(template.system_prompt, **values),
        user_prompt=render_template(template.user_prompt_template, **values),
        prompt_version=template.version,
    )
