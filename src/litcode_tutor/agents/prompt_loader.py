"""Prompt template loading and formatting utilities."""

import re
from pathlib import Path

import yaml
from pydantic import BaseModel


class PromptData(BaseModel):
    """Validated prompt template loaded from YAML.

    Fields:
        version: Prompt version for A/B testing (e.g., "v1").
        system_prompt: System prompt template for the LLM.
        user_prompt_template: User message template.
    """

    version: str = "unknown"
    system_prompt: str
    user_prompt_template: str


def load_prompt(path: str | Path) -> PromptData:
    """Load prompt template from YAML file.

    Args:
        path: Path to the YAML prompt file.

    Returns:
        Validated PromptData with system_prompt and user_prompt_template.

    Raises:
        FileNotFoundError: If the prompt file does not exist.
        ValidationError: If required keys are missing or invalid.
    """
    prompt_path = Path(path)
    if not prompt_path.exists():
        raise FileNotFoundError(f"Prompt file not found: {prompt_path}")

    with prompt_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return PromptData.model_validate(data)


_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def render_template(template: str, **values: str) -> str:
    """Fill ``{name}`` placeholders in a prompt template.

    Uses a single-pass regex substitution so that injected values
    (e.g. user code containing ``{title}``) are never re-scanned for
    further placeholders. Unknown placeholders are left as is.
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        return values.get(key, match.group(0))

    return _PLACEHOLDER_RE.sub(_replace, template)
