"""Shared schemas for LLM infrastructure."""

import re
from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from litcode_tutor.errors import BackendErrorKind

DESCRIPTION_MAX_CHARS = 3000

_NEWLINE_RUN_RE = re.compile(r"\n+")


class Backend(StrEnum):
    """Interchangeable LLM backends the tutor can talk to."""

    GEMINI = "gemini"
    OPENAI = "openai"
    CLAUDE = "claude"

    @classmethod
    def parse(cls, value: "str | Backend") -> "Backend | None":
        """Case-insensitive lookup; None for anything unknown."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class Speaker(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """One message of the caller-owned conversation."""

    model_config = ConfigDict(frozen=True)

    speaker: Speaker
    text: str


History = Sequence[ConversationTurn]


class ProblemSnapshot(BaseModel):
    """Point-in-time read of the problem page."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    code: str = ""

    @classmethod
    def from_page_text(
        cls, title: str, description: str, code: str
    ) -> "ProblemSnapshot":
        """Build a snapshot from raw scraped text.

        Newline runs in the description collapse to a single space and
        the description is capped at DESCRIPTION_MAX_CHARS.
        """
        cleaned = _NEWLINE_RUN_RE.sub(" ", description)[:DESCRIPTION_MAX_CHARS]
        return cls(title=title.strip(), description=cleaned, code=code)


class PromptIntent(StrEnum):
    CHAT = "chat"
    COMPLEXITY_ANALYSIS = "complexity_analysis"
    FOLLOW_UP_CHALLENGE = "follow_up_challenge"


class CompletionResult(BaseModel):
    """Tagged outcome of every tutor operation.

    Callers branch on ``ok``. ``display_text`` gives the string the chat
    widget renders, with failures prefixed by ``Error:``.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    text: str = ""
    error_kind: BackendErrorKind | None = None
    detail: str = ""
    provider: str | None = None

    @model_validator(mode="after")
    def _check_tag(self) -> "CompletionResult":
        if self.ok and self.error_kind is not None:
            raise ValueError("successful result cannot carry an error kind")
        if not self.ok and self.error_kind is None:
            raise ValueError("failed result requires an error kind")
        return self

    @classmethod
    def success(cls, text: str) -> "CompletionResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(
        cls,
        kind: BackendErrorKind,
        detail: str,
        provider: str | None = None,
    ) -> "CompletionResult":
        return cls(ok=False, error_kind=kind, detail=detail, provider=provider)

    @property
    def error(self) -> str | None:
        """Human-readable failure, ``(provider) detail`` once attributed."""
        if self.ok:
            return None
        if self.provider:
            return f"({self.provider}) {self.detail}"
        return self.detail

    @property
    def display_text(self) -> str:
        return self.text if self.ok else f"Error: {self.error}"

    def attributed_to(self, provider: str) -> "CompletionResult":
        """Attach the originating provider to a failure.

        Successes and already-attributed failures are returned as is,
        so wrapping twice never double-prefixes the error.
        """
        if self.ok or self.provider is not None:
            return self
        return self.model_copy(update={"provider": provider})


class TutorConfig(BaseModel):
    """Caller-owned selection of backend plus per-backend credentials.

    ``backend`` stays a plain string so an unknown selection reaches the
    router and comes back as an ``invalid_provider`` failure.
    """

    model_config = ConfigDict(frozen=True)

    backend: str = Backend.GEMINI
    api_keys: dict[Backend, SecretStr] = Field(default_factory=dict)

    def credentials_for(self, backend: str | None = None) -> SecretStr | None:
        parsed = Backend.parse(backend if backend is not None else self.backend)
        if parsed is None:
            return None
        return self.api_keys.get(parsed)
