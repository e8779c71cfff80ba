"""Abstract LLM provider interface."""

import abc
import asyncio
import time
from typing import Any

import structlog
from pydantic import SecretStr

from litcode_tutor.errors import BackendError, BackendErrorKind, EmptyResponseError
from litcode_tutor.llm.schemas import CompletionResult, History, Speaker

logger = structlog.get_logger()

Credentials = str | SecretStr | None

_AUTH_STATUS_CODES: frozenset[int] = frozenset({401, 403})

_KIND_LABELS: dict[BackendErrorKind, str] = {
    BackendErrorKind.MISSING_CREDENTIALS: "missing credentials",
    BackendErrorKind.INVALID_PROVIDER: "invalid provider",
    BackendErrorKind.TRANSPORT_FAILURE: "transport failure",
    BackendErrorKind.AUTH_REJECTED: "authentication rejected",
    BackendErrorKind.MALFORMED_RESPONSE: "malformed response",
    BackendErrorKind.EMPTY_RESPONSE: "empty response",
}


def classify_error(exc: BaseException) -> BackendErrorKind:
    """Map an exception raised during a backend call onto the taxonomy.

    HTTP 401/403 mean the credentials were rejected; every other status,
    connection error or timeout is a transport failure.

    Uses duck typing (getattr) to avoid importing SDK-specific
    exception classes; works with anthropic, openai, google-genai.
    """
    if isinstance(exc, BackendError):
        return exc.kind

    # anthropic.APIStatusError, openai.APIStatusError
    status = getattr(exc, "status_code", None)
    if not isinstance(status, int):
        # google-genai exceptions (.code attribute)
        status = getattr(exc, "code", None)
    if isinstance(status, int) and status in _AUTH_STATUS_CODES:
        return BackendErrorKind.AUTH_REJECTED

    return BackendErrorKind.TRANSPORT_FAILURE


def describe_error(kind: BackendErrorKind, cause: object = None) -> str:
    """Short diagnostic: ``<label>`` or ``<label>: <cause>``."""
    label = _KIND_LABELS[kind]
    message = str(cause).strip() if cause is not None else ""
    return f"{label}: {message}" if message else label


def reveal_credentials(credentials: Credentials) -> str:
    if credentials is None:
        return ""
    if isinstance(credentials, SecretStr):
        return credentials.get_secret_value().strip()
    return credentials.strip()


class LLMProvider(abc.ABC):
    """Base class for all backend adapters.

    Each adapter implements two steps:
    - build_request(): pure translation of prompt + history into the
      backend's native payload
    - _send(): the single outbound call, returning generated text

    complete() wraps both, enforces the timeout and converts every
    failure into a CompletionResult. Adapters keep no per-call state:
    the SDK client is created inside _send() from the caller's key.
    """

    provider_name: str = ""
    role_map: dict[Speaker, str] = {}

    def __init__(
        self,
        default_model: str,
        *,
        timeout_s: float = 60.0,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> None:
        self._default_model = default_model
        self._timeout_s = timeout_s
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def default_model(self) -> str:
        return self._default_model

    async def complete(
        self,
        system_prompt: str,
        history: History,
        user_message: str,
        credentials: Credentials,
    ) -> CompletionResult:
        """Run one completion against the backend."""
        api_key = reveal_credentials(credentials)
        if not api_key:
            logger.warning(
                "llm_call_skipped",
                provider=self.provider_name,
                reason=BackendErrorKind.MISSING_CREDENTIALS.value,
            )
            return CompletionResult.failure(
                BackendErrorKind.MISSING_CREDENTIALS,
                describe_error(BackendErrorKind.MISSING_CREDENTIALS),
            )

        payload = self.build_request(system_prompt, history, user_message)

        timer = self._measure_latency()
        try:
            with timer:
                text = await asyncio.wait_for(
                    self._send(payload, api_key), timeout=self._timeout_s
                )
            if not text.strip():
                raise EmptyResponseError()
        except TimeoutError:
            detail = describe_error(
                BackendErrorKind.TRANSPORT_FAILURE,
                f"no response within {self._timeout_s:g}s",
            )
            return self._failed(BackendErrorKind.TRANSPORT_FAILURE, detail, timer)
        except Exception as exc:
            kind = classify_error(exc)
            return self._failed(kind, describe_error(kind, exc), timer)

        logger.info(
            "llm_call_completed",
            provider=self.provider_name,
            model=self._default_model,
            history_turns=len(history),
            latency_ms=timer.elapsed_ms,
            success=True,
        )
        return CompletionResult.success(text)

    @abc.abstractmethod
    def build_request(
        self,
        system_prompt: str,
        history: History,
        user_message: str,
    ) -> dict[str, Any]:
        """Translate the logical call into the backend's native payload."""
        ...

    @abc.abstractmethod
    async def _send(self, payload: dict[str, Any], api_key: str) -> str:
        """Issue exactly one request and return the generated text.

        Raises:
            MalformedResponseError: If the response has an unexpected shape.
        """
        ...

    def _native_role(self, speaker: Speaker) -> str:
        return self.role_map[speaker]

    def _failed(
        self,
        kind: BackendErrorKind,
        detail: str,
        timer: "_LatencyTimer",
    ) -> CompletionResult:
        logger.warning(
            "llm_call_failed",
            provider=self.provider_name,
            model=self._default_model,
            error_kind=kind.value,
            error=detail,
            latency_ms=timer.elapsed_ms,
            success=False,
        )
        return CompletionResult.failure(kind, detail)

    def _measure_latency(self) -> "_LatencyTimer":
        """Context manager for measuring call latency."""
        return _LatencyTimer()


class _LatencyTimer:
    """Simple latency measurement helper."""

    def __init__(self) -> None:
        self.start: float = 0
        self.elapsed_ms: int = 0

    def __enter__(self) -> "_LatencyTimer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: object) -> None:
        self.elapsed_ms = int((time.perf_counter() - self.start) * 1000)
