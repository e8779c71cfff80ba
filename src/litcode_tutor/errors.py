"""Domain-specific exceptions for litcode-tutor.

Adapters raise these internally; they never cross a public operation.
Each is converted into a failure ``CompletionResult`` at the adapter
boundary.
"""

from enum import StrEnum


class BackendErrorKind(StrEnum):
    """Closed taxonomy of failures a completion can end with."""

    MISSING_CREDENTIALS = "missing_credentials"
    INVALID_PROVIDER = "invalid_provider"
    TRANSPORT_FAILURE = "transport_failure"
    AUTH_REJECTED = "auth_rejected"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_RESPONSE = "empty_response"


class BackendError(Exception):
    """Base class for failures local to a single backend call."""

    kind: BackendErrorKind = BackendErrorKind.TRANSPORT_FAILURE


class MalformedResponseError(BackendError):
    """Backend answered, but not in the shape the adapter expects."""

    kind = BackendErrorKind.MALFORMED_RESPONSE


class EmptyResponseError(BackendError):
    """Backend answered with no generated text."""

    kind = BackendErrorKind.EMPTY_RESPONSE
