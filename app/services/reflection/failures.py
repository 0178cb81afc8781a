"""Classification of external generation failures for logging."""

from typing import Optional


RATE_LIMIT = "rate_limit"
ERROR = "error"

RATE_LIMIT_MARKERS = ("exceeded your current quota", "rate limit", "429")


class ProviderUnavailableError(Exception):
    """No usable provider: missing, or its credential has the wrong shape."""


class EmptyCompletionError(Exception):
    """The provider answered without any usable text."""


def classify_failure(exc: Optional[BaseException]) -> str:
    """
    Label a failed generation attempt.

    Quota and throttling responses (HTTP 429, or a message mentioning the
    quota or a rate limit) are "rate_limit"; everything else is "error".
    The label only affects log lines.
    """
    if exc is None:
        return ERROR

    if getattr(exc, "status_code", None) == 429:
        return RATE_LIMIT

    message = str(exc).lower()
    if any(marker in message for marker in RATE_LIMIT_MARKERS):
        return RATE_LIMIT

    return ERROR
