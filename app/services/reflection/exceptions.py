"""
Errors raised by the reflection services.

Generation failures are never raised to callers; only malformed input is.
"""

from typing import Optional


class ConversationValidationError(ValueError):
    """A conversation is not a non-empty list of role/content messages."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.index = index
