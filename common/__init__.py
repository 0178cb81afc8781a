"""
Common library for reusable infrastructure components.

- ai: Pluggable AI providers (Claude, OpenAI)
- utils: Standard responses and exceptions
- config: Base settings class
"""

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    BadRequestException,
    ValidationException,
    InternalServerException,
    ServiceUnavailableException,
)
from common.config import BaseAppSettings

__all__ = [
    # AI
    "AIProvider",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "ValidationException",
    "InternalServerException",
    "ServiceUnavailableException",
    # Config
    "BaseAppSettings",
]
