"""
Utilities module - Common helpers for API responses and exceptions.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    ValidationException,
    InternalServerException,
    ServiceUnavailableException,
)

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "ValidationException",
    "InternalServerException",
    "ServiceUnavailableException",
]
