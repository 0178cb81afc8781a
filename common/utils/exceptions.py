"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException with standardized error codes
for consistent API error responses.

Example:
    from common.utils import BadRequestException

    @router.post("/chatbot/message")
    async def send_message(body: ChatRequest):
        if not body.messages:
            raise BadRequestException("Messages must be a non-empty array", code="INVALID_MESSAGES")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with error code support.

    The detail payload is always {"message", "code"?, "details"?}.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            headers: Optional response headers
        """
        detail: Dict[str, Any] = {"message": message}

        if code:
            detail["code"] = code

        if details is not None:
            detail["details"] = details

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )
        self.message = message
        self.code = code
        self.details = details


class BadRequestException(APIException):
    """400 Bad Request - Malformed conversation or missing content."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Any] = None,
    ):
        super().__init__(400, message, code, details)


class ValidationException(APIException):
    """422 Validation Error - Request body failed schema validation."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
        errors: Optional[list] = None,
    ):
        detail_info = details
        if errors:
            detail_info = {"errors": errors, **(details or {})}
        super().__init__(422, message, code, detail_info)


class InternalServerException(APIException):
    """500 Internal Server Error - Unexpected server error."""

    def __init__(
        self,
        message: str = "Internal server error",
        code: str = "INTERNAL_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(500, message, code, details)


class ServiceUnavailableException(APIException):
    """503 Service Unavailable - Services not initialized yet."""

    def __init__(
        self,
        message: str = "Service unavailable",
        code: str = "SERVICE_UNAVAILABLE",
        details: Optional[Any] = None,
    ):
        super().__init__(503, message, code, details)
