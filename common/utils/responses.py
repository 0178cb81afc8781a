"""
Standard API response helpers.

Provides consistent envelopes for the health endpoint and for
error handlers.

Example:
    from common.utils import success_response, error_response

    @app.get("/health")
    async def health():
        return success_response({"status": "ok"})

    @app.exception_handler(APIException)
    async def api_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, code=exc.code, details=exc.details),
        )
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (can be dict, list, or any serializable type)
        message: Optional success message

    Returns:
        Dictionary with success=True and optional data/message
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "INVALID_MESSAGES")
        details: Additional error details

    Returns:
        Dictionary with success=False and error info
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    return {"success": False, "error": error}
