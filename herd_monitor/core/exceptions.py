"""
Shared exception classes and error handling utilities for the herd monitor.

This module provides:
- Custom exception hierarchy for transport and payload failures
- Consistent error response formatting
- Exception handlers for FastAPI integration

Only the write path raises these to callers. Read functions in
repositories.farm_repository absorb them and fall back to mock or empty
collections. A ``{"success": false}`` envelope from the script endpoint
is a normal return value and never becomes an exception.

Usage:
    from herd_monitor.core.exceptions import ScriptAPIError

    try:
        result = await registry.add_cattle(cattle)
    except ScriptAPIError as e:
        ...
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class HerdMonitorError(Exception):
    """
    Base exception for all herd monitor errors.

    Provides consistent error structure with status code and detail message.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        """
        Initialize the exception.

        Args:
            detail: Human-readable error message. Uses class default if not provided.
            status_code: HTTP status code. Uses class default if not provided.
            **kwargs: Additional context to include in error response.
        """
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result = {"detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


# =============================================================================
# READ PATH
# =============================================================================

class SheetFetchError(HerdMonitorError):
    """Raised when a sheet tab cannot be exported as CSV."""

    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "Sheet not accessible"

    def __init__(self, sheet_name: Optional[str] = None, detail: Optional[str] = None, **kwargs: Any):
        if detail is None and sheet_name:
            detail = f"Sheet '{sheet_name}' not accessible"
        super().__init__(detail=detail, sheet_name=sheet_name, **kwargs)


# =============================================================================
# WRITE / COMMAND PATH
# =============================================================================

class ScriptAPIError(HerdMonitorError):
    """Raised when the script endpoint answers with a non-success HTTP status."""

    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "API call failed"

    def __init__(self, action: Optional[str] = None, detail: Optional[str] = None, **kwargs: Any):
        super().__init__(detail=detail, action=action, **kwargs)


class ScriptConnectionError(ScriptAPIError):
    """Raised when the script endpoint cannot be reached."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "Script endpoint unreachable"


class ScriptPayloadError(ScriptAPIError):
    """Raised when the script endpoint returns something other than a JSON object."""

    detail = "Malformed response from script endpoint"


class ScriptNotConfiguredError(ScriptAPIError):
    """Raised by the API layer when no script endpoint URL is configured."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "Script endpoint not configured"


# =============================================================================
# HTTP SURFACE
# =============================================================================

class InvalidCredentialsError(HerdMonitorError):
    """Raised by the login route when the script endpoint rejects credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid credentials"


class UnknownResourceError(HerdMonitorError):
    """Raised when a route is asked for a collection it does not know."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Unknown resource"

    def __init__(self, resource: Optional[str] = None, **kwargs: Any):
        detail = f"Unknown resource '{resource}'" if resource else self.detail
        super().__init__(detail=detail, resource=resource, **kwargs)


class NoDataToExportError(HerdMonitorError):
    """Raised by the export route when the collection is empty."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "No data to export"


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def herd_monitor_exception_handler(
    request: Request,
    exc: HerdMonitorError
) -> JSONResponse:
    """
    Handle HerdMonitorError exceptions and return consistent JSON responses.
    """
    logger.warning(
        f"HerdMonitorError: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "context": exc.context
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(HerdMonitorError, herd_monitor_exception_handler)
