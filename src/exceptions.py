"""
Errors raised by the Scholar Connect services and their HTTP rendering.

Every error body has the shape {"error": <message>, "details": {...}} so the
frontend can show the message and branch on the details. Verification
failures are not errors here: the verifier turns them into a negative
verdict that is returned with status 200.
"""
import logging
from typing import Any, Dict, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Upload screen offers images and PDFs only
ACCEPTED_MEDIA_TYPES = ["image/*", "application/pdf"]


class ScholarConnectError(Exception):
    """Base class; carries the HTTP status and the details echoed to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(ScholarConnectError):
    """
    A student or the donor's saved preferences do not exist.

    resource_id is "current" when the lookup was for the signed-in session
    (no registered student, no saved preferences).
    """

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            f"{resource} not found: {resource_id}",
            {"resource": resource, "resource_id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class UnsupportedMediaTypeError(ScholarConnectError):
    """Upload is neither an image nor a PDF; rejected before the verifier runs."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, mime_type: Optional[str], field: str = "file"):
        super().__init__(
            f"Unsupported media type: {mime_type or 'unknown'} (expected an image or PDF)",
            {"field": field, "mime_type": mime_type, "accepted": ACCEPTED_MEDIA_TYPES},
        )
        self.mime_type = mime_type
        self.field = field


def ensure_supported_media_type(mime_type: Optional[str], field: str = "file") -> str:
    """Return mime_type if it is image/* or application/pdf, else raise UnsupportedMediaTypeError."""
    if mime_type and (mime_type.startswith("image/") or mime_type == "application/pdf"):
        return mime_type
    raise UnsupportedMediaTypeError(mime_type, field=field)


# =============================================================================
# Exception Handlers
# =============================================================================

async def scholar_connect_error_handler(request: Request, exc: ScholarConnectError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "details": {"type": type(exc).__name__}},
    )


def register_exception_handlers(app):
    app.add_exception_handler(ScholarConnectError, scholar_connect_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
