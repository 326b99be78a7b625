"""Error taxonomy for the triage service.

Every error carries the HTTP status it maps to; ``register_error_handlers``
renders them as ``{"error": message}``.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TriageError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingField(TriageError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing required fields: name, code, severity, waitTime"


class InvalidType(TriageError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Severity and waitTime must be numbers"


class NotFound(TriageError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Patient not found"


class StoreUnavailable(TriageError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"


class WriteNotAcknowledged(TriageError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to add patient to the triage list"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(TriageError)
    async def triage_error_handler(request: Request, exc: TriageError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Malformed request for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Malformed request"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.critical(f"Unhandled exception for request {request.method} {request.url.path}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )
