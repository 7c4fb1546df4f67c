"""
Error taxonomy and exception handlers.

Every error the API reports is an ``APIError`` subclass carrying an
HTTP status code and a human-readable message.  Handlers registered
in ``main.create_app`` render them as ``{"error": message}``, with
any ``extra`` keys merged into the body.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from car_api.app.schemas.car import describe_validation_errors

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Carro no encontrado"


class APIError(Exception):
    """Base API error with an HTTP status and a JSON body."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.message = message
        self.extra = extra or {}
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.message}
        content.update(self.extra)
        return content


class CarValidationError(APIError):
    """Request payload is missing required fields or has mistyped ones."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, fields: List[Dict[str, Any]]):
        names = ", ".join(item["field"] for item in fields) or "body"
        super().__init__(f"Datos inválidos para el carro: {names}", extra={"fields": fields})
        self.fields = fields


class CarNotFoundError(APIError):
    """No car exists with the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, car_id: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.car_id = car_id


class InvalidCarIdError(APIError):
    """The identifier is not a valid ObjectId.

    Answered with 404 and the generic not-found message, the same as a
    missing car, so clients cannot tell the two apart.
    """

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, car_id: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.car_id = car_id


class StorageError(APIError):
    """The document store failed to serve the request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__("Error de almacenamiento", extra={"detail": detail})
        self.detail = detail


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an ``APIError`` as JSON."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request validation failures with 400 and the offending fields."""
    error = CarValidationError(describe_validation_errors(exc.errors()))
    logger.warning("%s %s rejected: %s", request.method, request.url.path, error.message)
    return JSONResponse(status_code=error.status_code, content=error.to_content())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) as ``{"error": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )
