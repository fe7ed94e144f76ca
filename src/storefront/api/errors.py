"""Translate storefront failures into HTTP responses.

Every error body has the shape ``{"error": "<message>"}``:

- ``ValidationError`` and malformed requests → 400
- ``ObjectNotFoundError`` → 404
- ``CartIntegrityError`` and anything else → 500
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.cart.pricing import CartIntegrityError

logger = structlog.get_logger(__name__)


def error_message(exc: Exception) -> str:
    """Flatten an exception's messages into one readable line."""
    messages = getattr(exc, "messages", None) or str(exc)
    if isinstance(messages, dict):
        parts = []
        for field_name, field_messages in messages.items():
            if isinstance(field_messages, (list, tuple)):
                parts.extend(str(message) for message in field_messages)
            else:
                parts.append(f"{field_name}: {field_messages}")
        return "; ".join(parts)
    if isinstance(messages, (list, tuple)):
        return "; ".join(str(message) for message in messages)
    return str(messages)


def _request_error_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", []) if p != "body")
        msg = err.get("msg", "Invalid request")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error_message(exc)})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _request_error_message(exc)})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": error_message(exc)})


async def integrity_error_handler(request: Request, exc: CartIntegrityError) -> JSONResponse:
    logger.error("Cart integrity fault", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while serving request",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(CartIntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
