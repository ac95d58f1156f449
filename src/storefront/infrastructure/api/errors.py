"""Maps domain exceptions onto HTTP responses.

Every error body is ``{"msg": "..."}``. Malformed request bodies are a
400; unexpected exceptions are logged with their traceback and reported
as a bare 500.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    AccessDeniedError,
    AuthError,
    ConcurrentModificationError,
    DomainException,
    EntityNotFoundError,
    NotOrderOwnerError,
    PaymentInitError,
)

logger = structlog.get_logger(__name__)

# First match wins; anything else derived from DomainException is a 400.
_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (AuthError, 401),
    (NotOrderOwnerError, 401),
    (AccessDeniedError, 403),
    (EntityNotFoundError, 404),
    (ConcurrentModificationError, 409),
    (PaymentInitError, 500),
]


def status_for(exc: DomainException) -> int:
    for exc_type, status in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status
    return 400


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_error(request: Request, exc: DomainException) -> JSONResponse:
        status = status_for(exc)
        message = "Payment initiation failed" if isinstance(exc, PaymentInitError) else str(exc)
        return JSONResponse(status_code=status, content={"msg": message})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error", method=request.method, path=request.url.path
        )
        return JSONResponse(status_code=500, content={"msg": "Server error"})

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"Invalid request: {field}" if field else "Invalid request"
        return JSONResponse(status_code=400, content={"msg": message})
