"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from quill.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    HasChildrenError,
    IntegrityError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Most specific first; DomainError catches whatever is left
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (HasChildrenError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (IntegrityError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error raised by a use case into a JSON response."""
    status_code = status_for(exc)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        # Corrupted data, never shown to the client
        logfire.error(
            "Data integrity error",
            error=str(exc),
            path=request.url.path,
            method=request.method,
        )
        return JSONResponse(
            status_code=status_code, content={"detail": "Internal server error"}
        )

    logfire.warn(
        "Request failed",
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Invalid input rejected by a domain model (e.g. an illegal article url)."""
    logfire.warn("Invalid input", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)
