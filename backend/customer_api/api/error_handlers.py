"""Error Handlers — global exception handlers for the customer API.

Invariants:
    - CustomerApiError → structured JSON with error code, message, kind, severity
    - CustomerNotFoundError → 404 with an empty body
    - RequestValidationError → 400 "invalid customer" with field-level details
    - Exception (catch-all) → 400 persistence envelope under /customers,
      500 elsewhere; never leaks internal details
    - Each failure is logged at error level exactly once

Design Decisions:
    - Three-layer handler: domain (CustomerApiError), validation (Pydantic), catch-all (Exception)
    - Log level follows ErrorSeverity so 404s and duplicate emails stay out of error dashboards
    - PersistenceError is logged with its raw cause where it is raised
      (repository or service boundary), so the handler only renders it
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from customer_api.api.routes.customers import router as customers_router
from customer_api.core.errors import (
    CustomerApiError, ErrorSeverity, InvalidCustomerError,
    PersistenceError, format_validation_details,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_customer_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _is_customer_route(request: Request) -> bool:
    return request.url.path.startswith(customers_router.prefix)


def _register_customer_error_handler(app: FastAPI) -> None:
    """Register customer domain/infrastructure error handler."""

    @app.exception_handler(CustomerApiError)
    async def customer_error_handler(request: Request, exc: CustomerApiError):
        """Handle all customer domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "customer_id": exc.context.customer_id,
            "operation": exc.context.operation,
        }
        if isinstance(exc, PersistenceError):
            logger.debug(f"CustomerApiError: {exc.message}", extra=extra)
        else:
            logger.log(
                _LOG_LEVELS[exc.severity], f"CustomerApiError: {exc.message}",
                extra=extra,
            )
        body = exc.to_response()
        if body is None:
            return Response(status_code=exc.http_status)
        return JSONResponse(status_code=exc.http_status, content=body)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed bodies and path params answer like an invalid customer."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        error = InvalidCustomerError(format_validation_details(list(exc.errors())))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Customer routes keep their 400 contract."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        if _is_customer_route(request):
            error = PersistenceError("request", str(exc))
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "kind": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
