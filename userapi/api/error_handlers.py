"""Error Handlers — global exception handlers for errors that escape the dispatcher.

Invariants:
    - SymbolicError → {error: {code, message}} with namespace-mapped status
    - RequestValidationError → 'api.paramInvalid' envelope with field details
    - Exception (catch-all) → generic 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SymbolicError), validation (Pydantic), catch-all (Exception)
    - Handler failures are normally serialized by DispatchContext; this layer sees
      SymbolicErrors raised outside handlers (dependencies, adapters) and every
      unexpected error the dispatcher re-raised
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from userapi.core.dispatch_context import status_for
from userapi.core.symbolic_error import SymbolicError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_symbolic_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_symbolic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SymbolicError)
    async def symbolic_error_handler(request: Request, exc: SymbolicError):
        logger.error(
            f"SymbolicError outside handler: {exc}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status_for(exc), content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "internal.unexpected",
                    "message": "An unexpected error occurred",
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "api.paramInvalid",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
