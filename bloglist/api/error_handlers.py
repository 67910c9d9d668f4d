"""
Global exception handlers.

- BlogListError → its own status and {"error", "kind"} body
- RequestValidationError → 400 validation_error with field details
- Exception (catch-all) → 500 without internal details

Repositories wrap driver errors as PersistenceFailure, so the 500 path is
reached only by programming errors, never by storage failures.
"""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import BlogListError, PersistenceFailure, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app"""

    @app.exception_handler(BlogListError)
    async def bloglist_error_handler(request: Request, exc: BlogListError) -> JSONResponse:
        log = logger.error if isinstance(exc, PersistenceFailure) else logger.info
        log("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.info("Invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "invalid request data",
                "kind": ValidationError.kind,
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                    }
                    for error in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "an unexpected error occurred", "kind": "internal_error"},
        )
