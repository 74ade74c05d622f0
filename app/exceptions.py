# =============================================================================
# app/exceptions.py - Exception Handlers
# =============================================================================
# The API defines no error codes of its own. Unmatched routes (404) and
# wrong methods (405) keep the framework's default responses; anything
# unexpected is logged and turned into a generic 500.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Convert an unhandled exception to a generic server error.

    The traceback goes to the log only; clients get:
    - detail: Human-readable message
    - code: Machine-readable error code
    """
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
