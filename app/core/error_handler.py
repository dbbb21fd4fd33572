"""
Application-wide exception handlers.

HTTPException subclasses from app.core.exceptions are rendered by FastAPI
itself. This module covers the two remaining cases: request bodies that fail
schema validation, and anything unexpected.
"""

import logging
from typing import List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def _field_names(errors: List[dict]) -> List[str]:
    """Collapse pydantic error locations into unique field names."""
    names: List[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        name = ".".join(loc) or "body"
        if name not in names:
            names.append(name)
    return names


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = _field_names(exc.errors())
    logger.info(
        "Validation failed on %s %s: %s", request.method, request.url.path, fields
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Validation failed", "fields": fields}},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
