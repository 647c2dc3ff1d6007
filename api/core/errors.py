"""
JSON error rendering.

Every HTTPException leaves the API as `{"error": <detail>}`. Routing misses
(unknown path, or a known path with an unsupported method) are all reported
as 404 Not Found.

Input that FastAPI cannot coerce (unparseable body, non-integer id) is
answered like a failed store call: 500 with the route's fixed message, set
with `error_message`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"error": "Not Found"}


def error_message(message: str):
    def decorate(endpoint):
        endpoint.error_message = message
        return endpoint

    return decorate


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND_BODY)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected input for %s %s: %s", request.method, request.url.path, exc.errors())
    message = getattr(request.scope.get("endpoint"), "error_message", None)
    if message is None:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": "Unprocessable Entity"},
        )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


def register(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
