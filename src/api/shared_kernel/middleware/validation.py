"""Request validation errors reported as 400 Bad Request.

Malformed bodies, unknown enum values and unparseable path parameters are
client errors like any other bad input, so they share the status code of
domain validation failures. The response body keeps FastAPI's ``detail``
list so clients can still see which field was rejected.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def install_validation_error_handler(app: FastAPI) -> None:
    """Register the 400 handler for request validation errors on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
