# travel_api/api/error_handlers.py

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from travel_api.errors import TravelApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map typed errors, validation failures and anything unexpected to JSON responses."""

    @app.exception_handler(TravelApiError)
    async def travel_error_handler(request: Request, exc: TravelApiError):
        logger.info("%s on %s: %s", exc.code, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_validation_error_response(exc),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        # details stay in the log; the caller only gets the id
        error_id = uuid.uuid4().hex
        logger.error(
            "Unhandled error %s on %s %s", error_id, request.method, request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred.",
                    "error_id": error_id,
                }
            },
        )


def _validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data.",
            "details": [
                {
                    # drop the leading "body"/"path" marker
                    "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
                    "message": e["msg"],
                }
                for e in exc.errors()
            ],
        }
    }
