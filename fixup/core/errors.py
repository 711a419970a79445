# fixup/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MSG_INVALID_ARGUMENTS = "Invalid arguments"
MSG_INVALID_ID = "Invalid id parameter"
MSG_INTERNAL_SERVER_ERROR = "Something went wrong"


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "status": status_code},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.debug("Request validation failed: %s", exc.errors())
    # malformed path ids are reported separately from body errors
    if any(err.get("loc", ("",))[0] == "path" for err in exc.errors()):
        return error_response(400, MSG_INVALID_ID)
    return error_response(400, MSG_INVALID_ARGUMENTS)


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return error_response(500, MSG_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
