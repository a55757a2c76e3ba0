import logging
from typing import Any, Iterable, Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def _format_error(error: Mapping[str, Any]) -> str:
    msg = str(error.get("msg", "Invalid input"))
    if msg.startswith(_VALUE_ERROR_PREFIX):
        # Raised by our own validators, the message is already user-facing
        return msg[len(_VALUE_ERROR_PREFIX):]
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def first_error_message(errors: Iterable[Mapping[str, Any]]) -> str:
    """Collapse a list of pydantic errors into the single string shown to the user."""
    for error in errors:
        return _format_error(error)
    return "Invalid input"


def validation_message(exc: ValidationError) -> str:
    return first_error_message(exc.errors())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = first_error_message(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
