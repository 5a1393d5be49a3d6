"""Translate shelf failures and request validation errors into responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from shelf.errors import (
    DuplicateItem,
    InsufficientStock,
    ItemNotFound,
    NoHandlerForAction,
    ShelfError,
    StoreFailure,
)

logger = structlog.get_logger(__name__)

_STATUS_BY_ERROR = {
    DuplicateItem: 409,
    InsufficientStock: 409,
    ItemNotFound: 404,
    StoreFailure: 503,
    NoHandlerForAction: 500,
}


def status_for(exc: ShelfError) -> int:
    return _STATUS_BY_ERROR.get(type(exc), 500)


async def shelf_error_handler(request: Request, exc: ShelfError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("shelf_request_failed", path=request.url.path, kind=exc.kind, error=exc.message)
    else:
        logger.info("shelf_request_rejected", path=request.url.path, kind=exc.kind, error=exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", [])), "message": err.get("msg", str(err))}
        for err in exc.errors()
    ]
    logger.warning("shelf_request_invalid", path=request.url.path, errors=errors)
    return JSONResponse(status_code=400, content={"detail": "Invalid request", "errors": errors})


async def command_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("shelf_command_invalid", path=request.url.path, errors=exc.messages)
    return JSONResponse(status_code=400, content={"error": exc.messages})


def register_shelf_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShelfError, shelf_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, command_validation_handler)
