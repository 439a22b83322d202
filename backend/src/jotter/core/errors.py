"""Exception handlers mapping errors to ``{"msg": ...}`` responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import JotterError, StoreUnavailable, ValidationError
from .logging import get_logger

logger = get_logger("errors")


def _error_response(error: JotterError) -> JSONResponse:
    body = {"msg": error.message}
    if isinstance(error, ValidationError) and error.fields:
        body["fields"] = error.fields
    return JSONResponse(status_code=error.status_code, content=body)


# pydantic error types that mean "nothing usable was sent"; the schemas' own
# validators only ever reject blank values
_MISSING_TYPES = frozenset(("missing", "string_too_short", "value_error"))


def validation_error_from_request(exc: RequestValidationError) -> ValidationError:
    """Collapse pydantic's error list into one readable 400."""
    missing, invalid = [], []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            continue
        loc = err.get("loc", ())
        # ("body", "title") -> "title"; a bare ("body",) means no usable body at all
        if len(loc) > 1 and loc[0] == "body":
            name = str(loc[-1])
            bucket = missing if err.get("type") in _MISSING_TYPES else invalid
            if name not in missing and name not in invalid:
                bucket.append(name)

    if missing:
        return ValidationError(f"Please provide {' and '.join(missing)}", fields=missing + invalid)
    if invalid:
        return ValidationError(f"Invalid value for {' and '.join(invalid)}", fields=invalid)
    return ValidationError("Invalid request body")


async def jotter_error_handler(request: Request, exc: JotterError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "error": type(exc).__name__},
        )
    else:
        logger.info(
            "Request rejected",
            extra={
                "path": request.url.path,
                "error": type(exc).__name__,
                "status_code": exc.status_code,
            },
        )
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = validation_error_from_request(exc)
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "fields": error.fields},
    )
    return _error_response(error)


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # driver text stays in the logs, never in the response
    logger.error(
        "Document store unavailable",
        extra={"path": request.url.path, "exception_type": type(exc).__name__},
        exc_info=exc,
    )
    return _error_response(StoreUnavailable())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # routing errors (unknown path, wrong method) get the same body shape
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        extra={"path": request.url.path, "exception_type": type(exc).__name__},
        exc_info=exc,
    )
    return _error_response(JotterError())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the app."""
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(JotterError, jotter_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(OSError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
