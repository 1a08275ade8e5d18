import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import VALIDATION_FAILED, NotFoundError, ValidationError
from .schemas.task import ErrorInfo, ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
HTTP_ERROR = "HTTP_ERROR"
SERVER_ERROR = "SERVER_ERROR"

_HTTP_CODES = {
    status.HTTP_404_NOT_FOUND: NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: METHOD_NOT_ALLOWED,
}


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, List[str]]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=ErrorInfo(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers)


def _field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    details: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        field = loc[0] if loc and err.get("type") != "json_invalid" else "request"
        details.setdefault(field, []).append(err.get("msg", "Invalid value."))
    return details


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, exc.message, exc.errors)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, VALIDATION_FAILED, _field_errors(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, exc.message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_CODES.get(exc.status_code, HTTP_ERROR)
    return error_response(exc.status_code, code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        SERVER_ERROR,
        "An internal server error occurred.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
