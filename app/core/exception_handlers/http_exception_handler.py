from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exception_handlers.error_response import (
    build_error_response,
    error_code_for_status,
)
from app.lib.error_code import ErrorCode
from app.lib.exception.api_exception import CCIPError, ErrorKind

_STATUS_CODES = {
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    kind = ErrorKind.VALIDATION if exc.status_code < 500 else ErrorKind.UPSTREAM
    error = CCIPError(kind, str(exc.detail), exc.status_code)
    response = build_error_response(
        request,
        error,
        _STATUS_CODES.get(exc.status_code, error_code_for_status(exc.status_code)),
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response
