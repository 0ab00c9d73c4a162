from typing import Dict, Optional
from fastapi import Request
from fastapi.responses import JSONResponse

from app.lib.error_code import ErrorCode
from app.lib.exception.api_exception import CCIPError
from app.v1.schemas.common.error import ErrorResponse

COMMON_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}
REQUEST_ID_HEADER = "X-Request-ID"


def request_id_of(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def response_headers(request: Request, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    headers = {**COMMON_HEADERS, **(extra or {})}
    request_id = request_id_of(request)
    if request_id:
        headers[REQUEST_ID_HEADER] = request_id
    return headers


def error_code_for_status(status_code: int) -> ErrorCode:
    if status_code == 400:
        return ErrorCode.VALIDATION_ERROR
    return ErrorCode.SERVER_ERROR


def build_error_response(
    request: Request,
    error: CCIPError,
    error_code: Optional[ErrorCode] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=error_code or error_code_for_status(error.status_code),
        message=error.message,
        details=error.details or None,
    )
    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=response_headers(request),
    )
