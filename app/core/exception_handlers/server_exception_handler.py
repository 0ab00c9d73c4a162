import traceback

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exception_handlers.error_response import (
    build_error_response,
    request_id_of,
)
from app.core.logger import get_structured_logger
from app.lib.exception.api_exception import to_ccip_error

logger = get_structured_logger(__name__)


async def server_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = to_ccip_error(exc)
    logger.error(
        "Unhandled error processing request",
        requestId=request_id_of(request),
        kind=error.kind.value,
        error=str(exc) or type(exc).__name__,
        stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )
    return build_error_response(request, error)
