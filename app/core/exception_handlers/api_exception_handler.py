import traceback

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exception_handlers.error_response import (
    build_error_response,
    request_id_of,
)
from app.core.logger import get_structured_logger
from app.lib.exception.api_exception import CCIPError

logger = get_structured_logger(__name__)


async def api_exception_handler(request: Request, exc: CCIPError) -> JSONResponse:
    log = logger.warning if exc.status_code < 500 else logger.error
    fields = {}
    cause = exc.__cause__
    if cause is not None:
        # the public message is fixed; keep the real failure in the logs
        fields["cause"] = str(cause) or type(cause).__name__
        fields["stack"] = "".join(
            traceback.format_exception(type(cause), cause, cause.__traceback__)
        )
    log(
        "Error processing chains request",
        requestId=request_id_of(request),
        kind=exc.kind.value,
        statusCode=exc.status_code,
        error=exc.message,
        details=exc.details,
        **fields,
    )
    return build_error_response(request, exc)
