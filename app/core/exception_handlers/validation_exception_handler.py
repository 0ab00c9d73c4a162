from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exception_handlers.error_response import build_error_response
from app.lib.exception.api_exception import CCIPError


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", ())[1:]),
            "issue": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return build_error_response(
        request,
        CCIPError.validation("Invalid request parameters", {"errors": errors}),
    )
