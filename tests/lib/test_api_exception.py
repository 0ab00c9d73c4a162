import json
import logging

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from app.core.config import settings
from app.core.exception_handlers.api_exception_handler import api_exception_handler
from app.core.exception_handlers.error_response import REQUEST_ID_HEADER
from app.core.exception_handlers.server_exception_handler import (
    server_exception_handler,
)
from app.core.exception_handlers.validation_exception_handler import (
    validation_exception_handler,
)
from app.lib.exception.api_exception import (
    GENERIC_FAILURE_MESSAGE,
    UNCLASSIFIED_FAILURE_MESSAGE,
    CCIPError,
    ErrorKind,
    to_ccip_error,
)


def make_request(request_id=None) -> Request:
    request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})
    if request_id:
        request.state.request_id = request_id
    return request


def test_to_ccip_error_keeps_ccip_errors():
    error = CCIPError.validation("bad input")
    assert to_ccip_error(error) is error


def test_to_ccip_error_wraps_generic_failures():
    error = to_ccip_error(RuntimeError("disk on fire"))
    assert error.kind is ErrorKind.UPSTREAM
    assert error.status_code == 500
    assert error.message == GENERIC_FAILURE_MESSAGE
    assert error.details == {"message": "disk on fire"}


def test_to_ccip_error_hides_details_when_disabled(monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAILS", False)
    error = to_ccip_error(RuntimeError("disk on fire"))
    assert error.message == GENERIC_FAILURE_MESSAGE
    assert error.details == {}


@pytest.mark.parametrize("exc", [RuntimeError(), KeyboardInterrupt(), ValueError("   ")])
def test_to_ccip_error_falls_back_for_unknown_shapes(exc):
    error = to_ccip_error(exc)
    assert error.kind is ErrorKind.UNCLASSIFIED
    assert error.status_code == 500
    assert error.message == UNCLASSIFIED_FAILURE_MESSAGE
    assert error.details == {}


@pytest.mark.asyncio
async def test_api_exception_handler_tags_400_as_validation():
    response = await api_exception_handler(
        make_request("req-1"),
        CCIPError.validation("Invalid chainId", {"field": "chainId"}),
    )
    assert response.status_code == 400
    assert response.headers[REQUEST_ID_HEADER] == "req-1"
    assert json.loads(response.body) == {
        "error": "validation",
        "message": "Invalid chainId",
        "details": {"field": "chainId"},
    }


@pytest.mark.asyncio
async def test_api_exception_handler_tags_other_statuses_as_server_error():
    response = await api_exception_handler(
        make_request(),
        CCIPError(ErrorKind.UPSTREAM, "Upstream unavailable", 503),
    )
    assert response.status_code == 503
    assert REQUEST_ID_HEADER not in response.headers
    assert json.loads(response.body) == {
        "error": "server_error",
        "message": "Upstream unavailable",
    }


@pytest.mark.asyncio
async def test_server_exception_handler_does_not_leak_unknown_failures():
    response = await server_exception_handler(make_request(), LookupError())
    assert response.status_code == 500
    assert json.loads(response.body) == {
        "error": "server_error",
        "message": UNCLASSIFIED_FAILURE_MESSAGE,
    }


@pytest.mark.asyncio
async def test_api_exception_handler_logs_original_failure(caplog, monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAILS", False)
    caplog.set_level(logging.ERROR, logger="ccip")
    try:
        raise OSError("permission denied on /etc/chains")
    except OSError as exc:
        error = to_ccip_error(exc)
        error.__cause__ = exc

    response = await api_exception_handler(make_request("req-2"), error)

    assert "permission denied" not in response.body.decode()
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["requestId"] == "req-2"
    assert payload["cause"] == "permission denied on /etc/chains"
    assert "OSError" in payload["stack"]


@pytest.mark.asyncio
async def test_api_exception_handler_without_cause_logs_no_stack(caplog):
    caplog.set_level(logging.WARNING, logger="ccip")

    await api_exception_handler(make_request(), CCIPError.validation("Invalid selector"))

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["error"] == "Invalid selector"
    assert "cause" not in payload
    assert "stack" not in payload


@pytest.mark.asyncio
async def test_validation_exception_handler_returns_envelope():
    exc = RequestValidationError(
        [
            {
                "type": "string_type",
                "loc": ("query", "chainId"),
                "msg": "Input should be a valid string",
                "input": 1,
            }
        ]
    )

    response = await validation_exception_handler(make_request("req-3"), exc)

    assert response.status_code == 400
    assert response.headers[REQUEST_ID_HEADER] == "req-3"
    assert json.loads(response.body) == {
        "error": "validation",
        "message": "Invalid request parameters",
        "details": {
            "errors": [{"field": "chainId", "issue": "Input should be a valid string"}]
        },
    }
