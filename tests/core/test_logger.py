import json
import logging

from app.core.logger import (
    StructuredLogger,
    get_logger,
    get_structured_logger,
    init_logging,
)
from app.lib.request_context import ChainRequestContext


def test_get_logger_uses_app_namespace():
    assert get_logger("app.v1.services.chain_service").name == "ccip.v1.services.chain_service"
    assert get_logger("tests").name == "ccip.tests"
    assert get_logger("ccip.custom").name == "ccip.custom"


def test_structured_logger_emits_json(caplog):
    caplog.set_level(logging.DEBUG, logger="ccip")
    get_structured_logger("tests.structured").info("Filters validated", filters={"chainId": "1"})

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert json.loads(record.getMessage()) == {
        "message": "Filters validated",
        "filters": {"chainId": "1"},
    }


def test_structured_logger_survives_unserializable_fields(caplog):
    caplog.set_level(logging.DEBUG, logger="ccip")
    cyclic: list = []
    cyclic.append(cyclic)

    StructuredLogger(get_logger("tests.cyclic")).warning("Odd payload", value=cyclic)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["message"] == "Odd payload"
    assert "logError" in payload


def test_request_context_tags_every_event(caplog):
    caplog.set_level(logging.DEBUG, logger="ccip")
    context = ChainRequestContext(logger=get_structured_logger("tests.context"))

    context.debug("Environment validated", environment="mainnet")
    context.error("Something broke")

    payloads = [json.loads(r.getMessage()) for r in caplog.records[-2:]]
    assert all(p["requestId"] == context.request_id for p in payloads)
    assert payloads[0]["environment"] == "mainnet"


def test_request_context_ids_are_unique():
    assert ChainRequestContext().request_id != ChainRequestContext().request_id


def test_init_logging_installs_one_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        init_logging()
        init_logging()
        added = [h for h in root.handlers if getattr(h, "_ccip_handler", False)]
        assert len(added) == 1
        assert logging.getLogger("uvicorn.access").propagate is True
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
