import json
import logging

import httpx
import pytest

from currencyapi import ApiError, Currencyapi
from currencyapi.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    endpoint_ctx,
    init_logging,
    request_context,
    request_id_ctx,
)

from .payloads import API_KEY, STATUS_BODY, Recorder


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord("currencyapi.test", logging.INFO, __file__, 1, msg, None, None)


def test_json_formatter_outside_request():
    rec = _record("hello")
    RequestIdFilter().filter(rec)
    out = json.loads(JsonFormatter().format(rec))
    assert out["message"] == "hello"
    assert out["level"] == "INFO"
    assert out["logger"] == "currencyapi.test"
    assert out["request_id"] == "-"


def test_request_context_sets_and_resets_id():
    with request_context("latest") as rid:
        assert request_id_ctx.get() == rid
        rec = _record("inside")
        RequestIdFilter().filter(rec)
        assert rec.request_id == rid
    assert request_id_ctx.get() is None


def test_client_logs_without_api_key(settings, caplog):
    caplog.set_level(logging.DEBUG, logger="currencyapi")
    rec = Recorder(status_code=401, body={"message": "Invalid authentication credentials"})
    with Currencyapi(settings=settings, transport=httpx.MockTransport(rec)) as client:
        with pytest.raises(ApiError):
            client.latest("EUR", "USD")
    messages = [r.getMessage() for r in caplog.records]
    assert any("request start: latest" in m for m in messages)
    assert any("api error 401" in m for m in messages)
    assert all(API_KEY not in m for m in messages)


def test_successful_call_logs_prepared_query(settings, caplog):
    caplog.set_level(logging.DEBUG, logger="currencyapi.client")
    with Currencyapi(settings=settings, transport=httpx.MockTransport(Recorder(body=STATUS_BODY))) as client:
        client.status()
    assert any("prepared status" in r.getMessage() for r in caplog.records)


def test_json_output_carries_endpoint():
    with request_context("historical") as rid:
        rec = _record("inside")
        RequestIdFilter().filter(rec)
    out = json.loads(JsonFormatter().format(rec))
    assert out["endpoint"] == "historical"
    assert out["request_id"] == rid
    assert endpoint_ctx.get() is None


def test_init_logging_leaves_root_alone():
    root_handlers = list(logging.getLogger().handlers)
    pkg = logging.getLogger("currencyapi")
    saved = (list(pkg.handlers), pkg.level, pkg.propagate)
    try:
        init_logging(debug=True)
        assert logging.getLogger().handlers == root_handlers
        assert len(pkg.handlers) == 1
        assert isinstance(pkg.handlers[0].formatter, JsonFormatter)
        assert pkg.level == logging.DEBUG
    finally:
        pkg.handlers[:] = saved[0]
        pkg.setLevel(saved[1])
        pkg.propagate = saved[2]
