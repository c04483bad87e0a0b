import datetime as dt

import httpx
import pytest

from currencyapi import (
    ApiError,
    AsyncCurrencyapi,
    ClientConstructionError,
    RequestError,
    ResponseParsingError,
)
from currencyapi.models import CurrencyType

from .payloads import API_KEY, LATEST_BODY, RANGE_BODY, STATUS_BODY, Recorder


def make_client(settings, recorder) -> AsyncCurrencyapi:
    return AsyncCurrencyapi(settings=settings, transport=httpx.MockTransport(recorder))


@pytest.mark.asyncio
async def test_status(settings):
    rec = Recorder(body=STATUS_BODY)
    async with make_client(settings, rec) as client:
        res = await client.status()
    assert rec.last.url.path == "/v3/status"
    assert res.quotas.month.used == 72


@pytest.mark.asyncio
async def test_latest(settings):
    rec = Recorder(body=LATEST_BODY)
    async with make_client(settings, rec) as client:
        res = await client.latest("EUR", ["USD", "GBP"])
    assert rec.last.url.path == "/v3/latest"
    assert rec.last.headers["apikey"] == API_KEY
    assert rec.last.url.params["currencies"] == "USD,GBP"
    assert res.rate("GBP") == pytest.approx(0.8671)


@pytest.mark.asyncio
async def test_historical_and_convert_share_request_building(settings):
    rec = Recorder(body=LATEST_BODY)
    async with make_client(settings, rec) as client:
        await client.historical("EUR", "2024-01-02", "USD")
        await client.convert("EUR", dt.date(2024, 1, 2), 2.5, "USD")
    hist, conv = rec.requests
    assert hist.url.path == "/v3/historical"
    assert hist.url.params["date"] == "2024-01-02"
    assert conv.url.path == "/v3/convert"
    assert list(conv.url.params.items()) == [
        ("base_currency", "EUR"),
        ("date", "2024-01-02"),
        ("value", "2.5"),
        ("currencies", "USD"),
    ]


@pytest.mark.asyncio
async def test_range(settings):
    rec = Recorder(body=RANGE_BODY)
    async with make_client(settings, rec) as client:
        res = await client.range("EUR", "2024-01-01", "2024-01-02", "USD", accuracy="hour")
    assert rec.last.url.params["accuracy"] == "hour"
    assert [e.datetime.day for e in res.data] == [1, 2]


@pytest.mark.asyncio
async def test_api_error(settings):
    rec = Recorder(status_code=429, body={"message": "Rate limit exceeded"})
    async with make_client(settings, rec) as client:
        with pytest.raises(ApiError) as exc:
            await client.currencies()
    assert exc.value.status_code == 429
    assert exc.value.message == "Rate limit exceeded"


@pytest.mark.asyncio
async def test_timeout_is_request_error(settings):
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with AsyncCurrencyapi(settings=settings, transport=httpx.MockTransport(slow)) as client:
        with pytest.raises(RequestError):
            await client.latest("EUR")


@pytest.mark.asyncio
async def test_api_error_keeps_body_and_errors(settings):
    body = {
        "message": "The date must be a date before today.",
        "errors": {"date": ["The date must be a date before today."]},
    }
    rec = Recorder(status_code=422, body=body)
    async with make_client(settings, rec) as client:
        with pytest.raises(ApiError) as exc:
            await client.historical("EUR", "2999-01-01")
    assert exc.value.errors == {"date": ["The date must be a date before today."]}
    assert "before today" in exc.value.body


@pytest.mark.asyncio
async def test_invalid_body_is_parsing_error(settings):
    rec = Recorder(text="<html>maintenance</html>")
    async with make_client(settings, rec) as client:
        with pytest.raises(ResponseParsingError) as exc:
            await client.latest("EUR")
    assert exc.value.body == "<html>maintenance</html>"


@pytest.mark.asyncio
async def test_unexpected_shape_is_parsing_error(settings):
    rec = Recorder(body={"data": [{"currencies": {}}]})
    async with make_client(settings, rec) as client:
        with pytest.raises(ResponseParsingError):
            await client.range("EUR", "2024-01-01", "2024-01-02")


@pytest.mark.asyncio
async def test_datetime_date_and_type_params(settings):
    rec = Recorder(body=LATEST_BODY)
    async with make_client(settings, rec) as client:
        await client.historical("EUR", dt.datetime(2024, 1, 2, 8, 0), type=CurrencyType.FIAT)
    assert list(rec.last.url.params.items()) == [
        ("base_currency", "EUR"),
        ("date", "2024-01-02"),
        ("type", "fiat"),
    ]


@pytest.mark.asyncio
async def test_missing_date_sends_nothing(settings):
    rec = Recorder(body=LATEST_BODY)
    async with make_client(settings, rec) as client:
        with pytest.raises(ValueError):
            await client.historical("EUR", None)
    assert rec.requests == []


def test_control_characters_in_api_key(settings):
    with pytest.raises(ClientConstructionError):
        AsyncCurrencyapi("ab\ncd", settings=settings, transport=httpx.MockTransport(Recorder()))
