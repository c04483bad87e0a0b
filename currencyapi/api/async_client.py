from __future__ import annotations

"""asyncio facade; same endpoints and results as Currencyapi."""
import logging
from typing import Optional

import httpx

from currencyapi.core.config import Settings
from currencyapi.core.errors import RequestError
from currencyapi.core.logging import request_context
from currencyapi.models import (
    Accuracy,
    CurrenciesResponse,
    CurrencyType,
    RangeResponse,
    RatesResponse,
    StatusResponse,
)
from currencyapi.services.http_client import construct_async_client, decode_response

from .base import BaseCurrencyapi, Currencies, DateLike, Number, PreparedCall

logger = logging.getLogger("currencyapi.client")


class AsyncCurrencyapi(BaseCurrencyapi):
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(api_key, settings=settings, user_agent=user_agent)
        self._client = construct_async_client(
            self._api_key, self._settings, user_agent=user_agent, transport=transport
        )

    async def close(self) -> None:  # type: ignore[override]
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncCurrencyapi":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def _send(self, call: PreparedCall):
        with request_context(call.endpoint):
            try:
                response = await self._client.get(call.url)
            except httpx.HTTPError as e:
                logger.warning("request to %s failed: %s", call.endpoint, e)
                raise RequestError(f"Request to '{call.endpoint}' failed: {e}") from e
            return decode_response(response, call.model)

    async def status(self) -> StatusResponse:
        return await self._send(self._prepare_status())

    async def currencies(
        self, currencies: Currencies = None, type: Optional[CurrencyType | str] = None
    ) -> CurrenciesResponse:
        return await self._send(self._prepare_currencies(currencies, type))

    async def latest(
        self,
        base_currency: Optional[str] = None,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RatesResponse:
        return await self._send(self._prepare_latest(base_currency, currencies, type))

    async def historical(
        self,
        base_currency: Optional[str],
        date: DateLike,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RatesResponse:
        return await self._send(
            self._prepare_historical(base_currency, date, currencies, type)
        )

    async def convert(
        self,
        base_currency: Optional[str],
        date: Optional[DateLike],
        value: Number,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RatesResponse:
        return await self._send(
            self._prepare_convert(base_currency, date, value, currencies, type)
        )

    async def range(
        self,
        base_currency: Optional[str],
        datetime_start: DateLike,
        datetime_end: DateLike,
        currencies: Currencies = None,
        accuracy: Optional[Accuracy | str] = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RangeResponse:
        return await self._send(
            self._prepare_range(
                base_currency, datetime_start, datetime_end, currencies, accuracy, type
            )
        )
