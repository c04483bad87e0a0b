from __future__ import annotations

"""Blocking facade over the currencyapi v3 endpoints."""
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
from currencyapi.services.http_client import construct_client, decode_response

from .base import BaseCurrencyapi, Currencies, DateLike, Number, PreparedCall

logger = logging.getLogger("currencyapi.client")


class Currencyapi(BaseCurrencyapi):
    """Main entry point. Create it once with your API key and reuse it.

    The API key may be omitted when CURRENCYAPI_API_KEY is set. Pass `transport`
    to route traffic through a custom httpx transport (e.g. httpx.MockTransport
    in tests).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(api_key, settings=settings, user_agent=user_agent)
        self._client = construct_client(
            self._api_key, self._settings, user_agent=user_agent, transport=transport
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Currencyapi":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _send(self, call: PreparedCall):
        with request_context(call.endpoint):
            try:
                response = self._client.get(call.url)
            except httpx.HTTPError as e:
                logger.warning("request to %s failed: %s", call.endpoint, e)
                raise RequestError(f"Request to '{call.endpoint}' failed: {e}") from e
            return decode_response(response, call.model)

    def status(self) -> StatusResponse:
        """Fetch account quota status. Calls to /status do not count against the quota."""
        return self._send(self._prepare_status())

    def currencies(
        self, currencies: Currencies = None, type: Optional[CurrencyType | str] = None
    ) -> CurrenciesResponse:
        """List supported currencies, optionally restricted to `currencies` or a `type`."""
        return self._send(self._prepare_currencies(currencies, type))

    def latest(
        self,
        base_currency: Optional[str] = None,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RatesResponse:
        """Latest rates for `currencies` against `base_currency` (API default: USD)."""
        return self._send(self._prepare_latest(base_currency, currencies, type))

    def historical(
        self,
        base_currency: Optional[str],
        date: DateLike,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RatesResponse:
        """Rates at the end of `date` (YYYY-MM-DD or a datetime.date)."""
        return self._send(self._prepare_historical(base_currency, date, currencies, type))

    def convert(
        self,
        base_currency: Optional[str],
        date: Optional[DateLike],
        value: Number,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RatesResponse:
        """Convert `value` units of `base_currency` into `currencies`.

        Each entry's `value` in the result is the converted amount. Leave
        `date` as None to convert at the latest rates.
        """
        return self._send(
            self._prepare_convert(base_currency, date, value, currencies, type)
        )

    def range(
        self,
        base_currency: Optional[str],
        datetime_start: DateLike,
        datetime_end: DateLike,
        currencies: Currencies = None,
        accuracy: Optional[Accuracy | str] = None,
        type: Optional[CurrencyType | str] = None,
    ) -> RangeResponse:
        """Rates between two datetimes at the given `accuracy`."""
        return self._send(
            self._prepare_range(
                base_currency, datetime_start, datetime_end, currencies, accuracy, type
            )
        )
