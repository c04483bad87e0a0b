from __future__ import annotations

"""Shared request construction for the blocking and asyncio facades.

Subclasses only decide how a prepared call is sent; which path, which query
parameters and which response model belong to an endpoint is defined once here.
"""
import datetime as dt
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Type, Union

import httpx
from pydantic import BaseModel, ValidationError

from currencyapi.core.config import Settings, get_settings
from currencyapi.core.errors import ClientConstructionError, UrlConstructionError
from currencyapi.models import (
    Accuracy,
    CurrenciesResponse,
    CurrencyType,
    RangeResponse,
    RatesResponse,
    StatusResponse,
)
from currencyapi.services.urls import build_query, construct_base_url

logger = logging.getLogger("currencyapi.client")

Currencies = Union[str, Iterable[str], None]
DateLike = Union[str, dt.date]
Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class PreparedCall:
    endpoint: str
    url: httpx.URL
    model: Type[BaseModel]


class BaseCurrencyapi(ABC):
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        user_agent: Optional[str] = None,
    ):
        self._settings = settings or _load_settings()
        key = api_key if api_key is not None else self._settings.api_key
        if not key or not key.strip():
            raise ClientConstructionError(
                "An API key is required (pass api_key or set CURRENCYAPI_API_KEY)"
            )
        self._api_key = key.strip()
        self._user_agent = user_agent
        # Raises UrlConstructionError for a malformed base url
        construct_base_url(None, str(self._settings.base_url))

    @property
    def settings(self) -> Settings:
        return self._settings

    def __repr__(self) -> str:
        # Never expose the key
        return f"{type(self).__name__}(base_url='{self._settings.base_url}')"

    @abstractmethod
    def close(self):
        """Release the underlying HTTP connection pool."""
        raise NotImplementedError

    def _prepare(self, endpoint: str, model: Type[BaseModel], *pairs) -> PreparedCall:
        url = construct_base_url(endpoint, str(self._settings.base_url))
        query = build_query(pairs)
        if query:
            url = url.copy_with(params=httpx.QueryParams(query))
        logger.debug("prepared %s %s", endpoint, url.query.decode("ascii") or "-")
        return PreparedCall(endpoint=endpoint, url=url, model=model)

    def _prepare_status(self) -> PreparedCall:
        return self._prepare("status", StatusResponse)

    def _prepare_currencies(
        self, currencies: Currencies = None, type: Optional[CurrencyType | str] = None
    ) -> PreparedCall:
        return self._prepare(
            "currencies",
            CurrenciesResponse,
            ("currencies", currencies),
            ("type", type),
        )

    def _prepare_latest(
        self,
        base_currency: Optional[str] = None,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> PreparedCall:
        return self._prepare(
            "latest",
            RatesResponse,
            ("base_currency", _upper(base_currency)),
            ("currencies", currencies),
            ("type", type),
        )

    def _prepare_historical(
        self,
        base_currency: Optional[str],
        date: DateLike,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> PreparedCall:
        return self._prepare(
            "historical",
            RatesResponse,
            ("base_currency", _upper(base_currency)),
            ("date", _require("date", date)),
            ("currencies", currencies),
            ("type", type),
        )

    def _prepare_convert(
        self,
        base_currency: Optional[str],
        date: Optional[DateLike],
        value: Number,
        currencies: Currencies = None,
        type: Optional[CurrencyType | str] = None,
    ) -> PreparedCall:
        return self._prepare(
            "convert",
            RatesResponse,
            ("base_currency", _upper(base_currency)),
            ("date", date),
            ("value", _require("value", value)),
            ("currencies", currencies),
            ("type", type),
        )

    def _prepare_range(
        self,
        base_currency: Optional[str],
        datetime_start: DateLike,
        datetime_end: DateLike,
        currencies: Currencies = None,
        accuracy: Optional[Accuracy | str] = None,
        type: Optional[CurrencyType | str] = None,
    ) -> PreparedCall:
        if accuracy is not None:
            # ValueError for anything outside day/hour/quarter_hour/minute
            accuracy = Accuracy(accuracy)
        return self._prepare(
            "range",
            RangeResponse,
            ("base_currency", _upper(base_currency)),
            ("datetime_start", _require("datetime_start", datetime_start)),
            ("datetime_end", _require("datetime_end", datetime_end)),
            ("accuracy", accuracy),
            ("currencies", currencies),
            ("type", type),
        )


def _upper(code: Optional[str]) -> Optional[str]:
    if code is None:
        return None
    return code.strip().upper() or None


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if "base_url" in fields:
            raise UrlConstructionError(f"Invalid CURRENCYAPI_BASE_URL: {e}") from e
        raise ClientConstructionError(f"Invalid settings: {e}") from e


def _require(name: str, value):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"'{name}' is required")
    return value
