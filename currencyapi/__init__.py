"""Typed Python client for the currencyapi.com v3 exchange-rate API.

    from currencyapi import Currencyapi

    with Currencyapi("YOUR-API-KEY") as client:
        rates = client.latest("EUR", ["USD", "GBP"])
        print(rates.rate("USD"))

If you get a ResponseParsingError, check your input first: the API answers
invalid input with bodies that do not fit the response models. The raw body
is kept on the exception.
"""

__version__ = "0.1.0"

from .api import AsyncCurrencyapi, Currencyapi  # noqa: E402
from .core.config import Settings, get_settings  # noqa: E402
from .core.errors import (  # noqa: E402
    ApiError,
    ClientConstructionError,
    CurrencyapiError,
    RequestError,
    ResponseParsingError,
    UrlConstructionError,
)
from .core.logging import init_logging  # noqa: E402

Error = CurrencyapiError

__all__ = [
    "Currencyapi",
    "AsyncCurrencyapi",
    "Settings",
    "get_settings",
    "CurrencyapiError",
    "Error",
    "ApiError",
    "ClientConstructionError",
    "RequestError",
    "ResponseParsingError",
    "UrlConstructionError",
    "init_logging",
]
