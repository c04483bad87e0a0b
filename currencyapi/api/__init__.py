"""Client facades giving access to the currencyapi endpoints."""

from .async_client import AsyncCurrencyapi
from .client import Currencyapi

__all__ = ["Currencyapi", "AsyncCurrencyapi"]
