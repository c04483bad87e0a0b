from __future__ import annotations

"""Error types raised by the client.

Every failure surfaces as a CurrencyapiError subclass so callers can catch a
single type. Transport exceptions from httpx are chained via __cause__.
"""
from typing import Any, Dict, Optional


class CurrencyapiError(Exception):
    pass


class ClientConstructionError(CurrencyapiError):
    pass


class UrlConstructionError(CurrencyapiError):
    pass


class RequestError(CurrencyapiError):
    pass


class ResponseParsingError(CurrencyapiError):
    """Body could not be decoded into the expected response model.

    Very likely caused by invalid input the API rejected in an unexpected
    shape, or by fields the API left out / filled with unexpected values.
    """

    def __init__(self, body: str, reason: str | None = None):
        self.body = body
        self.reason = reason
        msg = "Failed to parse response body"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ApiError(CurrencyapiError):
    """Remote API answered with an HTTP error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        errors: Optional[Dict[str, Any]] = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}
        self.body = body
        super().__init__(f"HTTP {status_code}: {message}")
