from __future__ import annotations

"""httpx client construction and response decoding shared by both facades.

One GET per call: no retries, no caching. Any failure is mapped onto the
CurrencyapiError hierarchy here so the facades stay declarative.
"""
import json
import logging
import re
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from currencyapi.core.config import Settings
from currencyapi.core.errors import ApiError, ClientConstructionError, ResponseParsingError
from currencyapi.models import ErrorResponse

logger = logging.getLogger("currencyapi.http")

M = TypeVar("M", bound=BaseModel)


_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _default_headers(api_key: str, user_agent: str) -> httpx.Headers:
    for name, value in (("apikey", api_key), ("User-Agent", user_agent)):
        if _CONTROL_CHARS.search(value):
            raise ClientConstructionError(f"Invalid header value for '{name}': control character")
    try:
        return httpx.Headers(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": user_agent,
                "apikey": api_key,
            }
        )
    except (TypeError, ValueError, UnicodeEncodeError) as e:
        raise ClientConstructionError(f"Invalid header value: {e}") from e


def construct_client(
    api_key: str,
    settings: Settings,
    *,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    headers = _default_headers(api_key, user_agent or settings.effective_user_agent())
    try:
        return httpx.Client(
            headers=headers,
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )
    except (TypeError, ValueError) as e:
        raise ClientConstructionError(str(e)) from e


def construct_async_client(
    api_key: str,
    settings: Settings,
    *,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    headers = _default_headers(api_key, user_agent or settings.effective_user_agent())
    try:
        return httpx.AsyncClient(
            headers=headers,
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )
    except (TypeError, ValueError) as e:
        raise ClientConstructionError(str(e)) from e


def _api_error(response: httpx.Response, body: str) -> ApiError:
    message = response.reason_phrase or "HTTP error"
    errors: Dict[str, Any] = {}
    try:
        parsed = ErrorResponse.model_validate(json.loads(body))
        message = parsed.message
        errors = parsed.errors
    except ValueError:
        # Non-JSON error pages (proxies, 5xx) keep the reason phrase.
        pass
    return ApiError(response.status_code, message, errors=errors, body=body)


def decode_response(response: httpx.Response, model: Type[M]) -> M:
    body = response.text
    if response.status_code >= 400:
        err = _api_error(response, body)
        logger.warning("api error %s on %s: %s", err.status_code, response.url.path, err.message)
        raise err
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.warning("could not parse %s body into %s", response.url.path, model.__name__)
        raise ResponseParsingError(body, reason=f"{e.error_count()} validation error(s)") from e
