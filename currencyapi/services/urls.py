from __future__ import annotations

"""URL and query construction for the v3 endpoints."""
import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import httpx

from currencyapi.core.errors import UrlConstructionError

BASE_URL = "https://api.currencyapi.com/v3/"

QueryPairs = List[Tuple[str, str]]


def construct_base_url(with_path: Optional[str] = None, base_url: str = BASE_URL) -> httpx.URL:
    try:
        url = httpx.URL(str(base_url))
    except (httpx.InvalidURL, TypeError) as e:
        raise UrlConstructionError(f"Invalid base url '{base_url}'") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlConstructionError(f"Invalid base url '{base_url}'")
    if with_path:
        trimmed = with_path.lstrip("/")
        url = url.copy_with(path=f"{url.path.rstrip('/')}/{trimmed}")
    return url


def format_currencies(currencies: str | Iterable[str] | None) -> Optional[str]:
    if currencies is None:
        return None
    if isinstance(currencies, str):
        parts = currencies.split(",")
    else:
        parts = list(currencies)
    codes = [p.strip().upper() for p in parts if p and p.strip()]
    return ",".join(codes) or None


def format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, dt.date):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def build_query(pairs: Sequence[Tuple[str, Any]]) -> QueryPairs:
    """Render (name, value) pairs in order, dropping unset ones."""
    out: QueryPairs = []
    for name, value in pairs:
        if value is None:
            continue
        if name == "currencies":
            value = format_currencies(value)
            if value is None:
                continue
        elif name == "date" and isinstance(value, dt.datetime):
            value = value.date()
        out.append((name, format_value(value)))
    return out
