import json
import logging
import sys
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
endpoint_ctx: ContextVar[str | None] = ContextVar("endpoint", default=None)


class RequestIdFilter(logging.Filter):
    """Stamp records with the id and endpoint of the API call in progress."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.request_id = request_id_ctx.get() or "-"
        record.endpoint = endpoint_ctx.get() or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "request_id": getattr(record, "request_id", "-"),
            "endpoint": getattr(record, "endpoint", "-"),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, name: str = "currencyapi") -> None:
    """Route records of logger `name` through a JSON handler on stdout.

    Opt-in: importing the package never touches logging. Pass name="" to take
    over the root logger instead.
    """
    target = logging.getLogger(name or None)
    target.handlers.clear()
    level = logging.DEBUG if debug else logging.INFO
    target.setLevel(level)
    if name:
        target.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonFormatter())
    target.addHandler(handler)


@contextmanager
def request_context(endpoint: str) -> Iterator[str]:
    rid = str(uuid.uuid4())
    token = request_id_ctx.set(rid)
    endpoint_token = endpoint_ctx.set(endpoint)
    logger = logging.getLogger("currencyapi.request")
    logger.debug("request start: %s", endpoint)
    try:
        yield rid
    finally:
        logger.debug("request end: %s", endpoint)
        endpoint_ctx.reset(endpoint_token)
        request_id_ctx.reset(token)
