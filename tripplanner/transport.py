# tripplanner/transport.py
import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .errors import TransportFailure

logger = logging.getLogger(__name__)

_SECRET_PARAMS = re.compile(r"((?:appid|client_id)=)[^&]+")


def redact(url: str) -> str:
    """Hide API keys embedded in a provider URL before it reaches the logs."""
    return _SECRET_PARAMS.sub(r"\1<redacted>", url)


@dataclass(frozen=True)
class JsonResponse:
    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport:
    """
    Blocking `requests` session exposed as an awaitable `fetch_json`.

    Each call runs in a worker thread so independent provider requests can be
    awaited together on one event loop. HTTP error statuses are returned, not
    raised; only network failures and non-JSON bodies raise.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> JsonResponse:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", redact(url), exc)
            raise TransportFailure(f"Request failed: {exc.__class__.__name__}") from exc

        logger.debug("GET %s -> %s", redact(resp.url or url), resp.status_code)
        try:
            body = resp.json()
        except ValueError as exc:
            logger.warning("Non-JSON body from %s (status %s)", redact(url), resp.status_code)
            raise TransportFailure(f"Invalid JSON response (status {resp.status_code})") from exc
        return JsonResponse(status=resp.status_code, body=body)

    async def fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> JsonResponse:
        return await asyncio.to_thread(self.get_json, url, params)

    def close(self) -> None:
        self.session.close()
