"""FetchStrategy dispatches decorated requests through an httpx client.
It uses HeaderBuilder for header construction and leaves retries, timeouts
and redirects to the client. Network errors and non-2xx statuses propagate
unchanged.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .header_builder import HeaderBuilder

logger = logging.getLogger(__name__)


def create_client(valves, **kwargs) -> httpx.AsyncClient:
    """Client whose default headers carry the configured fixed User-Agent.

    Per-request decoration from FetchStrategy is applied on top of these.
    """
    headers = httpx.Headers(getattr(valves, "EXTRA_HEADERS", None) or {})
    default_ua = getattr(valves, "DEFAULT_USER_AGENT", None)
    if default_ua:
        headers["User-Agent"] = default_ua
    headers.update(kwargs.pop("headers", None))
    return httpx.AsyncClient(headers=headers, **kwargs)


class FetchStrategy:
    def __init__(self, valves, client: httpx.AsyncClient, header_builder: Optional[HeaderBuilder] = None):
        self.valves = valves
        self.client = client
        self.header_builder = header_builder or HeaderBuilder(valves)

    def prepare(self, url: str, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Decorate *options* and map fetch-style keys onto httpx request arguments."""
        request_kwargs = self.header_builder.decorate(url, options)
        if "body" in request_kwargs:
            request_kwargs["content"] = request_kwargs.pop("body")
        request_kwargs["method"] = str(request_kwargs.get("method") or "GET").upper()
        return request_kwargs

    async def fetch(self, url: str, options: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        """Send one request with a User-Agent applied.
        Returns the httpx.Response on success, raises on network failure or non-2xx status.
        """
        request_kwargs = self.prepare(url, options)
        method = request_kwargs.pop("method")
        response = await self.client.request(method, url, **request_kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        response.raise_for_status()
        return response

    async def fetch_text(self, url: str, options: Optional[Mapping[str, Any]] = None) -> str:
        response = await self.fetch(url, options)
        return response.text

    async def fetch_json(self, url: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        response = await self.fetch(url, options)
        return response.json()
