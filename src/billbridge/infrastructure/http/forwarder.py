"""Outbound HTTP forwarding with transparent status passthrough."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from billbridge.domain.entities.exchange import CompletedExchange, ForwardOutcome, TransportFailure

_NO_BODY = object()


def parse_response_body(response: httpx.Response) -> Any:
    """JSON when the upstream says so (and it parses), text otherwise, None when empty."""
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "").lower()
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Upstream declared {content_type} but body is not valid JSON")
    return response.text


class HttpForwarder:
    """Sends one request upstream and reports what happened.

    Every answered request becomes a CompletedExchange, including 4xx/5xx.
    Only failures to complete the exchange (DNS, connect, timeout, bad URL,
    unserialisable body) become a TransportFailure.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True)

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        content: bytes | str | None = None,
        json_body: Any = _NO_BODY,
    ) -> ForwardOutcome:
        kwargs: dict[str, Any] = {"headers": headers or {}}
        if content is not None:
            kwargs["content"] = content
        elif json_body is not _NO_BODY and json_body is not None:
            kwargs["json"] = json_body

        try:
            response = await self._client.request(method.upper(), url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as e:
            logger.exception(f"Forward to {url} failed: {type(e).__name__}")
            return TransportFailure(reason=str(e) or type(e).__name__, error_type=type(e).__name__)

        logger.info(f"Upstream {method.upper()} {url} -> {response.status_code}")
        return CompletedExchange(
            status=response.status_code,
            headers=dict(response.headers),
            body=parse_response_body(response),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
