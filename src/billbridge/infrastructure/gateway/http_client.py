"""Calls a remote gateway over HTTP with the shared API key."""

from __future__ import annotations

import httpx
from loguru import logger

from billbridge.application.ports.gateway import GatewayResponse
from billbridge.domain.entities.attachment import AttachmentJob
from billbridge.domain.errors import GatewayCallError
from billbridge.infrastructure.gateway.payload import build_convert_payload

CONVERT_PATH = "/api/convert/base64-to-binary"

# Upstream answers the gateway relays with no body
BODYLESS_STATUSES = frozenset({204, 304})


class HttpGatewayClient:
    """Gateway client for a deployed gateway service."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        api_key_header: str = "x-api-key",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_key_header = api_key_header
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def convert(self, job: AttachmentJob) -> GatewayResponse:
        url = f"{self.base_url}{CONVERT_PATH}"
        try:
            response = await self._client.post(
                url,
                json=build_convert_payload(job),
                headers={self.api_key_header: self.api_key},
            )
        except httpx.HTTPError as e:
            raise GatewayCallError(f"Gateway request failed: {type(e).__name__}: {e}") from e

        if not response.content and (response.status_code < 200 or response.status_code in BODYLESS_STATUSES):
            logger.debug(f"Gateway relayed bodyless {response.status_code} for {job.name}")
            envelope = {"status": response.status_code, "headers": dict(response.headers), "data": None}
            return GatewayResponse(status_code=response.status_code, envelope=envelope)

        try:
            envelope = response.json()
        except ValueError as e:
            raise GatewayCallError(
                f"Gateway returned non-JSON response (HTTP {response.status_code}): {response.text[:200]}"
            ) from e

        if not isinstance(envelope, dict):
            raise GatewayCallError(f"Unexpected gateway response (HTTP {response.status_code}): {envelope!r:.200}")
        if "error" in envelope and "status" not in envelope:
            raise GatewayCallError(f"Gateway error (HTTP {response.status_code}): {envelope['error']}")

        logger.debug(f"Gateway answered {response.status_code} for {job.name}")
        return GatewayResponse(status_code=response.status_code, envelope=envelope)

    async def aclose(self) -> None:
        await self._client.aclose()
