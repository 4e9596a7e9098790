"""Gateway core: decode, optionally re-encode as multipart, forward, relay."""

from __future__ import annotations

from typing import Any

from loguru import logger

from billbridge.application.ports.forwarder import Forwarder
from billbridge.domain.entities.attachment import AttachmentJob, ForwardTarget
from billbridge.domain.entities.exchange import ForwardOutcome
from billbridge.infrastructure.http.multipart import encode_multipart, merge_headers


class ConversionGateway:
    """Stateless request transformer.

    Holds no per-request state; each call owns its own buffers, so one
    instance is shared by all concurrent requests.
    """

    def __init__(self, forwarder: Forwarder) -> None:
        self.forwarder = forwarder

    async def convert(self, job: AttachmentJob) -> bytes | ForwardOutcome:
        """Return the decoded bytes, or the outcome of forwarding them."""
        if not job.should_forward:
            return job.content

        target = job.forward
        body = encode_multipart(job.content, job.name, job.content_type)
        headers = merge_headers(body.headers, target.headers)

        logger.info(
            f"Forwarding {job.name} ({len(job.content)} bytes, {job.content_type}) "
            f"as multipart to {target.method} {target.url}"
        )
        return await self.forwarder.send(
            target.method,
            target.url,
            headers=headers,
            content=body.content,
        )

    async def forward(self, target: ForwardTarget, body: Any = None) -> ForwardOutcome:
        """Relay an arbitrary body as-is (strings raw, anything else as JSON)."""
        logger.info(f"Forwarding request to {target.method} {target.url}")
        if isinstance(body, (str, bytes)):
            return await self.forwarder.send(target.method, target.url, headers=dict(target.headers), content=body)
        return await self.forwarder.send(target.method, target.url, headers=dict(target.headers), json_body=body)
