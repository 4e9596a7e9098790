from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Protocol
from billbridge.domain.entities.attachment import AttachmentJob


@dataclass(frozen=True)
class GatewayResponse:
    # HTTP status the gateway answered with + its `{status, headers, data}` envelope
    status_code: int
    envelope: dict[str, Any]


class GatewayClient(Protocol):
    async def convert(self, job: AttachmentJob) -> GatewayResponse:
        """Run a convert/forward call.

        Raises GatewayCallError when the call cannot be completed or its
        response cannot be parsed.
        """
        ...
