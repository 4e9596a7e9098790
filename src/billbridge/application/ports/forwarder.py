from __future__ import annotations
from typing import Any, Protocol
from billbridge.domain.entities.exchange import ForwardOutcome


class Forwarder(Protocol):
    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        content: bytes | str | None = None,
        json_body: Any = ...,
    ) -> ForwardOutcome: ...
