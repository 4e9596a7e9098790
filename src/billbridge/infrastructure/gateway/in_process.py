"""Runs the gateway core in the orchestrator's own process."""

from __future__ import annotations

from billbridge.application.conversion import ConversionGateway
from billbridge.application.ports.gateway import GatewayResponse
from billbridge.domain.entities.attachment import AttachmentJob
from billbridge.domain.entities.exchange import CompletedExchange
from billbridge.domain.errors import GatewayCallError


class InProcessGatewayClient:
    def __init__(self, gateway: ConversionGateway) -> None:
        self.gateway = gateway

    async def convert(self, job: AttachmentJob) -> GatewayResponse:
        if not job.should_forward:
            raise GatewayCallError("In-process gateway calls need a forward target")

        outcome = await self.gateway.convert(job)
        if not isinstance(outcome, CompletedExchange):
            raise GatewayCallError(f"Forward failed: {outcome.error_type}: {outcome.reason}")
        return GatewayResponse(status_code=outcome.status, envelope=outcome.envelope())
