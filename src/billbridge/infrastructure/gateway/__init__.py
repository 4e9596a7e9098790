"""Clients the orchestrator uses to reach the conversion gateway."""

from billbridge.infrastructure.gateway.http_client import HttpGatewayClient
from billbridge.infrastructure.gateway.in_process import InProcessGatewayClient

__all__ = ["HttpGatewayClient", "InProcessGatewayClient"]
