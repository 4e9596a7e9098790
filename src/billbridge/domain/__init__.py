"""Domain models and entities."""

from billbridge.domain.entities.attachment import (
    AttachmentJob,
    DiscoveredAttachment,
    ForwardTarget,
    LoadedAttachment,
)
from billbridge.domain.entities.exchange import (
    CompletedExchange,
    ForwardOutcome,
    TransportFailure,
)
from billbridge.domain.models import AttachmentOutcome, BatchReport, OutcomeStatus

__all__ = [
    "AttachmentJob",
    "ForwardTarget",
    "DiscoveredAttachment",
    "LoadedAttachment",
    "CompletedExchange",
    "TransportFailure",
    "ForwardOutcome",
    "AttachmentOutcome",
    "BatchReport",
    "OutcomeStatus",
]
