"""Application layer - gateway core, ports and use cases."""

from billbridge.application.conversion import ConversionGateway
from billbridge.application.use_cases.sync_attachments import (
    AccountingTarget,
    SyncRecordAttachmentsUseCase,
)

__all__ = [
    "ConversionGateway",
    "AccountingTarget",
    "SyncRecordAttachmentsUseCase",
]
