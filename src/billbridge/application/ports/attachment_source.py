from __future__ import annotations
from typing import Protocol
from billbridge.domain.entities.attachment import DiscoveredAttachment, LoadedAttachment


class AttachmentSource(Protocol):
    """Where a record's attachments come from."""

    def discover(self, record_id: str) -> list[DiscoveredAttachment]:
        """Attachment ids and file-type tags for a record, in discovery order."""
        ...

    def load(self, attachment_id: str) -> LoadedAttachment:
        """Full content of one attachment as base64 text."""
        ...
