from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_FILE_NAME = "file.bin"
DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_METHOD = "POST"


@dataclass(frozen=True)
class ForwardTarget:
    url: Optional[str]
    method: str = DEFAULT_METHOD
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AttachmentJob:
    """One decoded attachment on its way to the caller or a forward target."""

    content: bytes
    name: str = DEFAULT_FILE_NAME
    content_type: str = DEFAULT_MIME_TYPE
    forward: Optional[ForwardTarget] = None

    @property
    def should_forward(self) -> bool:
        return self.forward is not None and bool(self.forward.url)


@dataclass(frozen=True)
class DiscoveredAttachment:
    # Platform file id + platform file-type tag (PDF, PNGIMAGE, ...)
    attachment_id: str
    file_type: str
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or self.attachment_id


@dataclass(frozen=True)
class LoadedAttachment:
    name: str
    base64_content: str
    file_type: str
