from __future__ import annotations

from typing import Any

from billbridge.application.codec import encode_base64
from billbridge.domain.entities.attachment import AttachmentJob


def build_convert_payload(job: AttachmentJob) -> dict[str, Any]:
    """JSON body for POST /api/convert/base64-to-binary."""
    payload: dict[str, Any] = {
        "base64Data": encode_base64(job.content),
        "fileName": job.name,
        "mimeType": job.content_type,
    }
    if job.forward is not None:
        payload["forward"] = {
            "url": job.forward.url,
            "method": job.forward.method,
            "headers": dict(job.forward.headers),
        }
    return payload
