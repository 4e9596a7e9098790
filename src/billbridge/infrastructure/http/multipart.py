"""Single-file multipart/form-data encoding for forwarded attachments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import httpx

ATTACHMENT_FIELD = "attachment"
FRAMING_HEADERS = ("Content-Type", "Content-Length")


@dataclass(frozen=True)
class MultipartBody:
    content: bytes
    headers: dict[str, str]

    @property
    def boundary(self) -> str:
        return self.headers["Content-Type"].split("boundary=", 1)[1]


def encode_multipart(
    content: bytes,
    file_name: str,
    mime_type: str,
    field_name: str = ATTACHMENT_FIELD,
) -> MultipartBody:
    """Encode one file part and compute its framing headers.

    httpx does the actual form encoding; the request is only built to
    read the body and the boundary back out, it is never sent.
    """
    request = httpx.Request(
        "POST",
        "http://multipart.local/",
        files={field_name: (file_name, content, mime_type)},
    )
    body = request.read()
    return MultipartBody(
        content=body,
        headers={
            "Content-Type": request.headers["Content-Type"],
            "Content-Length": str(len(body)),
        },
    )


def merge_headers(framing: Mapping[str, str], caller: Mapping[str, str] | None) -> dict[str, str]:
    """Caller headers pass through unless they collide with a framing header.

    Header names compare case-insensitively; framing always wins.
    """
    reserved = {name.lower() for name in framing}
    merged = {k: v for k, v in (caller or {}).items() if k.lower() not in reserved}
    merged.update(framing)
    return merged
