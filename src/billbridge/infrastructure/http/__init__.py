"""Outbound HTTP: multipart encoding and forwarding."""

from billbridge.infrastructure.http.forwarder import HttpForwarder, parse_response_body
from billbridge.infrastructure.http.multipart import (
    ATTACHMENT_FIELD,
    MultipartBody,
    encode_multipart,
    merge_headers,
)

__all__ = [
    "HttpForwarder",
    "parse_response_body",
    "ATTACHMENT_FIELD",
    "MultipartBody",
    "encode_multipart",
    "merge_headers",
]
