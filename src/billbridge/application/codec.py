"""Base64 helpers.

Decoding is deliberately permissive: it mirrors the lenient decoder the
upstream platform's callers were written against, so malformed input
yields whatever bytes can be recovered instead of an error.
"""

from __future__ import annotations

import base64
import string

_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_URLSAFE = str.maketrans("-_", "+/")


def decode_base64(text: str) -> bytes:
    """Decode base64 text, silently dropping anything that can't be decoded.

    - URL-safe ``-`` and ``_`` are read as ``+`` and ``/``
    - whitespace and other characters outside the alphabet are skipped
    - decoding stops at the first ``=``
    - a single dangling character (6 bits) is discarded
    """
    if not text:
        return b""
    head = text.translate(_URLSAFE).split("=", 1)[0]
    cleaned = "".join(ch for ch in head if ch in _ALPHABET)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned, validate=True)


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
