"""Shared-secret gate for the gateway API."""

from __future__ import annotations

import secrets

from fastapi import Request
from loguru import logger

from billbridge.domain.errors import UnauthorizedError
from billbridge.infrastructure.settings import Settings


async def require_api_key(request: Request) -> None:
    """Reject the request unless it carries the configured API key header.

    The key travels in a header rather than the query string so it never
    lands in access logs.
    """
    settings: Settings = request.app.state.settings
    provided = request.headers.get(settings.api_key_header)
    expected = settings.api_key.get_secret_value()

    if not provided or not secrets.compare_digest(provided.encode(), expected.encode()):
        logger.warning(
            f"API key validation failed for {request.method} {request.url.path} "
            f"(key {'present (invalid)' if provided else 'missing'})"
        )
        raise UnauthorizedError(settings.api_key_header)
