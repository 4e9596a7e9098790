"""
API routes for the BillBridge gateway.

Decodes base64 attachments and either returns them or forwards them as
multipart uploads, relaying whatever the upstream answers.
"""

from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, Response
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from billbridge.api.auth import require_api_key
from billbridge.application.codec import decode_base64
from billbridge.application.conversion import ConversionGateway
from billbridge.domain.entities.attachment import (
    DEFAULT_FILE_NAME,
    DEFAULT_METHOD,
    DEFAULT_MIME_TYPE,
    AttachmentJob,
    ForwardTarget,
)
from billbridge.domain.entities.exchange import CompletedExchange, ForwardOutcome
from billbridge.domain.errors import MissingFieldError

router = APIRouter()
protected = APIRouter(dependencies=[Depends(require_api_key)])


# ============================================================================
# Request Models
# ============================================================================


class ForwardConfig(BaseModel):
    """Where to send the decoded file."""

    url: str | None = Field(None, description="Upstream URL; without it the file is returned directly")
    method: str = Field(DEFAULT_METHOD, description="HTTP method for the upstream call")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra upstream headers (e.g. auth)")


class ConvertRequest(BaseModel):
    """Request body for the base64 conversion endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    base64_data: str | None = Field(None, description="Base64-encoded file content")
    file_name: str | None = Field(None, description=f"Display file name (default {DEFAULT_FILE_NAME})")
    mime_type: str | None = Field(None, description=f"MIME type (default {DEFAULT_MIME_TYPE})")
    forward: ForwardConfig | None = None

    def to_job(self) -> AttachmentJob:
        forward = None
        if self.forward is not None:
            forward = ForwardTarget(
                url=self.forward.url,
                method=(self.forward.method or DEFAULT_METHOD).upper(),
                headers=dict(self.forward.headers),
            )
        return AttachmentJob(
            content=decode_base64(self.base64_data or ""),
            name=self.file_name or DEFAULT_FILE_NAME,
            content_type=self.mime_type or DEFAULT_MIME_TYPE,
            forward=forward,
        )


class ForwardRequest(BaseModel):
    """Request body for the generic forward endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    target_url: str | None = Field(None, description="Upstream URL")
    method: str = DEFAULT_METHOD
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None


# ============================================================================
# Helpers
# ============================================================================


def get_gateway(request: Request) -> ConversionGateway:
    return request.app.state.gateway


def content_disposition(file_name: str) -> str:
    """`attachment; filename="..."`, with an RFC 5987 form for non-latin-1 names."""
    safe = file_name.replace('"', "").replace("\r", "").replace("\n", "")
    try:
        safe.encode("latin-1")
    except UnicodeEncodeError:
        fallback = safe.encode("ascii", "replace").decode("ascii").replace("?", "_")
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(safe)}"
    return f'attachment; filename="{safe}"'


def relay(outcome: ForwardOutcome) -> Response:
    """Mirror the upstream status and body back to the caller."""
    if not isinstance(outcome, CompletedExchange):
        # Details were logged by the forwarder; the caller only learns it failed.
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # These statuses may not carry a body
    if outcome.status < 200 or outcome.status in (204, 304):
        return Response(status_code=outcome.status)
    return JSONResponse(status_code=outcome.status, content=outcome.envelope())


def body_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


# ============================================================================
# Health Endpoints
# ============================================================================


@router.get("/", tags=["health"])
async def root(request: Request) -> dict[str, str]:
    settings = request.app.state.settings
    return {"service": settings.app_name, "version": settings.app_version}


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Liveness probe. Unauthenticated, no dependency checks."""
    return {"status": "ok"}


# ============================================================================
# Conversion / Forwarding
# ============================================================================


@protected.post("/api/convert/base64-to-binary", tags=["convert"])
async def convert_base64_to_binary(
    payload: ConvertRequest | None = Body(None),
    gateway: ConversionGateway = Depends(get_gateway),
) -> Response:
    """
    Decode a base64 file.

    - Without `forward.url`: respond with the raw bytes as a download.
    - With `forward.url`: upload the bytes as multipart field `attachment`
      and answer with the upstream's status and `{status, headers, data}`.
    """
    if payload is None or not payload.base64_data:
        logger.warning("Request rejected: base64Data is missing or empty")
        raise MissingFieldError("base64Data")

    job = payload.to_job()
    logger.info(
        f"Decoded {len(payload.base64_data)} base64 chars into {len(job.content)} bytes "
        f"(file={job.name}, mime={job.content_type}, forward={job.should_forward})"
    )

    if not job.should_forward:
        return Response(
            content=job.content,
            headers={
                "Content-Type": job.content_type,
                "Content-Disposition": content_disposition(job.name),
            },
        )

    return relay(await gateway.convert(job))


@protected.post("/api/forward", tags=["convert"])
async def forward_request(
    payload: ForwardRequest | None = Body(None),
    gateway: ConversionGateway = Depends(get_gateway),
) -> Response:
    """Relay an arbitrary body to `targetUrl` and mirror the answer."""
    if payload is None or not payload.target_url:
        raise MissingFieldError("targetUrl")

    target = ForwardTarget(
        url=payload.target_url,
        method=(payload.method or DEFAULT_METHOD).upper(),
        headers=dict(payload.headers),
    )
    return relay(await gateway.forward(target, payload.body))


# ============================================================================
# Connectivity check
# ============================================================================


async def echo(request: Request) -> dict[str, Any]:
    """Echo whatever was sent; used to check reachability from the ERP side."""
    raw = await request.body()
    try:
        received: Any = await request.json() if raw else None
    except ValueError:
        received = raw.decode("utf-8", errors="replace")

    logger.info(f"Test endpoint hit: {request.method} {request.url.path} ({body_type(received)})")
    return {
        "success": True,
        "message": "Test endpoint received your request!",
        "receivedBody": received,
        "bodyType": body_type(received),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
