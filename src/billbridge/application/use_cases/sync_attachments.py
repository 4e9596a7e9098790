"""Push every supported attachment of a bill record to the accounting API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlencode

from loguru import logger

from billbridge.application.codec import decode_base64
from billbridge.application.ports.attachment_source import AttachmentSource
from billbridge.application.ports.gateway import GatewayClient
from billbridge.application.ports.token_provider import TokenProvider
from billbridge.domain.entities.attachment import AttachmentJob, DiscoveredAttachment, ForwardTarget
from billbridge.domain.errors import GatewayCallError
from billbridge.domain.mime_types import resolve_mime_type
from billbridge.domain.models import AttachmentOutcome, BatchReport, OutcomeStatus


@dataclass(frozen=True)
class AccountingTarget:
    """Per-record attachment upload endpoint of the accounting API."""

    base_url: str
    organization_id: Optional[str] = None
    auth_scheme: str = "Zoho-oauthtoken"

    def upload_url(self, record_id: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"
        url = f"{base}bills/{quote(record_id, safe='')}/attachment"
        if self.organization_id:
            url = f"{url}?{urlencode({'organization_id': self.organization_id})}"
        return url

    def headers(self, access_token: str) -> dict[str, str]:
        return {
            "Authorization": f"{self.auth_scheme} {access_token}",
            "Accept": "*/*",
        }


class SyncRecordAttachmentsUseCase:
    """Upload a record's attachments one at a time and report on each.

    Flow:
    1. Discover the record's attachments
    2. Fetch the accounting API token (once per batch)
    3. For each attachment, in discovery order:
       - unsupported type -> skipped
       - load content, send through the gateway, classify the upstream status
    4. Return the BatchReport

    A failing attachment never stops the batch. There is no deduplication:
    running twice for the same record uploads everything twice.
    """

    def __init__(
        self,
        source: AttachmentSource,
        gateway: GatewayClient,
        token_provider: TokenProvider,
        target: AccountingTarget,
    ) -> None:
        self.source = source
        self.gateway = gateway
        self.token_provider = token_provider
        self.target = target

    async def run(self, record_id: str, target_record_id: Optional[str] = None) -> BatchReport:
        """Process all attachments of `record_id`.

        Args:
            record_id: Record whose attachments are discovered
            target_record_id: Record id in the accounting API (defaults to record_id)
        """
        attachments = self.source.discover(record_id)
        logger.info(f"Found {len(attachments)} attachments on record {record_id}")

        access_token = self.token_provider.get_access_token()
        forward = ForwardTarget(
            url=self.target.upload_url(target_record_id or record_id),
            method="POST",
            headers=self.target.headers(access_token),
        )

        outcomes: list[AttachmentOutcome] = []
        for attachment in attachments:
            outcomes.append(await self._process(attachment, forward))

        report = BatchReport.from_outcomes(outcomes, record_id=record_id)
        logger.info(
            f"Record {record_id}: processed={report.files_processed}, "
            f"success={report.count(OutcomeStatus.SUCCESS)}, "
            f"failed={report.count(OutcomeStatus.FAILED)}, "
            f"skipped={report.count(OutcomeStatus.SKIPPED)}, "
            f"error={report.count(OutcomeStatus.ERROR)}"
        )
        return report

    async def _process(self, attachment: DiscoveredAttachment, forward: ForwardTarget) -> AttachmentOutcome:
        mime_type = resolve_mime_type(attachment.file_type)
        if mime_type is None:
            logger.warning(f"Unsupported file type {attachment.file_type} for {attachment.label}, skipping")
            return AttachmentOutcome.skipped(attachment.label, attachment.file_type)

        file_name = attachment.label
        try:
            loaded = self.source.load(attachment.attachment_id)
            file_name = loaded.name or file_name
            job = AttachmentJob(
                content=decode_base64(loaded.base64_content),
                name=file_name,
                content_type=mime_type,
                forward=forward,
            )
            logger.debug(f"Sending {file_name} ({len(job.content)} bytes, {mime_type}) to gateway")

            response = await self.gateway.convert(job)
            upstream_status = response.envelope.get("status")
            if not isinstance(upstream_status, int):
                raise GatewayCallError(f"Gateway response has no upstream status: {response.envelope!r:.200}")
        except Exception as e:
            logger.error(f"Failed to process attachment {file_name}: {e}")
            return AttachmentOutcome.errored(file_name, e)

        outcome = AttachmentOutcome.from_upstream(
            file_name,
            upstream_status,
            response=response.envelope.get("data"),
            gateway_status=response.status_code,
        )
        logger.info(f"{file_name}: {outcome.status} (upstream {upstream_status})")
        return outcome
