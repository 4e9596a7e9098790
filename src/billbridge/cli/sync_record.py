"""One-shot upload of a record's attachments to the accounting API."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from loguru import logger

from billbridge.application.conversion import ConversionGateway
from billbridge.application.use_cases.sync_attachments import AccountingTarget, SyncRecordAttachmentsUseCase
from billbridge.cli import configure_logging
from billbridge.domain.models import BatchReport
from billbridge.infrastructure import Settings, get_settings
from billbridge.infrastructure.attachments.directory_source import DirectoryAttachmentSource
from billbridge.infrastructure.auth.static_token import StaticTokenProvider
from billbridge.infrastructure.gateway import HttpGatewayClient, InProcessGatewayClient
from billbridge.infrastructure.http.forwarder import HttpForwarder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Upload a record's attachments through the gateway")
    parser.add_argument("record_id", help="Record whose attachments are uploaded")
    parser.add_argument("--target-id", default=None, help="Record id in the accounting API (default: record_id)")
    parser.add_argument("--root", type=Path, default=None, help="Attachments root directory (default: settings)")
    parser.add_argument(
        "--in-process",
        action="store_true",
        help="Run the conversion gateway in this process instead of calling the deployed service",
    )
    return parser


async def sync_record(
    settings: Settings,
    record_id: str,
    target_id: str | None = None,
    root: Path | None = None,
    in_process: bool = False,
) -> BatchReport:
    source = DirectoryAttachmentSource(root or settings.attachments_root)
    token = settings.accounting_access_token
    token_provider = StaticTokenProvider(token.get_secret_value() if token else None)
    target = AccountingTarget(
        base_url=settings.accounting_api_base,
        organization_id=settings.accounting_organization_id,
        auth_scheme=settings.accounting_auth_scheme,
    )

    if in_process:
        forwarder = HttpForwarder(timeout=settings.forward_timeout_seconds)
        gateway = InProcessGatewayClient(ConversionGateway(forwarder))
        close = forwarder.aclose
    else:
        client = HttpGatewayClient(
            settings.gateway_url,
            settings.api_key.get_secret_value(),
            api_key_header=settings.api_key_header,
        )
        gateway = client
        close = client.aclose

    uc = SyncRecordAttachmentsUseCase(
        source=source,
        gateway=gateway,
        token_provider=token_provider,
        target=target,
    )
    try:
        return await uc.run(record_id, target_record_id=target_id)
    finally:
        await close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        report = asyncio.run(
            sync_record(
                settings,
                args.record_id,
                target_id=args.target_id,
                root=args.root,
                in_process=args.in_process,
            )
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Sync of record {args.record_id} could not start: {e}")
        return 1

    print(json.dumps(report.to_json_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
