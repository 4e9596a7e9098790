"""Run the gateway API with uvicorn."""

from __future__ import annotations

import uvicorn
from loguru import logger

from billbridge.cli import configure_logging
from billbridge.infrastructure import get_settings


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info(f"{settings.app_name} listening on {settings.api_host}:{settings.api_port}")
    logger.info("=" * 60)

    uvicorn.run(
        "billbridge.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
