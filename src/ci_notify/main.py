# -*- coding: utf-8 -*-
"""
Entry point for the CI notification dispatcher.

Orchestrates: settings, logging, container, one dispatch, transport cleanup, exit status.
Everything is driven by environment variables; there are no CLI flags.

Run with: python -m ci_notify.main  (or the ci-notify console script)
"""
from __future__ import annotations

import asyncio
import sys

import structlog

from ci_notify.DI import Container
from ci_notify.config import get_settings
from ci_notify.logging.config import configure_logging


async def run(container: Container | None = None) -> int:
    """Dispatch the configured notification. Returns the process exit status."""
    container = container or Container()
    settings = container.config()
    logger = structlog.get_logger("main")

    dispatcher = container.notification_dispatcher()
    transport = container.mail_transport()
    try:
        return await dispatcher.run(settings.notification.notification_type)
    finally:
        await transport.aclose()
        logger.debug("main_shutdown_complete")


def main() -> None:
    configure_logging(get_settings())
    sys.exit(asyncio.run(run()))


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
