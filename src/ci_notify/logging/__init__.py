"""Logging subpackage."""

from ci_notify.logging.config import configure_logging

__all__ = ["configure_logging"]
