"""Dependency injection."""

from ci_notify.DI.container import Container

__all__ = ["Container"]
