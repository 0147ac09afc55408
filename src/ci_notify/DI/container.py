# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from ci_notify.config import get_settings
from ci_notify.dispatcher import NotificationDispatcher
from ci_notify.transport.resend import ResendTransport


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, mail transport and dispatcher."""

    config = providers.Callable(get_settings)

    mail_transport = providers.Singleton(
        ResendTransport,
        settings=config,
    )

    notification_dispatcher = providers.Singleton(
        NotificationDispatcher,
        settings=config,
        transport=mail_transport,
    )
