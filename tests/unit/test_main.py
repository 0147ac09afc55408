# -*- coding: utf-8 -*-
"""Unit tests for the process entry point."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from dependency_injector import providers

from ci_notify import main as main_module
from ci_notify.DI import Container
from ci_notify.config import Settings
from ci_notify.models.email import SendResult


def _container(settings: Settings, transport: Any) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    container.mail_transport.override(providers.Object(transport))
    return container


async def test_run_returns_0_and_closes_transport(
    settings_factory: Callable[..., Settings],
    fake_transport: Any,
) -> None:
    settings = settings_factory(notification_type="daily-digest")

    status = await main_module.run(_container(settings, fake_transport))

    assert status == 0
    assert len(fake_transport.sent) == 1
    assert fake_transport.closed is True


async def test_run_unknown_type_returns_1_without_sending(
    settings_factory: Callable[..., Settings],
    fake_transport: Any,
) -> None:
    settings = settings_factory(notification_type="weekly-digest")

    status = await main_module.run(_container(settings, fake_transport))

    assert status == 1
    assert fake_transport.sent == []
    assert fake_transport.closed is True


async def test_run_returns_1_on_rejected_send(
    settings_factory: Callable[..., Settings],
    transport_factory: Callable[..., Any],
) -> None:
    transport = transport_factory(result=SendResult.rejected({"statusCode": 500}))
    settings = settings_factory(notification_type="incident-escalation")

    status = await main_module.run(_container(settings, transport))

    assert status == 1


def test_main_exits_with_run_status(
    monkeypatch: pytest.MonkeyPatch,
    settings_factory: Callable[..., Settings],
) -> None:
    settings = settings_factory(notification_type="nope")

    async def _fake_run(container: Any = None) -> int:
        return 1

    configured: list[Settings] = []
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", configured.append)
    monkeypatch.setattr(main_module, "run", _fake_run)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert configured == [settings]
