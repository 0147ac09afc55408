# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from ci_notify.config import NotificationSettings, ResendSettings, Settings
from ci_notify.models.email import EmailMessage, SendResult


class FakeTransport:
    """In-memory MailTransport recording every message it is asked to send."""

    def __init__(
        self,
        result: SendResult | None = None,
        exc: Exception | None = None,
    ) -> None:
        self.result = result or SendResult.accepted("msg_123")
        self.exc = exc
        self.sent: list[EmailMessage] = []
        self.closed = False

    async def send(self, message: EmailMessage) -> SendResult:
        self.sent.append(message)
        if self.exc is not None:
            raise self.exc
        return self.result

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings_factory(tmp_path: Path) -> Callable[..., Settings]:
    """Build Settings isolated from the real environment.

    Every notification field is passed explicitly so CI variables such as
    GITHUB_REPOSITORY on the test runner cannot leak in. Side-file paths
    default to (missing) files inside tmp_path.
    """

    def _build(**overrides: Any) -> Settings:
        notification = NotificationSettings(
            _env_file=None,
            notification_type=overrides.pop("notification_type", None),
            diagnosis_file=overrides.pop("diagnosis_file", str(tmp_path / "diagnosis.json")),
            digest_file=overrides.pop("digest_file", str(tmp_path / "daily-digest.html")),
            incident_id=overrides.pop("incident_id", None),
            severity=overrides.pop("severity", None),
            error=overrides.pop("error", None),
            root_cause=overrides.pop("root_cause", None),
            from_email=overrides.pop("from_email", None),
            recipient_email=overrides.pop("recipient_email", "oncall@example.com"),
            github_repository=overrides.pop("github_repository", "acme/widgets"),
        )
        resend = ResendSettings(
            _env_file=None,
            resend_api_key=overrides.pop("api_key", "re_test_key"),
            api_host=overrides.pop("api_host", "https://api.resend.test"),
            timeout_seconds=overrides.pop("timeout_seconds", 15.0),
        )
        if overrides:
            raise TypeError(f"Unknown settings overrides: {sorted(overrides)}")
        return Settings(_env_file=None, notification=notification, resend=resend)

    return _build


@pytest.fixture
def write_diagnosis(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a diagnosis.json (object or raw text) into tmp_path and return its path."""

    def _write(content: Any) -> Path:
        path = tmp_path / "diagnosis.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def transport_factory() -> Callable[..., FakeTransport]:
    """Build a FakeTransport answering with result, or raising exc."""
    return FakeTransport


@pytest.fixture
def fake_transport(transport_factory: Callable[..., FakeTransport]) -> FakeTransport:
    """Transport that accepts every message with id msg_123."""
    return transport_factory()
