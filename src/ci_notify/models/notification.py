# -*- coding: utf-8 -*-
"""Notification variants: the closed set of kinds and their request payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ci_notify.exceptions import UnknownNotificationTypeError
from ci_notify.models.digest import DigestContext
from ci_notify.models.incident import IncidentContext


class NotificationKind(str, Enum):
    """Notification variant selected once at startup by NOTIFICATION_TYPE."""

    INCIDENT_ESCALATION = "incident-escalation"
    """Production incident email built from env metadata and diagnosis.json."""
    DAILY_DIGEST = "daily-digest"
    """Pre-rendered digest HTML passed through verbatim."""

    @classmethod
    def parse(cls, raw: str | None) -> NotificationKind:
        """Return the kind for raw, or raise UnknownNotificationTypeError (also for None/empty)."""
        try:
            return cls(raw)
        except ValueError:
            raise UnknownNotificationTypeError(raw) from None

    @classmethod
    def choices(cls) -> list[str]:
        return [kind.value for kind in cls]


@dataclass(frozen=True, slots=True)
class IncidentEscalationRequest:
    """Request to send a production incident email."""

    kind: ClassVar[NotificationKind] = NotificationKind.INCIDENT_ESCALATION

    context: IncidentContext


@dataclass(frozen=True, slots=True)
class DailyDigestRequest:
    """Request to send the daily repository digest."""

    kind: ClassVar[NotificationKind] = NotificationKind.DAILY_DIGEST

    context: DigestContext


NotificationRequest = IncidentEscalationRequest | DailyDigestRequest
