# -*- coding: utf-8 -*-
"""Domain models."""

from ci_notify.models.digest import DIGEST_PLACEHOLDER, DigestContext
from ci_notify.models.email import EmailMessage, SendResult
from ci_notify.models.incident import Diagnosis, IncidentContext
from ci_notify.models.load_result import LoadResult
from ci_notify.models.notification import (
    DailyDigestRequest,
    IncidentEscalationRequest,
    NotificationKind,
    NotificationRequest,
)

__all__ = [
    "DIGEST_PLACEHOLDER",
    "DailyDigestRequest",
    "Diagnosis",
    "DigestContext",
    "EmailMessage",
    "IncidentContext",
    "IncidentEscalationRequest",
    "LoadResult",
    "NotificationKind",
    "NotificationRequest",
    "SendResult",
]
