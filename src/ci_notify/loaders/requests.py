# -*- coding: utf-8 -*-
"""Build a NotificationRequest for the selected kind from settings and side files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

import structlog

from ci_notify.loaders.side_files import load_diagnosis, load_digest
from ci_notify.models.digest import DigestContext
from ci_notify.models.incident import (
    DEFAULT_ERROR,
    DEFAULT_INCIDENT_ID,
    DEFAULT_ROOT_CAUSE,
    DEFAULT_SEVERITY,
    Diagnosis,
    IncidentContext,
)
from ci_notify.models.notification import (
    DailyDigestRequest,
    IncidentEscalationRequest,
    NotificationKind,
    NotificationRequest,
)

if TYPE_CHECKING:  # pragma: no cover
    from ci_notify.config.config import NotificationSettings, Settings


def build_incident_context(
    settings: "NotificationSettings",
    diagnosis: Diagnosis,
) -> IncidentContext:
    """Merge env values with diagnosis fallbacks. Empty env values count as unset."""
    return IncidentContext(
        incident_id=settings.incident_id or DEFAULT_INCIDENT_ID,
        severity=settings.severity or DEFAULT_SEVERITY,
        error=settings.error or DEFAULT_ERROR,
        root_cause=settings.root_cause or diagnosis.root_cause or DEFAULT_ROOT_CAUSE,
        diagnosis=diagnosis,
    )


def build_request(
    kind: NotificationKind,
    settings: "Settings",
    *,
    get_logger: Callable[[str], Any] = structlog.get_logger,
) -> NotificationRequest:
    """Gather the inputs for kind. Side-file problems are absorbed into defaults."""
    cfg = settings.notification
    if kind is NotificationKind.INCIDENT_ESCALATION:
        loaded = load_diagnosis(cfg.diagnosis_file, get_logger=get_logger)
        return IncidentEscalationRequest(
            context=build_incident_context(cfg, loaded.value),
        )
    if kind is NotificationKind.DAILY_DIGEST:
        digest = load_digest(cfg.digest_file, get_logger=get_logger)
        return DailyDigestRequest(context=DigestContext(html=digest.value))
    raise ValueError(f"Unhandled notification kind: {kind!r}")
