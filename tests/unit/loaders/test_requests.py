# -*- coding: utf-8 -*-
"""Unit tests for context and request building."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from ci_notify.config import Settings
from ci_notify.loaders.requests import build_incident_context, build_request
from ci_notify.models.digest import DIGEST_PLACEHOLDER
from ci_notify.models.incident import Diagnosis, IncidentContext
from ci_notify.models.notification import (
    DailyDigestRequest,
    IncidentEscalationRequest,
    NotificationKind,
)


def test_build_incident_context_applies_defaults(
    settings_factory: Callable[..., Settings],
) -> None:
    settings = settings_factory()

    context = build_incident_context(settings.notification, Diagnosis.empty())

    assert context == IncidentContext(
        incident_id="Unknown",
        severity="medium",
        error="Unknown error",
        root_cause="Under investigation",
    )


def test_build_incident_context_treats_empty_env_values_as_unset(
    settings_factory: Callable[..., Settings],
) -> None:
    settings = settings_factory(incident_id="", severity="", error="", root_cause="")

    context = build_incident_context(settings.notification, Diagnosis.empty())

    assert context.incident_id == "Unknown"
    assert context.severity == "medium"
    assert context.error == "Unknown error"
    assert context.root_cause == "Under investigation"


def test_build_incident_context_root_cause_prefers_env_over_diagnosis(
    settings_factory: Callable[..., Settings],
) -> None:
    settings = settings_factory(root_cause="Env root cause")

    context = build_incident_context(
        settings.notification, Diagnosis(root_cause="Diagnosis root cause")
    )

    assert context.root_cause == "Env root cause"


def test_build_incident_context_root_cause_falls_back_to_diagnosis(
    settings_factory: Callable[..., Settings],
) -> None:
    settings = settings_factory()

    context = build_incident_context(
        settings.notification, Diagnosis(root_cause="Diagnosis root cause")
    )

    assert context.root_cause == "Diagnosis root cause"


def test_build_incident_context_keeps_severity_case(
    settings_factory: Callable[..., Settings],
) -> None:
    settings = settings_factory(severity="Critical")

    context = build_incident_context(settings.notification, Diagnosis.empty())

    assert context.severity == "Critical"


def test_build_request_incident_reads_diagnosis_file(
    settings_factory: Callable[..., Settings],
    write_diagnosis: Callable[[Any], Path],
) -> None:
    path = write_diagnosis({"affectedFiles": ["a.js"], "rootCause": "Bad deploy"})
    settings = settings_factory(diagnosis_file=str(path), incident_id="INC-1", severity="low")

    request = build_request(NotificationKind.INCIDENT_ESCALATION, settings)

    assert isinstance(request, IncidentEscalationRequest)
    assert request.kind is NotificationKind.INCIDENT_ESCALATION
    assert request.context.incident_id == "INC-1"
    assert request.context.root_cause == "Bad deploy"
    assert request.context.diagnosis.affected_files == ("a.js",)


def test_build_request_incident_with_broken_diagnosis_still_builds(
    settings_factory: Callable[..., Settings],
    write_diagnosis: Callable[[Any], Path],
) -> None:
    path = write_diagnosis("]]")
    settings = settings_factory(diagnosis_file=str(path))

    request = build_request(NotificationKind.INCIDENT_ESCALATION, settings)

    assert isinstance(request, IncidentEscalationRequest)
    assert request.context.diagnosis == Diagnosis.empty()


def test_build_request_digest_without_file_uses_placeholder(
    settings_factory: Callable[..., Settings],
) -> None:
    request = build_request(NotificationKind.DAILY_DIGEST, settings_factory())

    assert isinstance(request, DailyDigestRequest)
    assert request.context.html == DIGEST_PLACEHOLDER


def test_build_request_digest_reads_file(
    settings_factory: Callable[..., Settings],
    tmp_path: Path,
) -> None:
    path = tmp_path / "custom-digest.html"
    path.write_text("<p>digest</p>", encoding="utf-8")

    request = build_request(
        NotificationKind.DAILY_DIGEST, settings_factory(digest_file=str(path))
    )

    assert isinstance(request, DailyDigestRequest)
    assert request.context.html == "<p>digest</p>"
