# -*- coding: utf-8 -*-
"""Incident models: diagnosis side-file DTO and the incident context rendered into email.

diagnosis.json is produced by an upstream analysis step. Every key is optional;
Diagnosis keeps the payload in snake_case and never mixes in env values.
IncidentContext is the merged view (env first, diagnosis as fallback).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_INCIDENT_ID = "Unknown"
DEFAULT_SEVERITY = "medium"
DEFAULT_ERROR = "Unknown error"
DEFAULT_ROOT_CAUSE = "Under investigation"
DEFAULT_FIX_DESCRIPTION = "Manual investigation required"


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _text_items(value: Any) -> tuple[str, ...]:
    """Stringify list items; anything that is not a list counts as empty."""
    if not isinstance(value, list):
        return ()
    return tuple(str(item) for item in value if item is not None)


@dataclass(frozen=True, slots=True)
class Diagnosis:
    """Structured root-cause data from diagnosis.json. Empty when the file is absent."""

    root_cause: str | None = None
    analysis: str | None = None
    affected_files: tuple[str, ...] = ()
    """Ordered as in the file."""
    fix_description: str | None = None
    verification_steps: tuple[str, ...] = ()
    """Ordered as in the file."""

    @classmethod
    def empty(cls) -> Diagnosis:
        return cls()

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> Diagnosis:
        """Build from the raw diagnosis.json object (camelCase)."""
        return cls(
            root_cause=_optional_text(response.get("rootCause")),
            analysis=_optional_text(response.get("analysis")),
            affected_files=_text_items(response.get("affectedFiles")),
            fix_description=_optional_text(response.get("fixDescription")),
            verification_steps=_text_items(response.get("verificationSteps")),
        )


@dataclass(frozen=True, slots=True)
class IncidentContext:
    """Everything the incident email needs, with defaults already applied."""

    incident_id: str = DEFAULT_INCIDENT_ID
    severity: str = DEFAULT_SEVERITY
    """Free string. critical/high/medium/low are styled; anything else uses the default style."""
    error: str = DEFAULT_ERROR
    root_cause: str = DEFAULT_ROOT_CAUSE
    diagnosis: Diagnosis = field(default_factory=Diagnosis.empty)

    @property
    def fix_description(self) -> str:
        return self.diagnosis.fix_description or DEFAULT_FIX_DESCRIPTION
