"""Email rendering: escaping, severity styles and per-kind documents."""

from ci_notify.rendering.digest import digest_subject, render_digest_html
from ci_notify.rendering.escape import escape_html
from ci_notify.rendering.incident import (
    format_detected_at,
    incident_subject,
    render_incident_html,
)
from ci_notify.rendering.severity import (
    DEFAULT_SEVERITY_STYLE,
    SEVERITY_STYLES,
    SeverityStyle,
    severity_style,
)

__all__ = [
    "DEFAULT_SEVERITY_STYLE",
    "SEVERITY_STYLES",
    "SeverityStyle",
    "digest_subject",
    "escape_html",
    "format_detected_at",
    "incident_subject",
    "render_digest_html",
    "render_incident_html",
    "severity_style",
]
