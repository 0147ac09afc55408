# -*- coding: utf-8 -*-
"""Incident escalation email: subject line and full HTML document.

Every free-text value goes through escape_html before interpolation; the
diagnosis comes from an upstream analysis step and is not trusted markup.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from ci_notify.models.incident import IncidentContext
from ci_notify.rendering.escape import escape_html
from ci_notify.rendering.severity import severity_style

_STYLE = """\
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; }
    .header { background: %(color)s; color: white; padding: 20px; border-radius: 8px 8px 0 0; }
    .header h1 { margin: 0 0 8px 0; font-size: 20px; }
    .content { background: #f9fafb; padding: 20px; border: 1px solid #e5e7eb; border-top: none; border-radius: 0 0 8px 8px; }
    .section { margin: 16px 0; padding: 16px; background: white; border-radius: 8px; border: 1px solid #e5e7eb; }
    .section h3 { margin-top: 0; color: #374151; font-size: 14px; text-transform: uppercase; letter-spacing: 0.5px; }
    .error-box { background: #fef2f2; border: 1px solid #fecaca; padding: 12px; border-radius: 4px; font-family: monospace; font-size: 13px; overflow-x: auto; white-space: pre-wrap; word-break: break-all; }
    .action-button { display: inline-block; background: #2563eb; color: white; padding: 12px 24px; border-radius: 6px; text-decoration: none; margin-top: 16px; font-weight: 500; }
    .meta { color: rgba(255,255,255,0.9); font-size: 14px; }
    ul { margin: 0; padding-left: 20px; }
    li { margin: 4px 0; }
    code { background: #f3f4f6; padding: 2px 6px; border-radius: 4px; font-size: 13px; }"""

ACTIONS_URL_TEMPLATE = "https://github.com/{repository}/actions"


def format_detected_at(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix (2026-01-02T03:04:05.678Z)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def incident_subject(context: IncidentContext) -> str:
    style = severity_style(context.severity)
    return (
        f"{style.emoji} [{context.severity.upper()}] "
        f"Production Incident: {context.incident_id}"
    )


def render_incident_html(
    context: IncidentContext,
    *,
    repository: str,
    detected_at: datetime,
) -> str:
    """Render the complete incident email document."""
    style = severity_style(context.severity)
    diagnosis = context.diagnosis

    root_cause_body = [f"<p><strong>{escape_html(context.root_cause)}</strong></p>"]
    if diagnosis.analysis:
        root_cause_body.append(f"<p>{escape_html(diagnosis.analysis)}</p>")

    action_body = [f"<p>{escape_html(context.fix_description)}</p>"]
    if diagnosis.verification_steps:
        action_body.append("<p><strong>Verification steps:</strong></p>")
        action_body.append(_list("ol", diagnosis.verification_steps))

    sections = [
        _section("Error", [f'<div class="error-box">{escape_html(context.error)}</div>']),
        _section("Root Cause Analysis", root_cause_body),
    ]
    if diagnosis.affected_files:
        sections.append(
            _section("Affected Files", [_list("ul", diagnosis.affected_files, code=True)])
        )
    sections.append(_section("Recommended Action", action_body))

    actions_url = ACTIONS_URL_TEMPLATE.format(repository=escape_html(repository))
    severity_label = escape_html(context.severity.upper())

    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        "  <style>",
        _STYLE % {"color": style.color},
        "  </style>",
        "</head>",
        "<body>",
        '  <div class="header">',
        f"    <h1>{style.emoji} Production Incident: {escape_html(context.incident_id)}</h1>",
        f'    <p class="meta">Severity: {severity_label} | '
        f"Detected: {format_detected_at(detected_at)}</p>",
        "  </div>",
        '  <div class="content">',
        *sections,
        f'    <a href="{actions_url}" class="action-button">View in GitHub Actions</a>',
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def _section(heading: str, body: list[str]) -> str:
    """Format a content section with an uppercase heading."""
    inner = "\n".join(f"      {line}" for line in body)
    return (
        '    <div class="section">\n'
        f"      <h3>{heading}</h3>\n"
        f"{inner}\n"
        "    </div>"
    )


def _list(tag: str, items: Sequence[str], *, code: bool = False) -> str:
    """Format an ordered (ol) or unordered (ul) list of escaped items."""
    if code:
        rows = "".join(f"<li><code>{escape_html(item)}</code></li>" for item in items)
    else:
        rows = "".join(f"<li>{escape_html(item)}</li>" for item in items)
    return f"<{tag}>{rows}</{tag}>"
