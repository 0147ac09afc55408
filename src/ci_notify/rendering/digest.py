"""Daily digest email: subject line and pass-through body."""

from __future__ import annotations

from datetime import date, datetime

from ci_notify.models.digest import DigestContext


def digest_subject(today: date | datetime) -> str:
    day = today.date() if isinstance(today, datetime) else today
    return f"📊 Daily Repository Digest - {day.isoformat()}"


def render_digest_html(context: DigestContext) -> str:
    """The digest is pre-rendered upstream and sent verbatim."""
    return context.html
