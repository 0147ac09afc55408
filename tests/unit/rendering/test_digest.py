"""Unit tests for the digest renderer."""

from __future__ import annotations

from datetime import date, datetime

from ci_notify.models.digest import DIGEST_PLACEHOLDER, DigestContext
from ci_notify.rendering.digest import digest_subject, render_digest_html


def test_render_digest_html_passes_content_through_unescaped() -> None:
    raw = "<h1>Digest</h1><p>3 PRs merged & 1 reverted</p>"
    assert render_digest_html(DigestContext(html=raw)) == raw


def test_render_digest_html_default_is_placeholder() -> None:
    assert render_digest_html(DigestContext()) == DIGEST_PLACEHOLDER


def test_digest_subject_uses_calendar_date(now_utc: datetime) -> None:
    assert digest_subject(now_utc) == "📊 Daily Repository Digest - 2026-02-13"
    assert digest_subject(date(2026, 1, 5)) == "📊 Daily Repository Digest - 2026-01-05"
