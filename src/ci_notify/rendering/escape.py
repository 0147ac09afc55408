"""HTML escaping for untrusted text interpolated into email markup."""

from __future__ import annotations

from typing import Any

# Ampersand must stay first so entities added by later pairs are not re-escaped.
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: Any) -> str:
    """Return text with & < > " ' replaced by entities. None or empty gives ""."""
    if text is None or text == "":
        return ""
    escaped = str(text)
    for raw, entity in _REPLACEMENTS:
        escaped = escaped.replace(raw, entity)
    return escaped
