"""Daily digest context."""

from __future__ import annotations

from dataclasses import dataclass

DIGEST_PLACEHOLDER = "<p>No digest content available</p>"


@dataclass(frozen=True, slots=True)
class DigestContext:
    """Raw digest HTML. Trusted content: sent as-is, never escaped."""

    html: str = DIGEST_PLACEHOLDER
