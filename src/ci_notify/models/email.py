# -*- coding: utf-8 -*-
"""Email payload handed to the transport and the transport's answer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """A single-recipient HTML email."""

    from_email: str
    to: str
    subject: str
    html: str

    def to_payload(self) -> dict[str, Any]:
        """Resend POST /emails body."""
        return {
            "from": self.from_email,
            "to": [self.to],
            "subject": self.subject,
            "html": self.html,
        }


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of one send request.

    Mirrors the provider's { data, error } answer: error is set when the
    provider rejected the request, message_id when it accepted it.
    """

    message_id: str | None = None
    error: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def accepted(cls, message_id: str | None) -> SendResult:
        return cls(message_id=message_id)

    @classmethod
    def rejected(cls, error: dict[str, Any]) -> SendResult:
        return cls(error=error)
