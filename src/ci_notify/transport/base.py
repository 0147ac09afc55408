"""Mail transport interface."""

from __future__ import annotations

from typing import Protocol

from ci_notify.models.email import EmailMessage, SendResult


class MailTransport(Protocol):
    """Deliver one EmailMessage through an external provider."""

    async def send(self, message: EmailMessage) -> SendResult:
        """Submit message once.

        Returns:
            SendResult with message_id on acceptance, or error when the provider rejected it.

        Raises:
            MailTransportError: If the provider could not be reached or answered unusably.
            MissingRequiredConfigError: If the transport is not configured.
        """
        ...
