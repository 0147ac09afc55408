# -*- coding: utf-8 -*-
"""NotificationDispatcher: select the variant, build the email, send it once.

Flow: NOTIFICATION_TYPE -> NotificationKind -> build_request (side files) ->
EmailMessage -> MailTransport.send -> exit status (0 sent, 1 otherwise).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

import structlog

from ci_notify.exceptions import (
    MailTransportError,
    MissingRequiredConfigError,
    UnknownNotificationTypeError,
)
from ci_notify.loaders import build_request
from ci_notify.models.email import EmailMessage
from ci_notify.models.notification import (
    DailyDigestRequest,
    IncidentEscalationRequest,
    NotificationKind,
    NotificationRequest,
)
from ci_notify.rendering import (
    digest_subject,
    incident_subject,
    render_digest_html,
    render_incident_html,
)

if TYPE_CHECKING:  # pragma: no cover
    from ci_notify.config.config import Settings
    from ci_notify.transport.base import MailTransport

EXIT_OK = 0
EXIT_FAILURE = 1

DEFAULT_INCIDENT_SENDER = "Incident Responder <incidents@yourdomain.com>"
DEFAULT_DIGEST_SENDER = "Agent Orchestrator <agents@yourdomain.com>"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NotificationDispatcher:
    """Run one notification end to end and report the process exit status."""

    def __init__(
        self,
        settings: "Settings",
        transport: "MailTransport",
        *,
        now: Callable[[], datetime] = _utc_now,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._now = now
        self._get_logger = get_logger
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def build_message(self, request: NotificationRequest) -> EmailMessage:
        """Render the request into an EmailMessage.

        Raises:
            MissingRequiredConfigError: If RECIPIENT_EMAIL is not set.
        """
        cfg = self._settings.notification
        recipient = cfg.recipient_email
        if not recipient:
            raise MissingRequiredConfigError("RECIPIENT_EMAIL")

        if isinstance(request, IncidentEscalationRequest):
            return EmailMessage(
                from_email=cfg.from_email or DEFAULT_INCIDENT_SENDER,
                to=recipient,
                subject=incident_subject(request.context),
                html=render_incident_html(
                    request.context,
                    repository=cfg.github_repository or "owner/repo",
                    detected_at=self._now(),
                ),
            )
        if isinstance(request, DailyDigestRequest):
            return EmailMessage(
                from_email=cfg.from_email or DEFAULT_DIGEST_SENDER,
                to=recipient,
                subject=digest_subject(self._now()),
                html=render_digest_html(request.context),
            )
        raise TypeError(f"Unsupported notification request: {type(request).__name__}")

    async def run(self, raw_type: str | None) -> int:
        """Dispatch the notification named by raw_type. Returns the exit status."""
        try:
            kind = NotificationKind.parse(raw_type)
        except UnknownNotificationTypeError as exc:
            self._logger.error(
                "notification_type_unknown",
                notification_type=exc.raw_type,
                available_types=NotificationKind.choices(),
            )
            return EXIT_FAILURE

        with structlog.contextvars.bound_contextvars(notification_type=kind.value):
            request = build_request(kind, self._settings, get_logger=self._get_logger)
            try:
                message = self.build_message(request)
            except MissingRequiredConfigError as exc:
                self._logger.error("notification_config_missing", missing=str(exc))
                return EXIT_FAILURE
            return await self._send(message)

    async def _send(self, message: EmailMessage) -> int:
        try:
            result = await self._transport.send(message)
        except MissingRequiredConfigError as exc:
            self._logger.error("notification_config_missing", missing=str(exc))
            return EXIT_FAILURE
        except MailTransportError as exc:
            self._logger.error(
                "notification_send_failed",
                error_type=type(exc.cause or exc).__name__,
                error_message=str(exc.cause or exc),
                http_url=exc.url,
            )
            return EXIT_FAILURE

        if not result.ok:
            self._logger.error("notification_send_rejected", transport_error=result.error)
            return EXIT_FAILURE

        self._logger.info(
            "notification_sent",
            message_id=result.message_id,
            subject=message.subject,
        )
        return EXIT_OK
