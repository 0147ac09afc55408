"""Custom exceptions for notification dispatch and mail delivery."""

from __future__ import annotations


class NotifierError(Exception):
    """Base exception for ci-notify errors."""

    pass


class MissingRequiredConfigError(NotifierError):
    """Raised when a required configuration value is missing."""

    pass


class UnknownNotificationTypeError(NotifierError):
    """Raised when NOTIFICATION_TYPE does not name a known variant."""

    def __init__(self, raw_type: str | None) -> None:
        super().__init__(f"Unknown notification type: {raw_type!r}")
        self.raw_type = raw_type


class MailTransportError(NotifierError):
    """Raised when the mail transport cannot complete a send request."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause
