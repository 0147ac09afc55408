"""Exceptions subpackage."""

from ci_notify.exceptions.exceptions import (
    MailTransportError,
    MissingRequiredConfigError,
    NotifierError,
    UnknownNotificationTypeError,
)

__all__ = [
    "MailTransportError",
    "MissingRequiredConfigError",
    "NotifierError",
    "UnknownNotificationTypeError",
]
