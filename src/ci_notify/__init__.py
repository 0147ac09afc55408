"""ci-notify: incident escalation and daily digest emails for CI pipelines."""

from ci_notify.config import get_settings
from ci_notify.dispatcher import NotificationDispatcher
from ci_notify.models import EmailMessage, NotificationKind
from ci_notify.rendering import escape_html
from ci_notify.transport import ResendTransport

__version__ = "0.1.0"
__all__ = [
    "EmailMessage",
    "NotificationDispatcher",
    "NotificationKind",
    "ResendTransport",
    "escape_html",
    "get_settings",
]
