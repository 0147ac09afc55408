"""Mail transport."""

from ci_notify.transport.base import MailTransport
from ci_notify.transport.resend import ResendTransport

__all__ = ["MailTransport", "ResendTransport"]
