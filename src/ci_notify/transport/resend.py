# -*- coding: utf-8 -*-
"""Resend transactional email transport (https://resend.com), one POST per send."""

from __future__ import annotations

import asyncio
import json
import uuid
from typing import Any, Callable, Optional

import aiohttp
import structlog
from structlog.contextvars import bound_contextvars

from ci_notify.config import Settings
from ci_notify.exceptions import MailTransportError, MissingRequiredConfigError
from ci_notify.models.email import EmailMessage, SendResult


class ResendTransport:
    """Send email via the Resend REST API.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager. No retries: a failed send is final.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            settings: Configuration (API key, host, timeout).
            session: Optional shared aiohttp session. If None, the transport
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def emails_url(self) -> str:
        return f"{self._settings.resend.api_host.rstrip('/')}/emails"

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.resend.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this transport owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> ResendTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        api_key = self._settings.resend.api_key
        if not api_key:
            raise MissingRequiredConfigError("RESEND_API_KEY")
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, message: EmailMessage) -> SendResult:
        """POST the message to /emails.

        Returns:
            SendResult.accepted(id) on 2xx, SendResult.rejected(error) on 4xx/5xx.

        Raises:
            MissingRequiredConfigError: If RESEND_API_KEY is not set.
            MailTransportError: On connection errors and timeouts.
        """
        headers = self._headers()
        url = self.emails_url
        request_id = uuid.uuid4().hex[:12]

        with bound_contextvars(http_url=url, http_request_id=request_id):
            try:
                session = await self._get_session()
                async with session.post(
                    url, json=message.to_payload(), headers=headers
                ) as response:
                    body = await _read_body(response)
                    if response.status >= 400:
                        error = _error_from_body(response.status, body)
                        self._logger.warning(
                            "resend_request_rejected",
                            http_status_code=response.status,
                            resend_error_name=error.get("name"),
                        )
                        return SendResult.rejected(error)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.error(
                    "resend_request_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise MailTransportError(
                    f"POST failed: {url}",
                    url=url,
                    status_code=getattr(e, "status", None),
                    cause=e,
                ) from e

        message_id = body.get("id") if isinstance(body, dict) else None
        self._logger.debug(
            "resend_request_accepted",
            resend_message_id=message_id,
            http_status_code=response.status,
        )
        return SendResult.accepted(message_id)


async def _read_body(response: aiohttp.ClientResponse) -> Any:
    """Parse the response body as JSON regardless of content type; fall back to text."""
    text = await response.text(errors="replace")
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def _error_from_body(status: int, body: Any) -> dict[str, Any]:
    """Normalize a Resend error body ({statusCode, name, message}) or a raw text body."""
    if isinstance(body, dict):
        return {
            "statusCode": body.get("statusCode", status),
            "name": body.get("name"),
            "message": body.get("message"),
        }
    return {"statusCode": status, "name": None, "message": body}
