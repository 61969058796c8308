"""
Email transports.

- ResendMailer: delivers through the Resend API
- LoggingMailer: development fallback when no API key is configured
"""

import logging

import resend
from fastapi.concurrency import run_in_threadpool

from .exceptions import MailDeliveryError
from .models import EmailMessage

logger = logging.getLogger(__name__)


class ResendMailer:
    """Mailer backed by the Resend HTTP API."""

    def __init__(self, api_key: str, sender: str):
        resend.api_key = api_key
        self._sender = sender

    async def send(self, message: EmailMessage) -> None:
        params = {
            "from": self._sender,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        try:
            # Emails.send is sync; run it in threadpool so we can await safely
            await run_in_threadpool(resend.Emails.send, params)
        except Exception as e:
            raise MailDeliveryError(message.to, str(e)) from e
        logger.info("Email sent to %s: %s", message.to, message.subject)


class LoggingMailer:
    """Mailer that only logs. Bodies are not logged since they may hold codes."""

    async def send(self, message: EmailMessage) -> None:
        logger.info(
            "Email delivery disabled (no RESEND_API_KEY); would send %r to %s",
            message.subject,
            message.to,
        )
