"""
Notifications module interface.

Lifecycle services depend on INotifier only. Delivery happens later,
outside the request, through an IMailer.
"""

from typing import Protocol, runtime_checkable

from .models import EmailMessage


@runtime_checkable
class IMailer(Protocol):
    """Transport that actually delivers an email."""

    async def send(self, message: EmailMessage) -> None:
        """
        Deliver a single message.

        Raises:
            MailDeliveryError: If the transport rejects the message
        """
        ...


@runtime_checkable
class INotifier(Protocol):
    """
    Fire-and-forget hand-off for transactional email.

    notify() must return immediately and must never raise because
    of a delivery problem.
    """

    def notify(self, message: EmailMessage) -> None:
        """Queue a message for best-effort delivery."""
        ...
