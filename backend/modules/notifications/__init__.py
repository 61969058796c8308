"""
Notifications module.

Transactional email for lifecycle events and the announcement feed.

Public API:
- INotifier: Fire-and-forget email hand-off used by other modules
- IMailer: Delivery transport
- QueuedNotifier: Queue-backed INotifier with retry policy
- EmailMessage: A rendered email
"""

from .interfaces import IMailer, INotifier
from .models import EmailMessage, Announcement, AnnouncementType
from .dispatcher import QueuedNotifier
from .mailer import ResendMailer, LoggingMailer
from .exceptions import MailDeliveryError

__all__ = [
    # Interfaces
    "IMailer",
    "INotifier",
    # Models
    "EmailMessage",
    "Announcement",
    "AnnouncementType",
    # Implementations
    "QueuedNotifier",
    "ResendMailer",
    "LoggingMailer",
    # Exceptions
    "MailDeliveryError",
]
