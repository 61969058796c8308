"""
Notifications module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class MailDeliveryError(ExternalServiceError):
    """Raised by a mailer when the email provider rejects or fails a send."""

    def __init__(self, recipient: str, original_error: Optional[str] = None):
        super().__init__(
            f"Failed to send email to {recipient}",
            service="email",
            code="MAIL_DELIVERY_FAILED",
            details={"recipient": recipient, "original_error": original_error},
        )
