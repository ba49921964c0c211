"""What gets sent, to whom, and through which channel."""

from dataclasses import dataclass
from enum import Enum


class NotificationPurpose(Enum):
    CONFIRMATION = "confirmation"
    CANCELLATION = "cancellation"
    UPDATE = "update"
    REMINDER = "reminder"


@dataclass(frozen=True)
class NotificationRequest:
    """A rendered message addressed to one customer.

    ``channel`` holds a ``NotificationChannel`` value. ``subject`` is ignored
    by the SMS transport.
    """

    channel: str
    email: str
    phone_number: str
    subject: str
    body: str

    @classmethod
    def for_reservation(cls, source, rendered: dict) -> "NotificationRequest":
        """Address ``rendered`` content using the contact details on ``source``.

        ``source`` is a reservation or any of its lifecycle events.
        """
        return cls(
            channel=source.notification_channel,
            email=source.email,
            phone_number=source.phone_number,
            subject=rendered["subject"],
            body=rendered["body"],
        )
