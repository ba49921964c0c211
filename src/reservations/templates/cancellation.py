"""Cancellation template — sent when a reservation is cancelled."""

from reservations.notification.request import NotificationPurpose
from reservations.templates.settings import TemplateSettings, fill_placeholders


class CancellationTemplate:
    purpose = NotificationPurpose.CANCELLATION.value
    subject = "Reservation Cancelled - #{reservationId}"
    body = (
        "Dear {customerName},\n\n"
        "Your reservation #{reservationId} has been cancelled.\n\n"
        "We hope to see you another time."
    )

    @classmethod
    def render(cls, context: dict, settings: TemplateSettings | None = None) -> dict:
        settings = settings or TemplateSettings()
        subject, body = settings.texts_for(cls.purpose, cls.subject, cls.body)
        reservation_id = str(context.get("reservation_id", "N/A"))
        return {
            "subject": fill_placeholders(subject, {"reservationId": reservation_id}),
            "body": fill_placeholders(
                body,
                {
                    "customerName": context.get("customer_name", ""),
                    "reservationId": reservation_id,
                },
            ),
        }
