"""Confirmation template — sent when a reservation is booked."""

from reservations.notification.request import NotificationPurpose
from reservations.templates.settings import TemplateSettings, fill_placeholders


class ConfirmationTemplate:
    purpose = NotificationPurpose.CONFIRMATION.value
    subject = "Reservation Confirmed - #{reservationId}"
    body = (
        "Dear {customerName},\n\n"
        "Your reservation #{reservationId} is confirmed for {numberOfGuests} "
        "guest(s) on {dateTime}.\n\n"
        "We look forward to welcoming you!"
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
                    "dateTime": settings.format_datetime(context["reservation_datetime"]),
                    "numberOfGuests": str(context.get("party_size")),
                },
            ),
        }
