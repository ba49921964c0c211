"""Update template — sent when a reservation is rescheduled."""

from reservations.notification.request import NotificationPurpose
from reservations.templates.settings import TemplateSettings, fill_placeholders


class UpdateTemplate:
    purpose = NotificationPurpose.UPDATE.value
    subject = "Reservation Updated - #{reservationId}"
    body = (
        "Dear {customerName},\n\n"
        "Your reservation #{reservationId} has been updated. "
        "It is now for {numberOfGuests} guest(s) on {dateTime}.\n\n"
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
