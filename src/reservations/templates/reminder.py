"""Reminder template — sent by the reminder scan a few hours before the visit."""

from reservations.notification.request import NotificationPurpose
from reservations.templates.settings import TemplateSettings, fill_placeholders


class ReminderTemplate:
    purpose = NotificationPurpose.REMINDER.value
    subject = "Reminder: Your reservation today at {time}"
    body = (
        "Dear {customerName},\n\n"
        "This is a friendly reminder of your reservation for {numberOfGuests} "
        "guest(s) on {dateTime}.\n\n"
        "See you soon!"
    )

    @classmethod
    def render(cls, context: dict, settings: TemplateSettings | None = None) -> dict:
        settings = settings or TemplateSettings()
        subject, body = settings.texts_for(cls.purpose, cls.subject, cls.body)
        reservation_datetime = context["reservation_datetime"]
        return {
            "subject": fill_placeholders(subject, {"time": settings.format_time(reservation_datetime)}),
            "body": fill_placeholders(
                body,
                {
                    "customerName": context.get("customer_name", ""),
                    "dateTime": settings.format_datetime(reservation_datetime),
                    "numberOfGuests": str(context.get("party_size")),
                },
            ),
        }
