"""Template registry — maps NotificationPurpose to template classes.

Each template holds its default subject and body and knows how to fill
them from reservation context data.
"""

from reservations.notification.request import NotificationPurpose
from reservations.templates.cancellation import CancellationTemplate
from reservations.templates.confirmation import ConfirmationTemplate
from reservations.templates.reminder import ReminderTemplate
from reservations.templates.update import UpdateTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationPurpose.CONFIRMATION.value: ConfirmationTemplate,
    NotificationPurpose.CANCELLATION.value: CancellationTemplate,
    NotificationPurpose.UPDATE.value: UpdateTemplate,
    NotificationPurpose.REMINDER.value: ReminderTemplate,
}


def get_template(purpose: str):
    """Look up a template class by purpose string."""
    template_cls = TEMPLATE_REGISTRY.get(purpose)
    if template_cls is None:
        raise ValueError(f"No template registered for notification purpose: {purpose}")
    return template_cls
