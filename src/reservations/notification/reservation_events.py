"""Reservation lifecycle notifications.

Reacts to ReservationCreated, ReservationUpdated and ReservationCancelled
by rendering the matching template and sending it through the customer's
preferred channel. Nothing raised here reaches the operation that
published the event: the reservation change is already committed.
"""

import structlog
from protean.utils.mixins import handle

from reservations.domain import reservations
from reservations.notification.dispatch import DeliveryFailure, send_notification
from reservations.notification.request import NotificationPurpose, NotificationRequest
from reservations.reservation.events import (
    ReservationCancelled,
    ReservationCreated,
    ReservationUpdated,
)
from reservations.reservation.reservation import Reservation
from reservations.templates import get_template
from reservations.templates.settings import current_template_settings

logger = structlog.get_logger(__name__)


@reservations.event_handler(part_of=Reservation)
class ReservationNotificationsHandler:
    """Sends confirmation, update and cancellation notices."""

    @handle(ReservationCreated)
    def on_reservation_created(self, event: ReservationCreated) -> None:
        _notify(
            NotificationPurpose.CONFIRMATION,
            event,
            {
                "reservation_id": event.reservation_id,
                "customer_name": event.customer_name,
                "reservation_datetime": event.reservation_datetime,
                "party_size": event.party_size,
            },
        )

    @handle(ReservationUpdated)
    def on_reservation_updated(self, event: ReservationUpdated) -> None:
        _notify(
            NotificationPurpose.UPDATE,
            event,
            {
                "reservation_id": event.reservation_id,
                "customer_name": event.customer_name,
                "reservation_datetime": event.new_reservation_datetime,
                "party_size": event.new_party_size,
            },
        )

    @handle(ReservationCancelled)
    def on_reservation_cancelled(self, event: ReservationCancelled) -> None:
        _notify(
            NotificationPurpose.CANCELLATION,
            event,
            {
                "reservation_id": event.reservation_id,
                "customer_name": event.customer_name,
            },
        )


def _notify(purpose: NotificationPurpose, event, context: dict) -> None:
    """Render and send one notification, logging instead of raising on failure."""
    try:
        template = get_template(purpose.value)
        rendered = template.render(context, current_template_settings())
        send_notification(NotificationRequest.for_reservation(event, rendered))
    except DeliveryFailure as e:
        logger.warning(
            "Reservation notification not delivered",
            purpose=purpose.value,
            reservation_id=str(event.reservation_id),
            failures=e.failures,
        )
    except Exception:
        logger.exception(
            "Reservation notification failed",
            purpose=purpose.value,
            reservation_id=str(event.reservation_id),
        )
