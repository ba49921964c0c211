"""Reservation lifecycle — the operations external callers use.

Each mutating operation processes one command synchronously: the handler
loads and changes the aggregate, the unit of work commits it, and only then
are the raised events delivered to subscribers. Failures of the operation
itself (``InvalidReservation``, ``ReservationNotFound``) surface here;
notification failures never do.
"""

from datetime import UTC, datetime

import structlog
from protean.utils.globals import current_domain

from reservations.reservation.cancellation import CancelReservation
from reservations.reservation.creation import CreateReservation
from reservations.reservation.locks import reservation_lock
from reservations.reservation.modification import UpdateReservation
from reservations.reservation.reservation import Reservation

logger = structlog.get_logger(__name__)


def create_reservation(
    customer_name: str,
    phone_number: str,
    email: str,
    reservation_datetime: datetime,
    party_size: int,
    notification_channel: str,
) -> Reservation:
    """Book a reservation and return it as persisted."""
    logger.info("Creating reservation", email=email)

    reservation_id = current_domain.process(
        CreateReservation(
            customer_name=customer_name,
            phone_number=phone_number,
            email=email,
            reservation_datetime=reservation_datetime,
            party_size=party_size,
            notification_channel=notification_channel,
        ),
        asynchronous=False,
    )

    logger.info("Reservation created", reservation_id=reservation_id)
    return get_reservation(reservation_id)


def cancel_reservation(reservation_id) -> None:
    """Cancel a CONFIRMED reservation."""
    logger.info("Cancelling reservation", reservation_id=str(reservation_id))

    with reservation_lock(reservation_id):
        current_domain.process(
            CancelReservation(reservation_id=str(reservation_id)),
            asynchronous=False,
        )

    logger.info("Reservation cancelled", reservation_id=str(reservation_id))


def update_reservation(reservation_id, reservation_datetime: datetime, party_size: int) -> Reservation:
    """Move a CONFIRMED reservation to a new future date-time and party size."""
    logger.info("Updating reservation", reservation_id=str(reservation_id))

    with reservation_lock(reservation_id):
        current_domain.process(
            UpdateReservation(
                reservation_id=str(reservation_id),
                reservation_datetime=reservation_datetime,
                party_size=party_size,
            ),
            asynchronous=False,
        )

    logger.info("Reservation updated", reservation_id=str(reservation_id))
    return get_reservation(reservation_id)


def get_reservation(reservation_id) -> Reservation:
    """Return the reservation, or raise ``ReservationNotFound``."""
    return current_domain.repository_for(Reservation).find_by_id(reservation_id)


def list_upcoming(email: str) -> list[Reservation]:
    """CONFIRMED reservations for ``email`` that are still ahead of us."""
    reservations = current_domain.repository_for(Reservation).find_upcoming_for_email(
        email=email,
        after=datetime.now(UTC),
    )
    logger.info("Retrieved upcoming reservations", email=email, count=len(reservations))
    return reservations
