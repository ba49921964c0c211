"""Domain events for the Reservation aggregate.

Each event is an immutable fact about a committed lifecycle transition.
They carry the customer's contact details and channel preference so
subscribers can notify the customer without reloading the reservation.
"""

from protean.fields import DateTime, Identifier, Integer, String

from reservations.domain import reservations


@reservations.event(part_of="Reservation")
class ReservationCreated:
    """A new reservation was booked and confirmed."""

    __version__ = 1

    reservation_id = Identifier(required=True)
    customer_name = String(required=True)
    email = String(required=True)
    phone_number = String(required=True)
    reservation_datetime = DateTime(required=True)
    party_size = Integer(required=True)
    notification_channel = String(required=True)
    created_at = DateTime(required=True)


@reservations.event(part_of="Reservation")
class ReservationUpdated:
    """A confirmed reservation was moved and/or resized."""

    __version__ = 1

    reservation_id = Identifier(required=True)
    customer_name = String(required=True)
    email = String(required=True)
    phone_number = String(required=True)
    new_reservation_datetime = DateTime(required=True)
    new_party_size = Integer(required=True)
    notification_channel = String(required=True)
    updated_at = DateTime(required=True)


@reservations.event(part_of="Reservation")
class ReservationCancelled:
    """A reservation was cancelled. Terminal."""

    __version__ = 1

    reservation_id = Identifier(required=True)
    customer_name = String(required=True)
    email = String(required=True)
    phone_number = String(required=True)
    notification_channel = String(required=True)
    cancelled_at = DateTime(required=True)
