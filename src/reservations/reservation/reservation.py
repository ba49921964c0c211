"""Reservation aggregate — a customer's booked table.

A reservation is created CONFIRMED and can be rescheduled (date-time and
party size) until it is cancelled. Cancellation is a status change, never
a deletion. The reminder scan flips ``reminder_sent`` once per reservation.

State Machine (2 states):
    CONFIRMED → CANCELLED
    CANCELLED is terminal
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Integer, String

from reservations.domain import reservations
from reservations.reservation.events import (
    ReservationCancelled,
    ReservationCreated,
    ReservationUpdated,
)
from reservations.reservation.exceptions import InvalidReservation


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ReservationStatus(Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class NotificationChannel(Enum):
    EMAIL = "EMAIL"
    SMS = "SMS"
    BOTH = "BOTH"


# ---------------------------------------------------------------------------
# State Machine
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    ReservationStatus.CONFIRMED: {ReservationStatus.CANCELLED},
    ReservationStatus.CANCELLED: set(),  # Terminal
}


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime. Naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _assert_in_future(field_name: str, value: datetime, now: datetime) -> None:
    if as_utc(value) <= now:
        raise InvalidReservation({field_name: ["Reservation date and time must be in the future"]})


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reservations.aggregate
class Reservation:
    """A table reservation and its notification preferences."""

    # Customer
    customer_name = String(required=True, max_length=100)
    phone_number = String(required=True, max_length=20)
    email = String(required=True, max_length=254)

    # Schedule
    reservation_datetime = DateTime(required=True)
    party_size = Integer(required=True, min_value=1)

    # Lifecycle
    status = String(choices=ReservationStatus, default=ReservationStatus.CONFIRMED.value)
    notification_channel = String(choices=NotificationChannel, required=True)
    reminder_sent = Boolean(default=False)

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        customer_name,
        phone_number,
        email,
        reservation_datetime,
        party_size,
        notification_channel,
    ):
        """Book a new CONFIRMED reservation. The date-time must be in the future."""
        now = datetime.now(UTC)
        _assert_in_future("reservation_datetime", reservation_datetime, now)

        reservation = cls(
            customer_name=customer_name,
            phone_number=phone_number,
            email=email,
            reservation_datetime=as_utc(reservation_datetime),
            party_size=party_size,
            status=ReservationStatus.CONFIRMED.value,
            notification_channel=notification_channel,
            reminder_sent=False,
            created_at=now,
            updated_at=now,
        )

        reservation.raise_(
            ReservationCreated(
                reservation_id=str(reservation.id),
                customer_name=reservation.customer_name,
                email=reservation.email,
                phone_number=reservation.phone_number,
                reservation_datetime=reservation.reservation_datetime,
                party_size=reservation.party_size,
                notification_channel=reservation.notification_channel,
                created_at=now,
            )
        )

        return reservation

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def is_cancelled(self) -> bool:
        return ReservationStatus(self.status) == ReservationStatus.CANCELLED

    def is_awaiting_reminder(self) -> bool:
        """True while the reservation is CONFIRMED and has not been reminded yet."""
        return not self.is_cancelled and not self.reminder_sent

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = ReservationStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            if current == target_status:
                raise InvalidReservation({"status": [f"Reservation is already {current.value.lower()}"]})
            raise InvalidReservation({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def reschedule(self, reservation_datetime, party_size):
        """Move the reservation to a new future date-time and party size."""
        if self.is_cancelled:
            raise InvalidReservation({"status": ["Cannot update a cancelled reservation"]})
        if party_size is None or party_size < 1:
            raise InvalidReservation({"party_size": ["Number of guests must be at least 1"]})

        now = datetime.now(UTC)
        _assert_in_future("reservation_datetime", reservation_datetime, now)

        self.reservation_datetime = as_utc(reservation_datetime)
        self.party_size = party_size
        self.updated_at = now

        self.raise_(
            ReservationUpdated(
                reservation_id=str(self.id),
                customer_name=self.customer_name,
                email=self.email,
                phone_number=self.phone_number,
                new_reservation_datetime=self.reservation_datetime,
                new_party_size=self.party_size,
                notification_channel=self.notification_channel,
                updated_at=now,
            )
        )

    def cancel(self):
        """Cancel the reservation. Cancelling twice is rejected."""
        self._assert_can_transition(ReservationStatus.CANCELLED)

        now = datetime.now(UTC)
        self.status = ReservationStatus.CANCELLED.value
        self.updated_at = now

        self.raise_(
            ReservationCancelled(
                reservation_id=str(self.id),
                customer_name=self.customer_name,
                email=self.email,
                phone_number=self.phone_number,
                notification_channel=self.notification_channel,
                cancelled_at=now,
            )
        )

    def mark_reminder_sent(self):
        """Record that the reminder went out. Allowed once, and only while CONFIRMED."""
        if self.is_cancelled:
            raise InvalidReservation({"status": ["Cannot remind a cancelled reservation"]})
        if self.reminder_sent:
            raise InvalidReservation({"reminder_sent": ["Reminder has already been sent"]})

        self.reminder_sent = True
        self.updated_at = datetime.now(UTC)
