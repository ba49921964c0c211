"""Tests for the Reservation aggregate — creation, validation and events."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from reservations.reservation.events import ReservationCreated
from reservations.reservation.exceptions import InvalidReservation
from reservations.reservation.reservation import (
    NotificationChannel,
    Reservation,
    ReservationStatus,
    as_utc,
)


def _create(**overrides):
    defaults = {
        "customer_name": "Maria Santos",
        "phone_number": "+639171234567",
        "email": "maria@example.com",
        "reservation_datetime": datetime.now(UTC) + timedelta(days=2),
        "party_size": 4,
        "notification_channel": NotificationChannel.EMAIL.value,
    }
    defaults.update(overrides)
    return Reservation.create(**defaults)


class TestReservationCreation:
    def test_new_reservation_is_confirmed(self):
        reservation = _create()
        assert reservation.status == ReservationStatus.CONFIRMED.value

    def test_new_reservation_has_not_been_reminded(self):
        reservation = _create()
        assert reservation.reminder_sent is False
        assert reservation.is_awaiting_reminder() is True

    def test_fields_are_set(self):
        reservation = _create(party_size=6, notification_channel=NotificationChannel.BOTH.value)
        assert reservation.customer_name == "Maria Santos"
        assert reservation.email == "maria@example.com"
        assert reservation.phone_number == "+639171234567"
        assert reservation.party_size == 6
        assert reservation.notification_channel == NotificationChannel.BOTH.value

    def test_timestamps_are_set(self):
        reservation = _create()
        assert reservation.created_at is not None
        assert reservation.updated_at == reservation.created_at

    def test_past_datetime_rejected(self):
        with pytest.raises(InvalidReservation) as exc:
            _create(reservation_datetime=datetime.now(UTC) - timedelta(minutes=1))
        assert "reservation_datetime" in exc.value.messages

    def test_present_datetime_rejected(self):
        # Reached by the time the check runs, so it is not strictly in the future
        with pytest.raises(InvalidReservation):
            _create(reservation_datetime=datetime.now(UTC))

    def test_invalid_reservation_is_a_validation_error(self):
        from protean.exceptions import ValidationError

        with pytest.raises(ValidationError):
            _create(reservation_datetime=datetime.now(UTC) - timedelta(days=1))

    def test_zero_party_size_rejected(self):
        from protean.exceptions import ValidationError

        with pytest.raises(ValidationError):
            _create(party_size=0)

    def test_unknown_channel_rejected(self):
        from protean.exceptions import ValidationError

        with pytest.raises(ValidationError):
            _create(notification_channel="PIGEON")

    def test_naive_datetime_taken_as_utc(self):
        naive = (datetime.now(UTC) + timedelta(days=1)).replace(tzinfo=None)
        reservation = _create(reservation_datetime=naive)
        assert reservation.reservation_datetime == naive.replace(tzinfo=UTC)

    def test_create_raises_reservation_created(self):
        reservation = _create()
        assert len(reservation._events) == 1
        event = reservation._events[0]
        assert isinstance(event, ReservationCreated)
        assert event.reservation_id == str(reservation.id)
        assert event.customer_name == "Maria Santos"
        assert event.email == "maria@example.com"
        assert event.phone_number == "+639171234567"
        assert event.party_size == 4
        assert event.notification_channel == NotificationChannel.EMAIL.value


class TestAsUtc:
    def test_naive_value_gets_utc(self):
        value = datetime(2030, 1, 1, 18, 0)
        assert as_utc(value) == datetime(2030, 1, 1, 18, 0, tzinfo=UTC)

    def test_aware_value_is_converted(self):
        manila = timezone(timedelta(hours=8))
        value = datetime(2030, 1, 1, 18, 0, tzinfo=manila)
        assert as_utc(value) == datetime(2030, 1, 1, 10, 0, tzinfo=UTC)
        assert as_utc(value).tzinfo == UTC
