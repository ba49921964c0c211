"""Shared BDD fixtures and step definitions for reservations."""

from datetime import UTC, datetime, timedelta

import pytest
from pytest_bdd import given, parsers, then, when

from reservations.reservation.exceptions import InvalidReservation
from reservations.reservation.lifecycle import (
    cancel_reservation,
    create_reservation,
    get_reservation,
    list_upcoming,
)
from reservations.reservation.reminders import ReminderScheduler


@pytest.fixture()
def customer():
    return {
        "customer_name": "Ana Reyes",
        "phone_number": "+639170000002",
        "email": "ana@example.com",
    }


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def booked():
    """Reservations booked in the scenario, oldest first."""
    return []


def _book(customer, booked, party_size, when):
    reservation = create_reservation(
        reservation_datetime=when,
        party_size=party_size,
        **customer,
    )
    booked.append(reservation)
    return reservation


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a customer who prefers "{channel}" notifications'))
def customer_prefers(customer, channel):
    customer["notification_channel"] = channel


@given(parsers.cfparse("they booked a table for {party_size:d} in {days:d} days"))
def booked_in_days(customer, booked, party_size, days):
    _book(customer, booked, party_size, datetime.now(UTC) + timedelta(days=days))


@given(
    parsers.cfparse("they booked a table for {party_size:d} starting {hours:d} hours and {minutes:d} minutes from now")
)
def booked_soon(customer, booked, party_size, hours, minutes):
    _book(customer, booked, party_size, datetime.now(UTC) + timedelta(hours=hours, minutes=minutes))


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("they book a table for {party_size:d} in {days:d} days"))
def book_in_days(customer, booked, party_size, days):
    _book(customer, booked, party_size, datetime.now(UTC) + timedelta(days=days))


@when(parsers.cfparse("they try to book a table for {party_size:d} one hour ago"))
def book_in_past(customer, booked, error, party_size):
    try:
        _book(customer, booked, party_size, datetime.now(UTC) - timedelta(hours=1))
    except InvalidReservation as exc:
        error["exc"] = exc


@when("they cancel the reservation")
def cancel(booked):
    cancel_reservation(booked[0].id)


@when("they cancel the reservation again")
def cancel_again(booked, error):
    try:
        cancel_reservation(booked[0].id)
    except InvalidReservation as exc:
        error["exc"] = exc


@when("the reminder scan runs")
@when("the reminder scan runs again")
def reminder_scan():
    ReminderScheduler().tick()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the reservation status is "{status}"'))
def reservation_status_is(booked, status):
    assert get_reservation(booked[0].id).status == status


@then(parsers.cfparse("the reservation is for {party_size:d} guests"))
def reservation_party_size(booked, party_size):
    assert get_reservation(booked[0].id).party_size == party_size


@then("the reservation is marked as reminded")
def reservation_reminded(booked):
    assert get_reservation(booked[0].id).reminder_sent is True


@then("the booking is rejected")
@then("the second cancellation is rejected")
def rejected(error):
    assert isinstance(error["exc"], InvalidReservation)


@then(parsers.cfparse('{count:d} email with subject starting "{prefix}" is sent'))
def emails_sent(email_adapter, count, prefix):
    matching = [e for e in email_adapter.sent_emails if e["subject"].startswith(prefix)]
    assert len(matching) == count


@then(parsers.cfparse('no email with subject starting "{prefix}" is sent'))
def no_matching_email(email_adapter, prefix):
    assert not [e for e in email_adapter.sent_emails if e["subject"].startswith(prefix)]


@then("no email is sent")
def no_email(email_adapter):
    assert email_adapter.sent_emails == []


@then(parsers.cfparse("{count:d} text messages are sent"))
def texts_sent(sms_adapter, count):
    assert len(sms_adapter.sent_messages) == count


@then(parsers.cfparse('{count:d} text message mentioning "{text}" is sent'))
def texts_mentioning(sms_adapter, count, text):
    assert len([m for m in sms_adapter.sent_messages if text in m["body"]]) == count


@then(parsers.cfparse("they have {count:d} upcoming reservation"))
def upcoming_count(customer, count):
    assert len(list_upcoming(customer["email"])) == count
