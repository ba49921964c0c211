"""Notification dispatch — routes a rendered message to the channel adapters.

``EMAIL`` and ``SMS`` use one transport each, ``BOTH`` uses both. Every
transport is attempted even when an earlier one fails; failures are then
reported together as a single ``DeliveryFailure``.
"""

import structlog

from reservations.channel import get_channel
from reservations.notification.request import NotificationRequest
from reservations.reservation.reservation import NotificationChannel

logger = structlog.get_logger(__name__)

_TRANSPORTS = {
    NotificationChannel.EMAIL: (NotificationChannel.EMAIL,),
    NotificationChannel.SMS: (NotificationChannel.SMS,),
    NotificationChannel.BOTH: (NotificationChannel.EMAIL, NotificationChannel.SMS),
}


class DeliveryFailure(Exception):
    """One or more transports failed to deliver a notification."""

    def __init__(self, failures: dict[str, str]):
        self.failures = failures
        details = ", ".join(f"{transport}: {error}" for transport, error in failures.items())
        super().__init__(f"Notification delivery failed ({details})")


def send_notification(request: NotificationRequest) -> dict[str, dict]:
    """Send ``request`` through every transport its channel preference names.

    Returns the adapter result per transport. An unrecognised channel is
    logged and dropped.

    Raises:
        DeliveryFailure: after all transports were attempted, if any failed.
    """
    try:
        channel = NotificationChannel(request.channel)
    except ValueError:
        logger.warning("Unknown notification channel, dropping notification", channel=request.channel)
        return {}

    results: dict[str, dict] = {}
    failures: dict[str, str] = {}

    for transport in _TRANSPORTS[channel]:
        try:
            adapter = get_channel(transport.value)
            result = _dispatch_via_channel(adapter, transport, request)
        except Exception as e:
            result = {"status": "failed", "error": str(e)}

        results[transport.value] = result
        if result.get("status") == "sent":
            logger.info(
                "Notification sent",
                channel=transport.value,
                message_id=result.get("message_id"),
            )
        else:
            failures[transport.value] = result.get("error", "Unknown dispatch error")
            logger.error(
                "Notification dispatch failed",
                channel=transport.value,
                error=failures[transport.value],
            )

    if failures:
        raise DeliveryFailure(failures)

    return results


def _dispatch_via_channel(adapter, transport: NotificationChannel, request: NotificationRequest) -> dict:
    """Route dispatch to the correct adapter method. ``transport`` is EMAIL or SMS."""
    if transport == NotificationChannel.EMAIL:
        return adapter.send(
            to=request.email,
            subject=request.subject or "",
            body=request.body,
        )
    return adapter.send(
        to=request.phone_number,
        body=request.body,
    )
