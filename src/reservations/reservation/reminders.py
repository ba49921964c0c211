"""Reminder scheduler — periodic scan that reminds customers of upcoming visits.

Every ``period`` the scheduler looks at the window
``[now + lead_time, now + lead_time + period)`` and sends one reminder per
CONFIRMED reservation in it that has not been reminded yet. A reservation
is marked as reminded only after its reminder went out, so a failed send
is retried on the next tick while the reservation is still in the window.

Only one scan runs at a time. A tick that arrives while a scan is in
progress is skipped.
"""

import asyncio
import threading
import time
from datetime import UTC, datetime, timedelta
from enum import Enum

import structlog
from protean.utils.globals import current_domain

from reservations.domain import reservations
from reservations.notification.dispatch import send_notification
from reservations.notification.request import NotificationRequest
from reservations.reservation.locks import reservation_lock
from reservations.reservation.reservation import Reservation, as_utc
from reservations.templates.reminder import ReminderTemplate
from reservations.templates.settings import TemplateSettings, current_template_settings

logger = structlog.get_logger(__name__)

REMINDER_LEAD_TIME = timedelta(hours=4)
REMINDER_PERIOD = timedelta(minutes=5)


class SchedulerState(Enum):
    IDLE = "IDLE"
    SCANNING = "SCANNING"


class ReminderScheduler:
    def __init__(
        self,
        domain=None,
        period: timedelta = REMINDER_PERIOD,
        lead_time: timedelta = REMINDER_LEAD_TIME,
        template_settings: TemplateSettings | None = None,
    ):
        if period <= timedelta(0):
            raise ValueError(f"Reminder period must be positive, got {period}")

        self.domain = domain or reservations
        self.period = period
        self.lead_time = lead_time
        self.template_settings = template_settings

        self._state = SchedulerState.IDLE
        self._scan_lock = threading.Lock()

    @property
    def state(self) -> SchedulerState:
        return self._state

    def reminder_window(self, now: datetime) -> tuple[datetime, datetime]:
        """Half-open ``[start, end)`` window of reservation times due for a reminder."""
        start = as_utc(now) + self.lead_time
        return start, start + self.period

    def tick(self, now: datetime | None = None) -> int | None:
        """Run one scan.

        Returns the number of reminders sent, or ``None`` if a scan was
        already in progress and this tick was skipped.
        """
        if not self._scan_lock.acquire(blocking=False):
            logger.warning("Reminder scan already in progress, skipping tick")
            return None

        try:
            self._state = SchedulerState.SCANNING
            return self._scan(now or datetime.now(UTC))
        finally:
            self._state = SchedulerState.IDLE
            self._scan_lock.release()

    def _scan(self, now: datetime) -> int:
        window = self.reminder_window(now)

        with self.domain.domain_context():
            settings = self.template_settings or current_template_settings()
            due = current_domain.repository_for(Reservation).find_due_for_reminder(*window)

            sent = 0
            for reservation in due:
                try:
                    if self._remind(reservation.id, window, settings):
                        sent += 1
                except Exception as e:
                    logger.error(
                        "Reservation reminder failed",
                        reservation_id=str(reservation.id),
                        error=str(e),
                    )

        logger.info(
            "Reminder scan complete",
            window_start=window[0].isoformat(),
            window_end=window[1].isoformat(),
            due=len(due),
            sent=sent,
        )
        return sent

    def _remind(self, reservation_id, window: tuple[datetime, datetime], settings: TemplateSettings) -> bool:
        """Send the reminder for one reservation and mark it as sent.

        The reservation is reloaded under its lock so a cancellation or
        reschedule committed since the scan query is honoured.
        """
        with reservation_lock(reservation_id):
            repo = current_domain.repository_for(Reservation)
            reservation = repo.find_by_id(reservation_id)

            if not reservation.is_awaiting_reminder():
                logger.info(
                    "Reservation no longer awaiting a reminder, skipping",
                    reservation_id=str(reservation_id),
                    status=reservation.status,
                )
                return False

            reservation_datetime = as_utc(reservation.reservation_datetime)
            if not window[0] <= reservation_datetime < window[1]:
                logger.info(
                    "Reservation moved out of the reminder window, skipping",
                    reservation_id=str(reservation_id),
                )
                return False

            rendered = ReminderTemplate.render(
                {
                    "customer_name": reservation.customer_name,
                    "reservation_datetime": reservation_datetime,
                    "party_size": reservation.party_size,
                },
                settings,
            )
            send_notification(NotificationRequest.for_reservation(reservation, rendered))

            reservation.mark_reminder_sent()
            repo.add(reservation)

        logger.info("Reminder sent", reservation_id=str(reservation_id))
        return True

    async def run(self, stop_event: asyncio.Event | None = None) -> None:
        """Tick every ``period`` until ``stop_event`` is set.

        The wait after each tick is shortened by the time the tick took, so
        consecutive windows stay adjacent while scans are shorter than the
        period.
        """
        stop_event = stop_event or asyncio.Event()
        logger.info(
            "Reminder scheduler started",
            period_seconds=self.period.total_seconds(),
            lead_time_seconds=self.lead_time.total_seconds(),
        )

        while not stop_event.is_set():
            started = time.monotonic()
            try:
                await asyncio.to_thread(self.tick)
            except Exception:
                logger.exception("Reminder tick failed")

            remaining = max(0.0, self.period.total_seconds() - (time.monotonic() - started))
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=remaining)
            except TimeoutError:
                pass

        logger.info("Reminder scheduler stopped")
