"""Reminder scheduler runner for the reservations domain.

Initialises the domain and runs the reminder scan on a fixed period:
reservations starting ``lead-time`` from now get their reminder.

Usage:
    python src/server.py                        # Scan every 5 minutes, 4 hours ahead
    python src/server.py --period 60            # Scan every minute
    python src/server.py --once                 # Run a single scan and exit
"""

import argparse
import asyncio
from datetime import timedelta

import structlog

from reservations.domain import reservations
from reservations.reservation.reminders import (
    REMINDER_LEAD_TIME,
    REMINDER_PERIOD,
    ReminderScheduler,
)
from reservations.utils.logging import add_context, configure_logging

logger = structlog.get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Reservation reminder scheduler")
    parser.add_argument(
        "--period",
        type=float,
        default=REMINDER_PERIOD.total_seconds(),
        help="Seconds between scans (default: %(default)s)",
    )
    parser.add_argument(
        "--lead-time",
        type=float,
        default=REMINDER_LEAD_TIME.total_seconds(),
        help="Seconds ahead of the reservation to send the reminder (default: %(default)s)",
    )
    parser.add_argument("--once", action="store_true", help="Run a single scan and exit")
    parser.add_argument("--log-dir", default="logs", help="Directory for log files")
    args = parser.parse_args()

    configure_logging(args.log_dir)
    add_context(service="reminder-scheduler")

    reservations.init()

    scheduler = ReminderScheduler(
        domain=reservations,
        period=timedelta(seconds=args.period),
        lead_time=timedelta(seconds=args.lead_time),
    )

    if args.once:
        sent = scheduler.tick()
        logger.info("Single reminder scan finished", sent=sent)
        return

    try:
        asyncio.run(scheduler.run())
    except KeyboardInterrupt:
        logger.info("Reminder scheduler interrupted")


if __name__ == "__main__":
    main()
