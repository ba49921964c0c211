"""Reservations bounded context — table bookings and customer notifications.

Owns the Reservation aggregate and its lifecycle (create, update, cancel),
reacts to committed lifecycle events by notifying the customer over their
preferred channel (Email, SMS or both), and runs the reminder scan that
notifies customers shortly before their visit.
"""

import structlog
from protean.domain import Domain

reservations = Domain(name="reservations")

logger = structlog.get_logger(__name__)
