"""Reservation error taxonomy.

Both errors subclass Protean's own exceptions so callers that already
handle ``ValidationError`` / ``ObjectNotFoundError`` keep working.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class InvalidReservation(ValidationError):
    """A business rule was violated (past date-time, cancelled reservation, double cancel).

    Raised with a ``{field: [messages]}`` dict, like ``ValidationError``.
    """


class ReservationNotFound(ObjectNotFoundError):
    """No reservation exists with the requested identifier."""

    def __init__(self, reservation_id):
        self.reservation_id = str(reservation_id)
        super().__init__(f"Reservation with id `{reservation_id}` does not exist")
