"""Reservation modification — command and handler.

Only the date-time and the party size can change, and only while the
reservation is CONFIRMED.
"""

from protean.fields import DateTime, Identifier, Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reservations.domain import reservations
from reservations.reservation.reservation import Reservation


@reservations.command(part_of="Reservation")
class UpdateReservation:
    """Move a reservation to a new date-time and party size."""

    reservation_id = Identifier(required=True)
    reservation_datetime = DateTime(required=True)
    party_size = Integer(required=True)


@reservations.command_handler(part_of=Reservation)
class UpdateReservationHandler:
    @handle(UpdateReservation)
    def update_reservation(self, command):
        repo = current_domain.repository_for(Reservation)
        reservation = repo.find_by_id(command.reservation_id)
        reservation.reschedule(
            reservation_datetime=command.reservation_datetime,
            party_size=command.party_size,
        )
        repo.add(reservation)
        return str(reservation.id)
