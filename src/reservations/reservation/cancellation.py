"""Reservation cancellation — command and handler."""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reservations.domain import reservations
from reservations.reservation.reservation import Reservation


@reservations.command(part_of="Reservation")
class CancelReservation:
    reservation_id = Identifier(required=True)


@reservations.command_handler(part_of=Reservation)
class CancelReservationHandler:
    @handle(CancelReservation)
    def cancel_reservation(self, command):
        repo = current_domain.repository_for(Reservation)
        reservation = repo.find_by_id(command.reservation_id)
        reservation.cancel()
        repo.add(reservation)
